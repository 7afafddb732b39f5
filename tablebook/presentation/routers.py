from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, Response
from starlette.concurrency import run_in_threadpool

from tablebook.core.repositories.reservation_repository import ReservationRepository
from tablebook.schemas.models import REQUEST_ERROR_PREFIX, Message
from tablebook.services.reservation_service import (
    DecodeError,
    encode,
    get_reservation_repository,
    list_reservations_service,
    make_reservation_service,
)

log = logging.getLogger(__name__)

router = APIRouter()


def get_reservation_repo() -> ReservationRepository:
    return get_reservation_repository()


def _json_response(content: bytes) -> Response:
    return Response(content=content, media_type="application/json")


@router.post("/reservations", response_model=None)
async def post_reservations(
    request: Request,
    reservation_repo: ReservationRepository = Depends(get_reservation_repo),
) -> Response:
    """
    Make a reservation at the restaurant

    Always 200; the message distinguishes:
      - "Reservation successfully made"
      - "A reservation already exists for this time period"
      - "Error processing the request: ..." for bodies that cannot be decoded
    """
    raw = await request.body()
    try:
        message = await run_in_threadpool(make_reservation_service, raw, reservation_repo)
    except DecodeError as e:
        log.info("undecodable reservation request: %s", e)
        message = Message(message=f"{REQUEST_ERROR_PREFIX}{e}")

    return _json_response(encode(message))


@router.get("/reservations", response_model=None)
def get_reservations(reservation_repo: ReservationRepository = Depends(get_reservation_repo)) -> Response:
    """
    Get all reservations, in the order they were made
    """
    return _json_response(encode(list_reservations_service(reservation_repo)))

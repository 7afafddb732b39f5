from __future__ import annotations

import logging
import threading
from functools import lru_cache
from typing import Sequence

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError

from tablebook.core.entities.reservation import Reservation
from tablebook.core.repositories.reservation_repository import ReservationRepository
from tablebook.core.use_cases.list_reservations import ListReservationsUseCase
from tablebook.core.use_cases.make_reservation import MakeReservationUseCase
from tablebook.infrastructure.database import create_database_engine, create_session_factory
from tablebook.infrastructure.repositories.reservation_repository_impl import SqlReservationRepository
from tablebook.infrastructure.repositories.reservation_repository_memory_impl import InMemoryReservationRepository
from tablebook.schemas.models import (
    RESERVATION_CONFLICT,
    RESERVATION_MADE,
    RESPONSE_ERROR_BODY,
    Message,
    ReservationBody,
    ReservationList,
)

log = logging.getLogger(__name__)

# Guards "read all, decide, append" for every admission in the process.
_admission_lock = threading.Lock()


class DecodeError(Exception):
    """Raise when a request body cannot be turned into a Reservation."""


@lru_cache(maxsize=1)
def get_reservation_repository() -> ReservationRepository:
    """
    The process-wide reservation store, created empty on first use
    """
    from tablebook.infrastructure.config import settings

    if settings.reservation_backend == "sql":
        engine = create_database_engine(settings.database_url)
        log.info("reservation store: sql (%s)", engine.url.render_as_string(hide_password=True))
        return SqlReservationRepository(create_session_factory(engine))

    log.info("reservation store: memory")
    return InMemoryReservationRepository()


def _describe_validation_error(error: PydanticValidationError) -> str:
    parts: list[str] = []
    for err in error.errors(include_url=False):
        location = ".".join(str(part) for part in err["loc"])
        parts.append(f"{location}: {err['msg']}" if location else err["msg"])
    return "; ".join(parts)


def decode_reservation(raw: bytes | str) -> Reservation:
    """
    Translate a JSON request body -> core Reservation entity.

    Raises DecodeError for malformed JSON, missing or unknown fields and badly formatted values.
    """
    try:
        body = ReservationBody.model_validate_json(raw)
    except PydanticValidationError as e:
        raise DecodeError(_describe_validation_error(e)) from e

    return Reservation(
        customer_name=body.customer_name,
        table_size=body.table_size,
        date=body.date,
        time=body.time,
    )


def _to_body(reservation: Reservation) -> ReservationBody:
    return ReservationBody(
        customer_name=reservation.customer_name,
        table_size=reservation.table_size,
        date=reservation.date,
        time=reservation.time,
    )


def _dump_json(payload: BaseModel | Sequence[ReservationBody]) -> bytes:
    if isinstance(payload, BaseModel):
        return payload.model_dump_json(by_alias=True).encode("utf-8")
    return ReservationList.dump_json(list(payload), by_alias=True)


def encode(payload: BaseModel | Sequence[ReservationBody]) -> bytes:
    """
    Serialize a response body; falls back to a fixed error message if serialization fails.
    """
    try:
        return _dump_json(payload)
    except PydanticSerializationError:
        log.exception("failed to serialize response")
        return RESPONSE_ERROR_BODY


def make_reservation_service(raw: bytes | str, reservation_repo: ReservationRepository) -> Message:
    """
    Raises DecodeError before touching the store when the body is not a valid reservation.
    """
    candidate = decode_reservation(raw)
    use_case = MakeReservationUseCase(reservation_repo=reservation_repo, lock=_admission_lock)

    result = use_case.execute(candidate)
    return Message(message=RESERVATION_MADE if result.admitted else RESERVATION_CONFLICT)


def list_reservations_service(reservation_repo: ReservationRepository) -> list[ReservationBody]:
    use_case = ListReservationsUseCase(reservation_repo=reservation_repo)
    return [_to_body(reservation) for reservation in use_case.execute()]

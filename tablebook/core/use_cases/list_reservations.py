from __future__ import annotations

from tablebook.core.entities.reservation import Reservation
from tablebook.core.repositories.reservation_repository import ReservationRepository


class ListReservationsUseCase:
    def __init__(self, *, reservation_repo: ReservationRepository) -> None:
        self._reservation_repo = reservation_repo

    def execute(self) -> tuple[Reservation, ...]:
        return tuple(self._reservation_repo.list_all())

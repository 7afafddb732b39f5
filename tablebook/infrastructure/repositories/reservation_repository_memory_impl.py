from __future__ import annotations

from tablebook.core.entities.reservation import Reservation
from tablebook.core.repositories.reservation_repository import ReservationRepository


class InMemoryReservationRepository(ReservationRepository):
    """
    Plain list storage. A list, not a set: a set keyed by Reservation equality would collapse
    different customers booked at the same date and time into one entry.
    """

    def __init__(self) -> None:
        self._reservations: list[Reservation] = []

    def list_all(self) -> list[Reservation]:
        return list(self._reservations)

    def append(self, reservation: Reservation) -> None:
        self._reservations.append(reservation)

    def count(self) -> int:
        return len(self._reservations)

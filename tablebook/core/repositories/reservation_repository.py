from __future__ import annotations

from abc import ABC, abstractmethod

from tablebook.core.entities.reservation import Reservation


class ReservationRepository(ABC):
    """
    Insertion-ordered, append-only container of reservations.

    Implementations must keep every appended reservation, including ones equal by identity key.
    """

    @abstractmethod
    def list_all(self) -> list[Reservation]:
        raise NotImplementedError

    @abstractmethod
    def append(self, reservation: Reservation) -> None:
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        raise NotImplementedError

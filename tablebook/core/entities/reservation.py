from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

SEATING_WINDOW = timedelta(hours=2)


@dataclass(frozen=True, slots=True, eq=False)
class Reservation:
    """
    A table booking.

    Two reservations are the same reservation when they share `date` and `time`; the customer
    and party size are not part of the identity. Storage never deduplicates on this key, see
    ReservationRepository.
    """
    customer_name: str
    table_size: int
    date: date
    time: time

    @property
    def identity_key(self) -> tuple[date, time]:
        return self.date, self.time

    def seating_ends_at(self) -> time:
        """
        Wall-clock end of the seating window. Wraps at midnight: a 23:00 booking ends at 01:00,
        which sorts before its own start.
        """
        return (datetime.combine(date.min, self.time) + SEATING_WINDOW).time()

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Reservation):
            return NotImplemented
        return self.identity_key == other.identity_key

    def __hash__(self) -> int:
        return hash(self.identity_key)

from __future__ import annotations

import logging
from contextlib import AbstractContextManager, nullcontext
from dataclasses import dataclass
from enum import Enum

from tablebook.core.entities.reservation import Reservation
from tablebook.core.repositories.reservation_repository import ReservationRepository

log = logging.getLogger(__name__)


class AdmissionOutcome(str, Enum):
    ADMITTED = "ADMITTED"
    REJECTED = "REJECTED"


@dataclass(frozen=True, slots=True)
class MakeReservationResult:
    outcome: AdmissionOutcome

    @property
    def admitted(self) -> bool:
        return self.outcome is AdmissionOutcome.ADMITTED


def has_intersection(candidate: Reservation, existing: Reservation) -> bool:
    """
    Return True when `candidate` conflicts with `existing` on the same date.

    A candidate conflicts when it starts at the same time as the existing reservation or strictly
    inside the existing seating window. Starting before an existing reservation never conflicts.
    Times of day are compared on the wall clock, so the window of a booking starting at 22:00 or
    later wraps past midnight and no later start on that date falls inside it.
    """
    if candidate.date != existing.date:
        return False

    new_start = candidate.time
    existing_start = existing.time

    return (
        new_start == existing_start
        or (existing_start < new_start < existing.seating_ends_at())
        # Dead clause: "candidate window ends inside the existing window" in its reduced form.
        # Never true; candidates starting before an existing reservation are admitted.
        or (existing_start < new_start < existing_start)
    )


class MakeReservationUseCase:
    """
    Admits a reservation unless it intersects one already on the book.

    The scan and the append run under `lock`, so concurrent admissions sharing one lock cannot
    both pass the check against the same stale read.
    """

    def __init__(
            self,
            *,
            reservation_repo: ReservationRepository,
            lock: AbstractContextManager | None = None,
    ) -> None:
        self._reservation_repo = reservation_repo
        self._lock = lock if lock is not None else nullcontext()

    def execute(self, candidate: Reservation) -> MakeReservationResult:
        with self._lock:
            conflict = next(
                (existing for existing in self._reservation_repo.list_all() if has_intersection(candidate, existing)),
                None,
            )
            if conflict is not None:
                log.info(
                    "rejected customer=%r date=%s time=%s: conflicts with %r at %s",
                    candidate.customer_name,
                    candidate.date.isoformat(),
                    candidate.time.isoformat(),
                    conflict.customer_name,
                    conflict.time.isoformat(),
                )
                return MakeReservationResult(outcome=AdmissionOutcome.REJECTED)

            self._reservation_repo.append(candidate)

        log.info(
            "admitted customer=%r table_size=%d date=%s time=%s",
            candidate.customer_name,
            candidate.table_size,
            candidate.date.isoformat(),
            candidate.time.isoformat(),
        )
        return MakeReservationResult(outcome=AdmissionOutcome.ADMITTED)

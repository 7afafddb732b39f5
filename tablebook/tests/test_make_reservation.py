from __future__ import annotations

import threading
from datetime import date, time

from tablebook.core.entities.reservation import Reservation
from tablebook.core.use_cases.list_reservations import ListReservationsUseCase
from tablebook.core.use_cases.make_reservation import AdmissionOutcome, MakeReservationUseCase
from tablebook.infrastructure.repositories.reservation_repository_memory_impl import InMemoryReservationRepository


def _reservation(name: str, size: int, hour: int, minute: int = 0, day: int = 1) -> Reservation:
    return Reservation(customer_name=name, table_size=size, date=date(2024, 6, day), time=time(hour, minute))


class _RecordingLock:
    """Counts how many times the admission critical section is entered."""

    def __init__(self) -> None:
        self.entered = 0
        self.held = False

    def __enter__(self) -> "_RecordingLock":
        self.entered += 1
        self.held = True
        return self

    def __exit__(self, *exc) -> None:
        self.held = False


class _LockCheckingRepository(InMemoryReservationRepository):
    def __init__(self, lock: _RecordingLock) -> None:
        super().__init__()
        self._lock = lock
        self.unguarded_calls = 0

    def list_all(self) -> list[Reservation]:
        if not self._lock.held:
            self.unguarded_calls += 1
        return super().list_all()

    def append(self, reservation: Reservation) -> None:
        if not self._lock.held:
            self.unguarded_calls += 1
        super().append(reservation)


def test_scenario_asymmetric_admissions_keep_insertion_order() -> None:
    repo = InMemoryReservationRepository()
    use_case = MakeReservationUseCase(reservation_repo=repo)

    assert use_case.execute(_reservation("Alice", 2, 18)).outcome is AdmissionOutcome.ADMITTED
    assert use_case.execute(_reservation("Bob", 4, 19)).outcome is AdmissionOutcome.REJECTED
    assert use_case.execute(_reservation("Carol", 3, 16)).outcome is AdmissionOutcome.ADMITTED

    listed = ListReservationsUseCase(reservation_repo=repo).execute()
    assert [(r.customer_name, r.time) for r in listed] == [("Alice", time(18)), ("Carol", time(16))]


def test_admission_is_append_only() -> None:
    repo = InMemoryReservationRepository()
    use_case = MakeReservationUseCase(reservation_repo=repo)

    attempts = [
        _reservation("A", 2, 10),  # admitted
        _reservation("B", 2, 10),  # same start
        _reservation("C", 2, 11),  # within window
        _reservation("D", 2, 12),  # boundary, admitted
        _reservation("E", 2, 12, 30),  # within D's window
        _reservation("F", 2, 10, day=2),  # other date, admitted
    ]
    results = [use_case.execute(candidate) for candidate in attempts]

    admitted = [c.customer_name for c, r in zip(attempts, results) if r.admitted]
    assert admitted == ["A", "D", "F"]
    assert [r.customer_name for r in repo.list_all()] == admitted
    assert repo.count() == 3


def test_exact_match_is_always_rejected() -> None:
    repo = InMemoryReservationRepository()
    use_case = MakeReservationUseCase(reservation_repo=repo)
    use_case.execute(_reservation("Alice", 2, 20))

    result = use_case.execute(_reservation("Bob", 8, 20))

    assert result.outcome is AdmissionOutcome.REJECTED
    assert not result.admitted
    assert repo.count() == 1


def test_scan_and_append_run_inside_the_lock() -> None:
    lock = _RecordingLock()
    repo = _LockCheckingRepository(lock)
    use_case = MakeReservationUseCase(reservation_repo=repo, lock=lock)

    use_case.execute(_reservation("Alice", 2, 18))
    use_case.execute(_reservation("Bob", 2, 18))

    assert lock.entered == 2
    assert repo.unguarded_calls == 0


def test_concurrent_identical_requests_admit_exactly_one() -> None:
    repo = InMemoryReservationRepository()
    lock = threading.Lock()
    barrier = threading.Barrier(8)

    def _attempt(i: int) -> None:
        barrier.wait()
        MakeReservationUseCase(reservation_repo=repo, lock=lock).execute(_reservation(f"guest-{i}", 2, 19))

    threads = [threading.Thread(target=_attempt, args=(i,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert repo.count() == 1

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import sessionmaker

from tablebook.core.entities.reservation import Reservation
from tablebook.core.repositories.reservation_repository import ReservationRepository
from tablebook.infrastructure.models.models import ReservationModel


class SqlReservationRepository(ReservationRepository):
    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def list_all(self) -> list[Reservation]:
        with self._session_factory() as db:
            rows = db.scalars(select(ReservationModel).order_by(ReservationModel.id)).all()
            return [self._to_entity(row) for row in rows]

    def append(self, reservation: Reservation) -> None:
        with self._session_factory() as db:
            db.add(
                ReservationModel(
                    customer_name=reservation.customer_name,
                    table_size=reservation.table_size,
                    date=reservation.date,
                    time=reservation.time,
                )
            )
            db.commit()

    def count(self) -> int:
        with self._session_factory() as db:
            return db.scalar(select(func.count()).select_from(ReservationModel)) or 0

    @staticmethod
    def _to_entity(row: ReservationModel) -> Reservation:
        return Reservation(
            customer_name=row.customer_name,
            table_size=row.table_size,
            date=row.date,
            time=row.time,
        )

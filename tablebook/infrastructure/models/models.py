from __future__ import annotations

import datetime as dt

from sqlalchemy import Date, Integer, String, Time
from sqlalchemy.orm import Mapped, mapped_column

from tablebook.infrastructure.database import Base


class ReservationModel(Base):
    __tablename__ = "reservations"

    # Surrogate key: rows equal by (date, time) must coexist, and id order is insertion order.
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    customer_name: Mapped[str] = mapped_column(String, nullable=False)
    table_size: Mapped[int] = mapped_column(Integer, nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    time: Mapped[dt.time] = mapped_column(Time, nullable=False)

from __future__ import annotations

import datetime as dt
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, TypeAdapter, field_validator

RESERVATION_MADE = "Reservation successfully made"
RESERVATION_CONFLICT = "A reservation already exists for this time period"
REQUEST_ERROR_PREFIX = "Error processing the request: "
RESPONSE_ERROR_BODY = b'{"message": "Error processing the response"}'

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")
# Local time only: no offset or "Z" suffix.
_ISO_LOCAL_TIME = re.compile(r"\d{2}:\d{2}(:\d{2}(\.\d{1,6})?)?")


class ReservationBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    customer_name: str = Field(alias="customerName")
    table_size: PositiveInt = Field(alias="tableSize")
    date: dt.date
    time: dt.time

    @field_validator("date", mode="before")
    @classmethod
    def _iso_date(cls, value: Any) -> Any:
        """Only YYYY-MM-DD text or a date; no timestamps or datetimes."""
        if isinstance(value, str):
            if not _ISO_DATE.fullmatch(value):
                raise ValueError("date must be an ISO-8601 date (YYYY-MM-DD)")
        elif isinstance(value, dt.datetime) or not isinstance(value, dt.date):
            raise ValueError("date must be an ISO-8601 date (YYYY-MM-DD)")
        return value

    @field_validator("time", mode="before")
    @classmethod
    def _iso_local_time(cls, value: Any) -> Any:
        if isinstance(value, str):
            if not _ISO_LOCAL_TIME.fullmatch(value):
                raise ValueError("time must be a local ISO-8601 time (HH:MM[:SS]) without an offset")
        elif not isinstance(value, dt.time) or value.tzinfo is not None:
            raise ValueError("time must be a local ISO-8601 time (HH:MM[:SS]) without an offset")
        return value


class Message(BaseModel):
    message: str


ReservationList = TypeAdapter(list[ReservationBody])

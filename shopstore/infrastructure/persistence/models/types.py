"""Column types that speak the entities' string dialect.

Entities keep every attribute as a string.  These TypeDecorators let typed
columns (timestamp, numeric, integer) accept those strings on the way in and
hand strings back on the way out, so rows map 1:1 onto attribute records.

An empty string is bound as NULL.  NULL is returned as None; the repository
turns it into "" when hydrating.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from sqlalchemy import DateTime, Integer, Numeric
from sqlalchemy.types import TypeDecorator

from shopstore.domain.models.temporal import format_datetime, parse_datetime


class StringDateTime(TypeDecorator):
    """``YYYY-MM-DD HH:MM:SS`` (UTC) <-> naive UTC DATETIME column."""

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Any) -> datetime | None:
        if value is None or value == "":
            return None
        if isinstance(value, datetime):
            return value
        # raises MalformedTimestampError
        return parse_datetime(value).replace(tzinfo=None)

    def process_result_value(self, value: Any, dialect: Any) -> str | None:
        if value is None:
            return None
        return format_datetime(value)


class StringNumeric(TypeDecorator):
    """Decimal string <-> NUMERIC column.  "19.9900" comes back as "19.99"."""

    impl = Numeric
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Any) -> Decimal | None:
        if value is None or value == "":
            return None
        try:
            return Decimal(str(value))
        except InvalidOperation as exc:
            raise ValueError(f"invalid decimal {value!r}") from exc

    def process_result_value(self, value: Any, dialect: Any) -> str | None:
        if value is None:
            return None
        text = format(Decimal(value).normalize(), "f")
        return "0" if text == "-0" else text


class StringInteger(TypeDecorator):
    """Integer string <-> INTEGER column."""

    impl = Integer
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Any) -> int | None:
        if value is None or value == "":
            return None
        return int(value)

    def process_result_value(self, value: Any, dialect: Any) -> str | None:
        if value is None:
            return None
        return str(value)

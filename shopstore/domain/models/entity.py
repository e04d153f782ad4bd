"""Base façade shared by every storefront entity.

An Entity owns exactly one AttributeRecord.  Typed accessors read and write
through it, metas go through a MetaStore bound to the same record, and the
three timestamps follow the convention in temporal.py.

Construction:
  - Entity() / Entity(data) / Entity.from_existing(data) wrap a row as-is,
    entirely clean.  An empty Entity() has no id and no defaults.
  - Entity.new() generates an id, stamps created_at/updated_at, sets
    soft_deleted_at to MAX_DATETIME and applies the subclass defaults.  All of
    this goes through the ordinary setters, so every default is dirty until
    mark_as_not_dirty() is called.

Every setter returns the same instance so calls chain:

    product.set_title("Mug").set_memo("seasonal").set_price_float(9.5)
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Self
from uuid import uuid4

from .columns import (
    COLUMN_CREATED_AT,
    COLUMN_ID,
    COLUMN_MEMO,
    COLUMN_PRICE,
    COLUMN_QUANTITY,
    COLUMN_SOFT_DELETED_AT,
    COLUMN_STATUS,
    COLUMN_UPDATED_AT,
)
from .metas import MetaStore
from .record import AttributeRecord
from .temporal import MAX_DATETIME, is_soft_deleted, now_datetime, parse_datetime


def new_id() -> str:
    """Opaque unique identifier for a new entity."""
    return uuid4().hex


def as_text(value: str | Enum) -> str:
    # str-mixin enums would otherwise be stored as the member, not its value
    return value.value if isinstance(value, Enum) else value


def float_to_str(value: float) -> str:
    """Shortest plain decimal form that reads back as the same float.

    49.95 -> "49.95", 10.0 -> "10", 1e-11 -> "0.00000000001".  Raises
    ValueError for NaN and infinities, which have no decimal form.
    """
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"cannot store non-finite number {value!r}")
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def str_to_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        return 0.0
    return number if math.isfinite(number) else 0.0


def str_to_int(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        try:
            return int(float(value))
        except (ValueError, OverflowError):
            return 0


class Entity:
    """Typed façade over an AttributeRecord plus its metas and timestamps."""

    __slots__ = ("_record", "_metas")

    def __init__(self, data: Mapping[str, str] | None = None) -> None:
        self._record = AttributeRecord(data)
        self._metas = MetaStore(self._record)

    @classmethod
    def from_existing(cls, data: Mapping[str, str]) -> Self:
        """Wrap a stored row.  Nothing is dirty afterwards."""
        return cls(data)

    @classmethod
    def new(cls) -> Self:
        """A fresh entity with a generated id and the entity's defaults."""
        now = now_datetime()
        entity = cls()
        (
            entity.set_id(new_id())
            .set_created_at(now)
            .set_updated_at(now)
            .set_soft_deleted_at(MAX_DATETIME)
            .set_metas({})
        )
        entity._apply_defaults()
        return entity

    def _apply_defaults(self) -> None:
        """Hook for subclasses: set status and typed defaults on new()."""

    # --- attribute record ---

    def get(self, name: str) -> str:
        return self._record.get(name)

    def set(self, name: str, value: str) -> Self:
        self._record.set(name, value)
        return self

    def data(self) -> dict[str, str]:
        return self._record.data()

    def data_changed(self) -> dict[str, str]:
        return self._record.data_changed()

    def is_dirty(self) -> bool:
        return self._record.is_dirty()

    def mark_as_not_dirty(self) -> None:
        self._record.mark_as_not_dirty()

    # --- identity, status, memo ---

    @property
    def id(self) -> str:
        return self._record.get(COLUMN_ID)

    def set_id(self, id: str) -> Self:
        return self.set(COLUMN_ID, id)

    @property
    def status(self) -> str:
        return self._record.get(COLUMN_STATUS)

    def set_status(self, status: str | Enum) -> Self:
        return self.set(COLUMN_STATUS, as_text(status))

    @property
    def memo(self) -> str:
        return self._record.get(COLUMN_MEMO)

    def set_memo(self, memo: str) -> Self:
        return self.set(COLUMN_MEMO, memo)

    # --- timestamps ---

    @property
    def created_at(self) -> str:
        return self._record.get(COLUMN_CREATED_AT)

    def set_created_at(self, created_at: str) -> Self:
        return self.set(COLUMN_CREATED_AT, created_at)

    def created_at_datetime(self) -> datetime:
        return parse_datetime(self.created_at)

    @property
    def updated_at(self) -> str:
        return self._record.get(COLUMN_UPDATED_AT)

    def set_updated_at(self, updated_at: str) -> Self:
        return self.set(COLUMN_UPDATED_AT, updated_at)

    def updated_at_datetime(self) -> datetime:
        return parse_datetime(self.updated_at)

    @property
    def soft_deleted_at(self) -> str:
        return self._record.get(COLUMN_SOFT_DELETED_AT)

    def set_soft_deleted_at(self, soft_deleted_at: str) -> Self:
        """Stored as given; format is only checked by soft_deleted_at_datetime()."""
        return self.set(COLUMN_SOFT_DELETED_AT, soft_deleted_at)

    def soft_deleted_at_datetime(self) -> datetime:
        return parse_datetime(self.soft_deleted_at)

    def is_soft_deleted(self) -> bool:
        return is_soft_deleted(self.soft_deleted_at)

    # --- metas ---

    def metas(self) -> dict[str, str]:
        """All metas.  Raises MalformedMetadataError on a corrupt blob."""
        return self._metas.all()

    def meta(self, key: str) -> str:
        """Single meta value; "" when missing or when the blob is corrupt."""
        return self._metas.get(key)

    def set_metas(self, metas: Mapping[str, str]) -> Self:
        self._metas.replace(metas)
        return self

    def upsert_metas(self, metas: Mapping[str, str]) -> Self:
        self._metas.merge(metas)
        return self

    def set_meta(self, key: str, value: str) -> Self:
        self._metas.set(key, value)
        return self

    def remove_meta(self, key: str) -> Self:
        self._metas.remove(key)
        return self

    def remove_metas(self, keys: Iterable[str]) -> Self:
        self._metas.remove_many(keys)
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, status={self.status!r})"


class PricedEntity(Entity):
    """Entity carrying a decimal-string price and an integer-string quantity.

    The string accessors expose the stored text; the *_float / *_int variants
    coerce, reading 0 for empty or unparseable values.
    """

    __slots__ = ()

    @property
    def price(self) -> str:
        return self.get(COLUMN_PRICE)

    def set_price(self, price: str) -> Self:
        return self.set(COLUMN_PRICE, price)

    @property
    def price_float(self) -> float:
        return str_to_float(self.price)

    def set_price_float(self, price: float) -> Self:
        return self.set_price(float_to_str(price))

    @property
    def quantity(self) -> str:
        return self.get(COLUMN_QUANTITY)

    def set_quantity(self, quantity: str) -> Self:
        return self.set(COLUMN_QUANTITY, quantity)

    @property
    def quantity_int(self) -> int:
        return str_to_int(self.quantity)

    def set_quantity_int(self, quantity: int) -> Self:
        return self.set_quantity(str(quantity))

    def total_float(self) -> float:
        """price * quantity."""
        return self.price_float * self.quantity_int

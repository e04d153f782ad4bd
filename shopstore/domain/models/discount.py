"""Discount entity and discount code generation.

A discount is redeemed by its code.  amount is interpreted according to type:
a percentage off (PERCENT) or a fixed sum off (AMOUNT).  starts_at/ends_at
default to NULL_DATETIME, meaning "no window set".
"""

from __future__ import annotations

import secrets
from datetime import datetime
from enum import Enum
from typing import Self

from .columns import (
    COLUMN_AMOUNT,
    COLUMN_CODE,
    COLUMN_DESCRIPTION,
    COLUMN_ENDS_AT,
    COLUMN_STARTS_AT,
    COLUMN_TITLE,
    COLUMN_TYPE,
)
from .entity import Entity, as_text, float_to_str, str_to_float
from .enums import DiscountStatus, DiscountType
from .temporal import NULL_DATETIME, parse_datetime

# Consonants and digits only: no vowels (no accidental words) and no
# look-alikes such as 0/O and 1/I.
DISCOUNT_CODE_ALPHABET = "BCDFGHJKLMNPQRSTVWXYZ23456789"
DISCOUNT_CODE_LENGTH = 12


def generate_discount_code(length: int = DISCOUNT_CODE_LENGTH) -> str:
    if length <= 0:
        raise ValueError(f"length must be positive, got {length}")
    return "".join(secrets.choice(DISCOUNT_CODE_ALPHABET) for _ in range(length))


class Discount(Entity):
    __slots__ = ()

    def _apply_defaults(self) -> None:
        self.set_status(DiscountStatus.DRAFT).set_type(DiscountType.PERCENT)
        self.set_title("").set_description("").set_memo("")
        self.set_amount(0).set_code(generate_discount_code())
        self.set_starts_at(NULL_DATETIME).set_ends_at(NULL_DATETIME)

    @property
    def title(self) -> str:
        return self.get(COLUMN_TITLE)

    def set_title(self, title: str) -> Self:
        return self.set(COLUMN_TITLE, title)

    @property
    def description(self) -> str:
        return self.get(COLUMN_DESCRIPTION)

    def set_description(self, description: str) -> Self:
        return self.set(COLUMN_DESCRIPTION, description)

    @property
    def code(self) -> str:
        return self.get(COLUMN_CODE)

    def set_code(self, code: str) -> Self:
        return self.set(COLUMN_CODE, code)

    @property
    def type(self) -> str:
        return self.get(COLUMN_TYPE)

    def set_type(self, type: str | Enum) -> Self:
        return self.set(COLUMN_TYPE, as_text(type))

    @property
    def amount(self) -> float:
        return str_to_float(self.get(COLUMN_AMOUNT))

    def set_amount(self, amount: float) -> Self:
        return self.set(COLUMN_AMOUNT, float_to_str(amount))

    @property
    def starts_at(self) -> str:
        return self.get(COLUMN_STARTS_AT)

    def set_starts_at(self, starts_at: str) -> Self:
        return self.set(COLUMN_STARTS_AT, starts_at)

    def starts_at_datetime(self) -> datetime:
        return parse_datetime(self.starts_at)

    @property
    def ends_at(self) -> str:
        return self.get(COLUMN_ENDS_AT)

    def set_ends_at(self, ends_at: str) -> Self:
        return self.set(COLUMN_ENDS_AT, ends_at)

    def ends_at_datetime(self) -> datetime:
        return parse_datetime(self.ends_at)

    def is_active(self) -> bool:
        return self.status == DiscountStatus.ACTIVE

    def is_draft(self) -> bool:
        return self.status == DiscountStatus.DRAFT

    def is_inactive(self) -> bool:
        return self.status == DiscountStatus.INACTIVE

    def is_amount(self) -> bool:
        return self.type == DiscountType.AMOUNT

    def is_percent(self) -> bool:
        return self.type == DiscountType.PERCENT

"""Product entity."""

from __future__ import annotations

import re
from typing import Self

from .columns import COLUMN_DESCRIPTION, COLUMN_SHORT_DESCRIPTION, COLUMN_TITLE
from .entity import PricedEntity
from .enums import ProductStatus

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """Lower-case, dash-separated form of text: "Hello World!" -> "hello-world"."""
    return _NON_SLUG_CHARS.sub("-", text.lower()).strip("-")


class Product(PricedEntity):
    """quantity is the stock on hand; a product priced at 0 is free."""

    __slots__ = ()

    def _apply_defaults(self) -> None:
        self.set_status(ProductStatus.DRAFT)
        self.set_title("").set_description("").set_short_description("").set_memo("")
        self.set_price_float(0).set_quantity_int(0)

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
    def short_description(self) -> str:
        return self.get(COLUMN_SHORT_DESCRIPTION)

    def set_short_description(self, short_description: str) -> Self:
        return self.set(COLUMN_SHORT_DESCRIPTION, short_description)

    def slug(self) -> str:
        return slugify(self.title)

    def is_free(self) -> bool:
        return self.price_float == 0

    def is_active(self) -> bool:
        return self.status == ProductStatus.ACTIVE

    def is_draft(self) -> bool:
        return self.status == ProductStatus.DRAFT

    def is_disabled(self) -> bool:
        return self.status == ProductStatus.DISABLED

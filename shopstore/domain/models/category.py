"""Category entity: a node in the product category tree."""

from __future__ import annotations

from typing import Self

from .columns import COLUMN_DESCRIPTION, COLUMN_PARENT_ID, COLUMN_TITLE
from .entity import Entity
from .enums import CategoryStatus


class Category(Entity):
    """parent_id is "" for a root category."""

    __slots__ = ()

    def _apply_defaults(self) -> None:
        self.set_status(CategoryStatus.DRAFT)
        self.set_title("").set_description("").set_memo("").set_parent_id("")

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
    def parent_id(self) -> str:
        return self.get(COLUMN_PARENT_ID)

    def set_parent_id(self, parent_id: str) -> Self:
        return self.set(COLUMN_PARENT_ID, parent_id)

    def is_root(self) -> bool:
        return self.parent_id == ""

    def is_active(self) -> bool:
        return self.status == CategoryStatus.ACTIVE

    def is_draft(self) -> bool:
        return self.status == CategoryStatus.DRAFT

    def is_inactive(self) -> bool:
        return self.status == CategoryStatus.INACTIVE

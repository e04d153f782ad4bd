"""Media entity: an image, video or file attached to another entity."""

from __future__ import annotations

from typing import Self

from .columns import (
    COLUMN_DESCRIPTION,
    COLUMN_ENTITY_ID,
    COLUMN_MEDIA_TYPE,
    COLUMN_MEDIA_URL,
    COLUMN_SEQUENCE,
    COLUMN_TITLE,
)
from .entity import Entity, str_to_int
from .enums import MediaStatus


class Media(Entity):
    """entity_id points at the owner (usually a product); sequence orders
    media of the same owner.  type is a MIME type such as "image/png".
    """

    __slots__ = ()

    def _apply_defaults(self) -> None:
        self.set_status(MediaStatus.DRAFT)
        self.set_title("").set_description("").set_memo("")
        self.set_entity_id("").set_url("").set_type("").set_sequence(0)

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
    def entity_id(self) -> str:
        return self.get(COLUMN_ENTITY_ID)

    def set_entity_id(self, entity_id: str) -> Self:
        return self.set(COLUMN_ENTITY_ID, entity_id)

    @property
    def url(self) -> str:
        return self.get(COLUMN_MEDIA_URL)

    def set_url(self, url: str) -> Self:
        return self.set(COLUMN_MEDIA_URL, url)

    @property
    def type(self) -> str:
        return self.get(COLUMN_MEDIA_TYPE)

    def set_type(self, type: str) -> Self:
        return self.set(COLUMN_MEDIA_TYPE, type)

    @property
    def sequence(self) -> int:
        return str_to_int(self.get(COLUMN_SEQUENCE))

    def set_sequence(self, sequence: int) -> Self:
        return self.set(COLUMN_SEQUENCE, str(sequence))

    def is_active(self) -> bool:
        return self.status == MediaStatus.ACTIVE

    def is_draft(self) -> bool:
        return self.status == MediaStatus.DRAFT

    def is_inactive(self) -> bool:
        return self.status == MediaStatus.INACTIVE

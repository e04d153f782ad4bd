"""Metadata ("metas") extension store.

A free-form ``dict[str, str]`` persisted as JSON text inside one reserved
attribute of an AttributeRecord.  The stored text is either a JSON object or
the literal ``null``; empty, absent and ``null`` all decode to ``{}``.

Error policy:
  - all() and every mutation that depends on reading first (merge, set,
    remove, remove_many) raise MalformedMetadataError and write nothing.
  - get() never raises: on a malformed blob it logs a warning and returns "".

Decoding goes through a pydantic TypeAdapter so that non-object JSON and
non-string values are rejected exactly as a typed ``dict[str, str]`` decode
would reject them.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping

from pydantic import TypeAdapter, ValidationError

from .columns import COLUMN_METAS
from .errors import MalformedMetadataError
from .record import AttributeRecord

logger = logging.getLogger(__name__)

_METAS_ADAPTER: TypeAdapter[dict[str, str] | None] = TypeAdapter(dict[str, str] | None)


def decode_metas(raw: str) -> dict[str, str]:
    """Decode stored metas text.  Raises MalformedMetadataError."""
    if raw == "":
        return {}
    try:
        decoded = _METAS_ADAPTER.validate_json(raw)
    except ValidationError as exc:
        raise MalformedMetadataError(f"metas is not a JSON object of strings: {raw!r}") from exc
    return decoded or {}


def encode_metas(metas: Mapping[str, str]) -> str:
    return json.dumps(dict(metas))


class MetaStore:
    """View over the metas attribute of a single record."""

    __slots__ = ("_record", "_column")

    def __init__(self, record: AttributeRecord, column: str = COLUMN_METAS) -> None:
        self._record = record
        self._column = column

    def all(self) -> dict[str, str]:
        return decode_metas(self._record.get(self._column))

    def get(self, key: str) -> str:
        try:
            metas = self.all()
        except MalformedMetadataError:
            logger.warning("ignoring malformed %s while reading key %r", self._column, key)
            return ""
        return metas.get(key, "")

    def replace(self, metas: Mapping[str, str]) -> None:
        """Overwrite the whole mapping.  Marks the attribute dirty."""
        self._record.set(self._column, encode_metas(metas))

    def merge(self, metas: Mapping[str, str]) -> None:
        """Overlay ``metas`` on the current mapping; incoming keys win."""
        current = self.all()
        current.update(metas)
        self.replace(current)

    def set(self, key: str, value: str) -> None:
        self.merge({key: value})

    def remove(self, key: str) -> None:
        self.remove_many([key])

    def remove_many(self, keys: Iterable[str]) -> None:
        """Drop ``keys``; keys that are not present are ignored."""
        current = self.all()
        for key in keys:
            current.pop(key, None)
        self.replace(current)

"""Attribute record with per-attribute dirty tracking.

Every entity stores its fields as a flat ``dict[str, str]`` (column name ->
column value).  Typed coercion happens only in the entity accessors; this
module never interprets values.

Lifecycle:
  - AttributeRecord() starts empty.
  - AttributeRecord(data) / from_existing(data) hydrates from a stored row and
    is entirely clean.
  - set() always marks the attribute dirty, including no-op writes.
  - mark_as_not_dirty() is called by the persistence layer after write-back.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Self


class AttributeRecord:
    """Mutable string-keyed attribute bag.

    Not internally synchronized: callers sharing an instance across threads
    must guard it themselves.
    """

    __slots__ = ("_data", "_dirty")

    def __init__(self, data: Mapping[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(data) if data else {}
        self._dirty: set[str] = set()

    @classmethod
    def from_existing(cls, data: Mapping[str, str]) -> Self:
        """Hydrate from a stored row.  Nothing is dirty afterwards."""
        return cls(data)

    def get(self, name: str) -> str:
        """Return the stored value, or "" when the attribute is absent."""
        return self._data.get(name, "")

    def has(self, name: str) -> bool:
        return name in self._data

    def set(self, name: str, value: str) -> Self:
        self._data[name] = value
        self._dirty.add(name)
        return self

    def data(self) -> dict[str, str]:
        """Full attribute map (a copy; mutating it does not touch the record)."""
        return dict(self._data)

    def data_changed(self) -> dict[str, str]:
        """Only the dirty attributes, each with its current value."""
        return {name: self._data[name] for name in self._dirty}

    def is_dirty(self, name: str | None = None) -> bool:
        if name is None:
            return bool(self._dirty)
        return name in self._dirty

    def mark_as_not_dirty(self) -> None:
        self._dirty.clear()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r}, dirty={sorted(self._dirty)!r})"

"""Lookup tables: suffix-key to CSS-value maps shipped as package data.

Each table lives in ``tables/data/<name>.json`` as a single JSON object.
Tables are loaded into a :class:`TableRegistry` once and shared read-only by
every category parser.
"""

from __future__ import annotations

import json
import logging
import threading
from dataclasses import dataclass
from importlib import resources
from types import MappingProxyType
from typing import Iterable, Mapping

logger = logging.getLogger(__name__)

TABLE_NAMES: tuple[str, ...] = (
    "padding",
    "margin",
    "space_between",
    "width",
    "height",
)


def _unique_pairs(pairs: list[tuple[str, str]]) -> dict[str, str]:
    """json object hook that rejects duplicate keys instead of keeping the last."""
    table: dict[str, str] = {}
    for key, value in pairs:
        if key in table:
            raise ValueError(f"Duplicate table key: {key!r}")
        if not isinstance(value, str):
            raise ValueError(f"Table value for {key!r} must be a string")
        table[key] = value
    return table


@dataclass(frozen=True)
class LookupTable:
    """Read-only mapping from a class suffix to a CSS value literal."""

    name: str
    entries: Mapping[str, str]

    @classmethod
    def from_json(cls, name: str, text: str) -> LookupTable:
        data = json.loads(text, object_pairs_hook=_unique_pairs)
        if not isinstance(data, dict):
            raise ValueError(f"Table {name!r} must be a JSON object")
        return cls(name=name, entries=MappingProxyType(data))

    def get(self, key: str) -> str | None:
        return self.entries.get(key)

    def keys(self) -> tuple[str, ...]:
        """All keys, in table order."""
        return tuple(self.entries)

    def __contains__(self, key: str) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)


class TableRegistry:
    """Every lookup table the category parsers need, keyed by table name."""

    def __init__(self, tables: Iterable[LookupTable]) -> None:
        self._tables: Mapping[str, LookupTable] = MappingProxyType(
            {table.name: table for table in tables}
        )

    @classmethod
    def load(cls, names: Iterable[str] = TABLE_NAMES) -> TableRegistry:
        """Load the named tables from the embedded data assets."""
        data_dir = resources.files("breeze.tables") / "data"
        tables = []
        for name in names:
            text = (data_dir / f"{name}.json").read_text(encoding="utf-8")
            table = LookupTable.from_json(name, text)
            logger.debug("Loaded table %s (%d entries)", name, len(table))
            tables.append(table)
        return cls(tables)

    def __getitem__(self, name: str) -> LookupTable:
        try:
            return self._tables[name]
        except KeyError:
            raise KeyError(f"No lookup table named {name!r}") from None

    def __contains__(self, name: str) -> bool:
        return name in self._tables

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._tables)


_default: TableRegistry | None = None
_default_lock = threading.Lock()


def default_registry() -> TableRegistry:
    """Return the process-wide registry, loading it on first call only."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = TableRegistry.load()
    return _default

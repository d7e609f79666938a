"""TOML document container."""

from __future__ import annotations

from dataclasses import dataclass, field

from .nodes import Decor, Entry, Key, Table, TomlItem


@dataclass
class TomlDocument:
    root: Table = field(default_factory=Table)
    # Comments and blank lines after the last entry or table.
    trailing: str = ""

    def add_entry(self, key: Key, item: TomlItem, decor: Decor | None = None) -> None:
        self.root.add_entry(key, item, decor)

    def entries(self) -> list[Entry]:
        return self.root.entries

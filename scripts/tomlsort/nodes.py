"""Node definitions for the trivia-carrying TOML tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal


ScalarKind = Literal["string", "integer", "float", "boolean", "datetime"]


@dataclass(slots=True)
class Decor:
    """Non-semantic text around a node: whitespace, comments, blank lines."""

    prefix: str = ""
    suffix: str = ""


@dataclass(slots=True)
class Key:
    name: str
    raw: str


@dataclass(slots=True)
class Scalar:
    kind: ScalarKind
    raw: str
    # Decoded content, only set for strings.
    content: str | None = None
    decor: Decor = field(default_factory=Decor)

    @property
    def is_string(self) -> bool:
        return self.kind == "string"


@dataclass(slots=True)
class Array:
    values: list["TomlValue"] = field(default_factory=list)
    trailing: str = ""
    trailing_comma: bool = False
    decor: Decor = field(default_factory=Decor)


@dataclass(slots=True)
class Entry:
    key: Key
    item: "TomlItem"
    decor: Decor | None = field(default_factory=Decor)


@dataclass(slots=True)
class InlineTable:
    entries: list[Entry] = field(default_factory=list)
    preamble: str = ""
    decor: Decor = field(default_factory=Decor)


@dataclass(slots=True)
class Table:
    entries: list[Entry] = field(default_factory=list)
    header: str | None = None
    implicit: bool = False
    decor: Decor = field(default_factory=Decor)

    def add_entry(self, key: Key, item: "TomlItem", decor: Decor | None = None) -> None:
        self.entries.append(Entry(key=key, item=item, decor=decor or Decor()))

    def value_entries(self) -> list[Entry]:
        return [entry for entry in self.entries if not isinstance(entry.item, (Table, ArrayOfTables))]

    def child_entries(self) -> list[Entry]:
        return [entry for entry in self.entries if isinstance(entry.item, (Table, ArrayOfTables))]

    @property
    def shows_header(self) -> bool:
        # Implicit tables only need a header once they hold values of their own.
        return self.header is not None and (not self.implicit or bool(self.value_entries()))


@dataclass(slots=True)
class ArrayOfTables:
    tables: list[Table] = field(default_factory=list)


TomlValue = Scalar | Array | InlineTable
TomlItem = TomlValue | Table | ArrayOfTables

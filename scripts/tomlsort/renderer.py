"""Serialize TomlDocuments back to TOML text."""

from __future__ import annotations

from dataclasses import dataclass

from .document import TomlDocument
from .nodes import Array, ArrayOfTables, Entry, InlineTable, Scalar, Table, TomlValue


@dataclass
class DocumentRenderer:
    def render(self, document: TomlDocument) -> str:
        chunks: list[str] = []
        self.render_table(document.root, chunks)
        chunks.append(document.trailing)
        return "".join(chunks)

    def render_table(self, table: Table, chunks: list[str], array_element: bool = False) -> None:
        if table.shows_header:
            open_, close = ("[[", "]]") if array_element else ("[", "]")
            chunks.append(f"{table.decor.prefix}{open_}{table.header}{close}{table.decor.suffix}\n")

        for entry in table.value_entries():
            chunks.append(f"{self._render_key(entry)}={self.render_value(entry.item)}\n")

        for entry in table.child_entries():
            if isinstance(entry.item, ArrayOfTables):
                for element in entry.item.tables:
                    self.render_table(element, chunks, array_element=True)
            else:
                self.render_table(entry.item, chunks)

    def render_value(self, value: TomlValue) -> str:
        if isinstance(value, Scalar):
            body = value.raw
        elif isinstance(value, Array):
            body = self._render_array(value)
        elif isinstance(value, InlineTable):
            body = self._render_inline_table(value)
        else:
            raise TypeError(f"Cannot render {type(value).__name__} as a value")
        return f"{value.decor.prefix}{body}{value.decor.suffix}"

    def _render_key(self, entry: Entry) -> str:
        decor = entry.decor
        if decor is None:
            return f"{entry.key.raw} "
        return f"{decor.prefix}{entry.key.raw}{decor.suffix}"

    def _render_array(self, array: Array) -> str:
        inner = ",".join(self.render_value(value) for value in array.values)
        comma = "," if array.trailing_comma and array.values else ""
        return f"[{inner}{comma}{array.trailing}]"

    def _render_inline_table(self, table: InlineTable) -> str:
        if not table.entries:
            return f"{{{table.preamble}}}"
        inner = ",".join(f"{self._render_key(entry)}={self.render_value(entry.item)}" for entry in table.entries)
        return f"{{{inner}}}"


def render_document(document: TomlDocument) -> str:
    return DocumentRenderer().render(document)


__all__ = ["DocumentRenderer", "render_document"]

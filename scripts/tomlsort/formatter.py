"""Formatter for TOML trivia trees.

Tables are sorted section by section, where a section is a run of sibling
entries not separated by a blank line. Inline tables are sorted as a single
section, arrays are laid out inline or one element per line, and scalars get
their quoting and spacing normalized. Every call returns fresh nodes; the
input tree is never modified.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Optional

from .config import KeyPriorityIndex, SortConfig
from .document import TomlDocument
from .logger import Logger, child_logger_name
from .nodes import Array, ArrayOfTables, Decor, Entry, InlineTable, Scalar, Table, TomlItem, TomlValue
from .utils import has_comment, starts_with_blank_line, strip_layout

ARRAY_INDENT = "\t"


class MalformedTreeError(Exception):
    def __init__(self, message: str, key: Optional[str] = None):
        self.message = message
        self.key = key
        if key:
            message = f"{message} (key {key!r})"
        super().__init__(message)


def split_sections(entries: list[Entry], is_boundary: Callable[[Entry], bool]) -> list[list[Entry]]:
    sections: list[list[Entry]] = []
    for entry in entries:
        if not sections or is_boundary(entry):
            sections.append([])
        sections[-1].append(entry)
    return sections


def sort_sections(
    entries: list[Entry], sort_key: Callable[[Entry], Any], is_boundary: Callable[[Entry], bool]
) -> list[Entry]:
    """Stable-sort entries inside each section, keeping sections in place.

    The leading trivia of a section's first entry (leading comments, the blank
    line that opened the section) belongs to the section, so it is moved onto
    whichever entry sorts first.
    """
    ordered: list[Entry] = []
    for section in split_sections(entries, is_boundary):
        leading = leading_trivia(section[0])
        section[0] = with_leading_trivia(section[0], "")
        section.sort(key=sort_key)
        section[0] = with_leading_trivia(section[0], leading + leading_trivia(section[0]))
        ordered.extend(section)
    return ordered


def priority_order(index: KeyPriorityIndex) -> Callable[[Entry], tuple[int, int, str]]:
    return lambda entry: index.sort_key(entry.key.name)


def _is_table_like(item: TomlItem) -> bool:
    return isinstance(item, (Table, ArrayOfTables))


def leading_trivia(entry: Entry) -> str:
    """Text rendered before an entry: its key prefix, or the header prefix of a table.

    A table without a header of its own renders its first child first, so the
    trivia is looked up there.
    """
    item = entry.item
    if isinstance(item, ArrayOfTables):
        return item.tables[0].decor.prefix if item.tables else ""
    if isinstance(item, Table):
        if item.shows_header:
            return item.decor.prefix
        return leading_trivia(item.entries[0]) if item.entries else ""
    return entry.decor.prefix


def with_leading_trivia(entry: Entry, text: str) -> Entry:
    """Copy of ``entry`` whose leading trivia, as found by ``leading_trivia``, is ``text``."""
    item = entry.item
    if isinstance(item, ArrayOfTables):
        if not item.tables:
            return entry
        first, *rest = item.tables
        first = replace(first, decor=replace(first.decor, prefix=text))
        return replace(entry, item=ArrayOfTables(tables=[first, *rest]))
    if isinstance(item, Table):
        if item.shows_header:
            return replace(entry, item=replace(item, decor=replace(item.decor, prefix=text)))
        if not item.entries:
            return entry
        first, *rest = item.entries
        return replace(entry, item=replace(item, entries=[with_leading_trivia(first, text), *rest]))
    return replace(entry, decor=replace(entry.decor, prefix=text))


def opens_section(entry: Entry) -> bool:
    return starts_with_blank_line(leading_trivia(entry))


def _wrap_trivia(text: str) -> str:
    trimmed = text.strip()
    return f" {trimmed}" if trimmed else ""


def _value_decor(decor: Decor, last: bool) -> Decor:
    return Decor(prefix=f"{_wrap_trivia(decor.prefix)} ", suffix=_wrap_trivia(decor.suffix) + (" " if last else ""))


def normalize_quotes(raw: str) -> str:
    # '...' becomes "..." unless it is a multi-line literal or needs escaping.
    if raw.startswith("'") and not raw.startswith("''") and "\\" not in raw and '"' not in raw:
        return f'"{raw[1:-1]}"'
    return raw


def _string_first(value: TomlValue) -> tuple[int, str]:
    if isinstance(value, Scalar) and value.is_string:
        return (0, value.content or "")
    return (1, "")


@dataclass
class TomlFormatter:
    config: SortConfig = field(default_factory=SortConfig)
    indent: str = ARRAY_INDENT
    enable_logger: bool = False

    def __post_init__(self):
        self.logger = Logger(
            config={"name": child_logger_name("formatter"), "is_enabled": self.enable_logger, "level": logging.DEBUG}
        ).logger

    def format_document(self, document: TomlDocument) -> TomlDocument:
        # Trailing trivia is re-attached by the caller.
        return TomlDocument(root=self.format_table(document.root))

    def format_table(self, table: Table) -> Table:
        entries: list[Entry] = []
        for entry in table.entries:
            decor = self._require_decor(entry)
            entries.append(
                Entry(
                    key=replace(entry.key),
                    item=self._format_item(entry.item),
                    decor=Decor(prefix=decor.prefix, suffix=decor.suffix.rstrip("\n")),
                )
            )

        by_priority = priority_order(self.config.keys)
        # Values are rendered before sub-tables, so they also sort first.
        ordered = sort_sections(entries, lambda entry: (_is_table_like(entry.item), by_priority(entry)), opens_section)
        self.logger.debug(f"Sorted table [{table.header or ''}] with {len(ordered)} entries")
        return Table(entries=ordered, header=table.header, implicit=table.implicit, decor=replace(table.decor))

    def _format_item(self, item):
        if isinstance(item, Table):
            return self.format_table(item)
        if isinstance(item, ArrayOfTables):
            return copy.deepcopy(item)
        return self.format_value(item, last=False)

    def format_inline_table(self, table: InlineTable, last: bool) -> InlineTable:
        for entry in table.entries:
            self._require_decor(entry)

        ordered = sort_sections(table.entries, priority_order(self.config.inline_keys), lambda entry: False)
        # Inline keys always get exactly one space on each side.
        formatted = [
            Entry(
                key=replace(entry.key),
                item=self.format_value(entry.item, last=i + 1 == len(ordered)),
                decor=Decor(prefix=" ", suffix=" "),
            )
            for i, entry in enumerate(ordered)
        ]
        return InlineTable(entries=formatted, decor=_value_decor(table.decor, last))

    def format_value(self, value: TomlValue, last: bool) -> TomlValue:
        if isinstance(value, Array):
            return self.format_array(value, last)
        if isinstance(value, InlineTable):
            return self.format_inline_table(value, last)
        return Scalar(
            kind=value.kind,
            raw=normalize_quotes(value.raw) if value.is_string else value.raw,
            content=value.content,
            decor=_value_decor(value.decor, last),
        )

    def format_array(self, array: Array, last: bool) -> Array:
        values = list(array.values)
        if self.config.sort_string_arrays:
            values.sort(key=_string_first)

        if self._is_multiline(array):
            self.logger.debug(f"Laying out array of {len(values)} values on multiple lines")
            trailing = array.trailing if "\n" in array.trailing else "\n"
            formatted = [self._format_array_line(value) for value in values]
            return Array(values=formatted, trailing=trailing, trailing_comma=True, decor=_value_decor(array.decor, last))

        formatted = [self.format_value(value, last=i + 1 == len(values)) for i, value in enumerate(values)]
        return Array(values=formatted, trailing="", trailing_comma=False, decor=_value_decor(array.decor, last))

    def _is_multiline(self, array: Array) -> bool:
        if array.trailing.startswith(("\n", "\r\n")):
            return True
        # A comment runs to the end of its line, so arrays carrying one cannot stay inline.
        return has_comment(array.trailing) or any(
            has_comment(value.decor.prefix) or has_comment(value.decor.suffix) for value in array.values
        )

    def _format_array_line(self, value: TomlValue) -> TomlValue:
        line_start = f"\n{self.indent}"
        comment = strip_layout(value.decor.prefix)
        prefix = f"{line_start}{comment}{line_start}" if comment else line_start
        comment = strip_layout(value.decor.suffix)
        # Keep the separating comma out of a trailing comment.
        suffix = f" {comment}{line_start}" if comment else ""
        return replace(self.format_value(value, last=False), decor=Decor(prefix=prefix, suffix=suffix))

    def _require_decor(self, entry: Entry) -> Decor:
        if entry.decor is None:
            raise MalformedTreeError("Entry has no decor, tree was not built from a parsed document", entry.key.name)
        return entry.decor


def format_document(document: TomlDocument, config: SortConfig) -> TomlDocument:
    return TomlFormatter(config=config).format_document(document)


__all__ = [
    "MalformedTreeError",
    "TomlFormatter",
    "format_document",
    "leading_trivia",
    "normalize_quotes",
    "opens_section",
    "priority_order",
    "sort_sections",
    "split_sections",
    "with_leading_trivia",
]

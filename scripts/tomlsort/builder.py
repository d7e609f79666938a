"""Builders that convert tomlkit parse trees into TomlDocuments."""

from __future__ import annotations

import logging
from typing import NotRequired, Optional, TypedDict

import tomlkit
from tomlkit import items as toml_items
from tomlkit.container import Container

from .document import TomlDocument
from .logger import Logger, child_logger_name
from .nodes import Array, ArrayOfTables, Decor, Entry, InlineTable, Key, Scalar, Table, TomlValue
from .utils import resolve_config


class BuildError(Exception):
    def __init__(self, message: str, key: Optional[str] = None):
        self.message = message
        self.key = key
        if key:
            message = f"{message} (key {key!r})"
        super().__init__(message)


class BuilderConfig(TypedDict):
    enable_logger: NotRequired[bool]


class BuilderConfigRequired(TypedDict):
    enable_logger: bool


DEFAULT_CONFIG: BuilderConfigRequired = {"enable_logger": False}


def _join_header(parent: str | None, key: toml_items.Key) -> str:
    name = key.as_string().strip()
    return name if parent is None else f"{parent}.{name}"


class DocumentBuilder:
    """Walks a tomlkit document in source order.

    Comments and blank lines are held as pending trivia until the next key or
    table header claims them; whatever is left at the end is the document
    trailing.
    """

    def __init__(self, config: Optional[BuilderConfig] = None):
        self.config = resolve_config(config or {}, DEFAULT_CONFIG)
        self.logger = Logger(
            config={
                "name": child_logger_name("builder"),
                "is_enabled": self.config["enable_logger"],
                "level": logging.DEBUG,
            }
        ).logger
        self._pending = ""

    def parse(self, text: str) -> TomlDocument:
        return self.build(tomlkit.parse(text))

    def build(self, source: tomlkit.TOMLDocument) -> TomlDocument:
        self._pending = ""
        root = Table(entries=self._convert_container(source, header=None))
        trailing = self._take_pending()
        self.logger.debug(f"Built document with {len(root.entries)} top-level entries")
        return TomlDocument(root=root, trailing=trailing)

    def _take_pending(self) -> str:
        pending, self._pending = self._pending, ""
        return pending

    def _convert_container(self, container: Container, header: str | None) -> list[Entry]:
        entries: list[Entry] = []
        for key, item in container.body:
            if key is None:
                self._pending += item.as_string()
                continue
            if isinstance(item, toml_items.AoT):
                entries.append(Entry(self._convert_key(key), self._convert_aot(key, item, header), Decor()))
            elif isinstance(item, toml_items.Table):
                if key.is_dotted():
                    entries.extend(self._convert_dotted([key], item, self._take_pending()))
                else:
                    entries.append(Entry(self._convert_key(key), self._convert_table(key, item, header), Decor()))
            else:
                entries.append(self._convert_key_value([key], item, self._take_pending()))
        return entries

    def _convert_table(self, key: toml_items.Key, table: toml_items.Table, parent: str | None) -> Table:
        header = (table.display_name or "").strip() or _join_header(parent, key)
        if table.is_super_table():
            # No header of its own, pending trivia belongs to the first child header.
            return Table(entries=self._convert_container(table.value, header), header=header, implicit=True)
        decor = Decor(
            prefix=self._take_pending() + table.trivia.indent,
            suffix=table.trivia.comment_ws + table.trivia.comment,
        )
        entries = self._convert_container(table.value, header)
        self.logger.debug(f"Converted table [{header}] with {len(entries)} entries")
        return Table(entries=entries, header=header, implicit=False, decor=decor)

    def _convert_aot(self, key: toml_items.Key, aot: toml_items.AoT, parent: str | None) -> ArrayOfTables:
        header = _join_header(parent, key)
        tables: list[Table] = []
        for table in aot.body:
            table_header = (table.display_name or "").strip() or header
            decor = Decor(
                prefix=self._take_pending() + table.trivia.indent,
                suffix=table.trivia.comment_ws + table.trivia.comment,
            )
            entries = self._convert_container(table.value, table_header)
            tables.append(Table(entries=entries, header=table_header, decor=decor))
        return ArrayOfTables(tables=tables)

    def _convert_dotted(self, chain: list[toml_items.Key], table: toml_items.Table, prefix: str) -> list[Entry]:
        entries: list[Entry] = []
        for key, item in table.value.body:
            if key is None:
                prefix += item.as_string()
                continue
            if isinstance(item, toml_items.Table):
                entries.extend(self._convert_dotted([*chain, key], item, prefix))
            else:
                entries.append(self._convert_key_value([*chain, key], item, prefix))
            prefix = ""
        return entries

    def _convert_key(self, key: toml_items.Key) -> Key:
        return Key(name=key.key, raw=key.as_string().strip())

    def _convert_key_value(self, chain: list[toml_items.Key], item: toml_items.Item, prefix: str) -> Entry:
        leaf = chain[-1]
        leaf_text = leaf.as_string()
        raw_leaf = leaf_text.rstrip()
        separator = leaf_text[len(raw_leaf) :] + leaf.sep
        key_suffix, equals, value_prefix = separator.partition("=")
        if not equals:
            raise BuildError("Key is not followed by '='", leaf.key)

        raw = ".".join([*(part.as_string().strip() for part in chain[:-1]), raw_leaf.strip()])
        name = ".".join(part.key for part in chain)
        value = self._convert_value(item)
        value.decor = Decor(prefix=value_prefix, suffix=item.trivia.comment_ws + item.trivia.comment)
        return Entry(Key(name=name, raw=raw), value, Decor(prefix=prefix + item.trivia.indent, suffix=key_suffix))

    def _convert_value(self, item: toml_items.Item) -> TomlValue:
        if isinstance(item, toml_items.Array):
            return self._convert_array(item)
        if isinstance(item, toml_items.InlineTable):
            return self._convert_inline_table(item)
        if isinstance(item, toml_items.String):
            return Scalar("string", item.as_string(), content=str(item))
        if isinstance(item, toml_items.Bool):
            return Scalar("boolean", item.as_string())
        if isinstance(item, toml_items.Integer):
            return Scalar("integer", item.as_string())
        if isinstance(item, toml_items.Float):
            return Scalar("float", item.as_string())
        if isinstance(item, (toml_items.DateTime, toml_items.Date, toml_items.Time)):
            return Scalar("datetime", item.as_string())
        raise BuildError(f"Unsupported value type {type(item).__name__}")

    def _convert_array(self, array: toml_items.Array) -> Array:
        values: list[TomlValue] = []
        buffer = ""
        after_comma = False
        # tomlkit keeps whitespace, commas and comments as separate items in source order.
        for element in array._iter_items():
            if isinstance(element, toml_items.Null):
                continue
            if isinstance(element, toml_items.Whitespace):
                if element.s.strip() == ",":
                    values[-1].decor.suffix = buffer
                    buffer = ""
                    after_comma = True
                else:
                    buffer += element.s
            elif isinstance(element, toml_items.Comment):
                buffer += element.as_string()
            else:
                value = self._convert_value(element)
                value.decor = Decor(prefix=buffer)
                values.append(value)
                buffer = ""
                after_comma = False

        if values and not after_comma:
            values[-1].decor.suffix = buffer
            return Array(values=values, trailing="", trailing_comma=False)
        return Array(values=values, trailing=buffer, trailing_comma=bool(values))

    def _convert_inline_table(self, table: toml_items.InlineTable) -> InlineTable:
        entries: list[Entry] = []
        buffer = ""
        for key, item in table.value.body:
            if key is None:
                buffer += item.as_string()
                continue
            if isinstance(item, toml_items.Table):
                entries.extend(self._convert_dotted([key], item, buffer))
            else:
                entries.append(self._convert_key_value([key], item, buffer))
            buffer = ""

        if entries:
            last_value = entries[-1].item
            last_value.decor.suffix += buffer
            return InlineTable(entries=entries)
        return InlineTable(preamble=buffer)


def parse_document(text: str) -> TomlDocument:
    return DocumentBuilder().parse(text)


__all__ = ["BuildError", "BuilderConfig", "DocumentBuilder", "parse_document"]

"""Section-aware key sorting and layout normalization for TOML documents."""

from .nodes import (
    Array,
    ArrayOfTables,
    Decor,
    Entry,
    InlineTable,
    Key,
    Scalar,
    Table,
    TomlItem,
    TomlValue,
)
from .document import TomlDocument
from .config import (
    CONFIG_FILE,
    ConfigError,
    FileConfig,
    KeyPriorityIndex,
    SortConfig,
    build_priority_index,
    find_config,
    load_config,
)
from .builder import BuildError, DocumentBuilder, parse_document
from .formatter import MalformedTreeError, TomlFormatter, format_document
from .renderer import DocumentRenderer, render_document
from .processor import FileStatus, format_text, process_file

__all__ = [
    "Array",
    "ArrayOfTables",
    "Decor",
    "Entry",
    "InlineTable",
    "Key",
    "Scalar",
    "Table",
    "TomlItem",
    "TomlValue",
    "TomlDocument",
    "CONFIG_FILE",
    "ConfigError",
    "FileConfig",
    "KeyPriorityIndex",
    "SortConfig",
    "build_priority_index",
    "find_config",
    "load_config",
    "BuildError",
    "DocumentBuilder",
    "parse_document",
    "MalformedTreeError",
    "TomlFormatter",
    "format_document",
    "DocumentRenderer",
    "render_document",
    "FileStatus",
    "format_text",
    "process_file",
]

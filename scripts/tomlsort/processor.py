"""Format TOML text and files, in place or as a check."""

from __future__ import annotations

from enum import Enum, auto
from pathlib import Path

from .builder import DocumentBuilder
from .config import SortConfig
from .formatter import TomlFormatter
from .renderer import DocumentRenderer


class FileStatus(Enum):
    CHECK_PASSED = auto()
    CHECK_FAILED = auto()
    OVERWRITTEN = auto()
    UNCHANGED = auto()


def format_text(text: str, config: SortConfig, verbose: bool = False) -> str:
    document = DocumentBuilder(config={"enable_logger": verbose}).parse(text)
    formatted = TomlFormatter(config=config, enable_logger=verbose).format_document(document)
    formatted.trailing = document.trailing.rstrip()
    return DocumentRenderer().render(formatted).strip() + "\n"


def process_file(path: Path, config: SortConfig, check: bool, verbose: bool = False) -> FileStatus:
    """Format one file.

    Read and parse errors propagate to the caller. In check mode the file is
    never written.
    """
    text = path.read_text(encoding="utf-8")
    output = format_text(text, config, verbose=verbose)

    if check:
        return FileStatus.CHECK_PASSED if output == text else FileStatus.CHECK_FAILED
    if output == text:
        return FileStatus.UNCHANGED
    path.write_text(output, encoding="utf-8")
    return FileStatus.OVERWRITTEN


__all__ = ["FileStatus", "format_text", "process_file"]

"""Sorting configuration: priority key indexes and the on-disk config file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

import tomlkit
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from tomlkit.exceptions import TOMLKitError

CONFIG_FILE = "toml-sort.toml"


class ConfigError(Exception):
    def __init__(self, message: str, path: Optional[Path] = None):
        self.message = message
        self.path = path
        if path:
            message = f"{message} in {path}"
        super().__init__(message)


@dataclass(frozen=True, slots=True)
class KeyPriorityIndex:
    """Maps configured key names to their rank in the configured order."""

    ranks: dict[str, int] = field(default_factory=dict)

    def rank(self, key: str) -> int | None:
        return self.ranks.get(key)

    def sort_key(self, key: str) -> tuple[int, int, str]:
        rank = self.ranks.get(key)
        if rank is None:
            return (1, 0, key)
        return (0, rank, "")

    def __len__(self) -> int:
        return len(self.ranks)


def build_priority_index(names: Iterable[str]) -> KeyPriorityIndex:
    ranks: dict[str, int] = {}
    for position, name in enumerate(names):
        # A name listed twice keeps its first rank.
        ranks.setdefault(name, position)
    return KeyPriorityIndex(ranks)


@dataclass(frozen=True, slots=True)
class SortConfig:
    keys: KeyPriorityIndex = field(default_factory=KeyPriorityIndex)
    inline_keys: KeyPriorityIndex = field(default_factory=KeyPriorityIndex)
    sort_string_arrays: bool = False

    @classmethod
    def create(
        cls,
        keys: Iterable[str] = (),
        inline_keys: Iterable[str] = (),
        sort_string_arrays: bool = False,
    ) -> "SortConfig":
        return cls(
            keys=build_priority_index(keys),
            inline_keys=build_priority_index(inline_keys),
            sort_string_arrays=sort_string_arrays,
        )


class FileConfig(BaseModel):
    """Contents of a ``toml-sort.toml`` file."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    keys: list[str] = Field(default_factory=list)
    inline_keys: list[str] = Field(default_factory=list)
    sort_string_arrays: bool = False

    def to_sort_config(self) -> SortConfig:
        return SortConfig.create(self.keys, self.inline_keys, self.sort_string_arrays)


def find_config(start: Optional[Path] = None) -> Path | None:
    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / CONFIG_FILE
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path) -> FileConfig:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read config: {exc}", path) from exc
    try:
        data = tomlkit.parse(text).unwrap()
    except TOMLKitError as exc:
        raise ConfigError(f"Invalid TOML: {exc}", path) from exc
    try:
        return FileConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config values: {exc}", path) from exc


__all__ = [
    "CONFIG_FILE",
    "ConfigError",
    "FileConfig",
    "KeyPriorityIndex",
    "SortConfig",
    "build_priority_index",
    "find_config",
    "load_config",
]

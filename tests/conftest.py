from __future__ import annotations

from textwrap import dedent

import pytest

from scripts.tomlsort import SortConfig, format_text


@pytest.fixture
def sort_toml():
    """Format a dedented TOML snippet with an ad-hoc config."""

    def _sort(text: str, **options) -> str:
        return format_text(dedent(text), SortConfig.create(**options))

    return _sort

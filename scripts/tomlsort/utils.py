from typing import TypedDict, TypeVar

T = TypeVar("T", bound=TypedDict("T", {}))
U = TypeVar("U", bound=TypedDict("U", {}))

LAYOUT_CHARS = " \t\r\n"


def resolve_config(config: T, default_config: U):
    _config = default_config.copy()
    if config:
        for key in _config:
            if key in config:
                _config[key] = config[key]
    return _config


def starts_with_blank_line(text: str) -> bool:
    first_line, newline, _ = text.partition("\n")
    return bool(newline) and not first_line.strip()


def strip_layout(text: str) -> str:
    return text.strip(LAYOUT_CHARS)


def has_comment(text: str) -> bool:
    # Decor never holds tokens, so any '#' starts a comment.
    return "#" in text

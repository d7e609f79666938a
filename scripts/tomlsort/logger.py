from typing import NotRequired, TypedDict
import logging
from scripts.tomlsort.utils import resolve_config

LOGGER_NAME = "toml-sort"


class LoggerConfig(TypedDict):
    name: NotRequired[str]
    is_enabled: NotRequired[bool]
    level: NotRequired[int]
    format: NotRequired[str]


class LoggerConfigRequired(TypedDict):
    name: str
    is_enabled: bool
    level: int
    format: str


# Status lines go to stdout; the log only carries warnings unless --verbose asks for more.
DEFAULT_LOGGER_CONFIG: LoggerConfigRequired = {
    "name": LOGGER_NAME,
    "is_enabled": True,
    "level": logging.WARNING,
    "format": "%(name)s: %(levelname)s: %(message)s",
}


def child_logger_name(component: str) -> str:
    return f"{LOGGER_NAME}.{component}"


class Logger:
    def __init__(self, config: LoggerConfig | None = None):
        self.config = resolve_config(config or {}, DEFAULT_LOGGER_CONFIG)
        self.logger = logging.getLogger(self.config["name"])
        self.set_configuration()

    def set_configuration(self):
        # Loggers are shared per name, so a later instance may re-enable one.
        self.logger.disabled = not self.config["is_enabled"]
        if self.logger.disabled:
            return

        self.logger.setLevel(self.config["level"])
        self.logger.propagate = False
        if self.logger.handlers:
            return
        self.formatter = logging.Formatter(self.config["format"])
        self.ch = logging.StreamHandler()
        self.ch.setFormatter(self.formatter)
        self.logger.addHandler(self.ch)


__all__ = ["DEFAULT_LOGGER_CONFIG", "LOGGER_NAME", "Logger", "LoggerConfig", "child_logger_name"]

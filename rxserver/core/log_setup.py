"""Logging setup driven by the logging section of the configuration."""

from __future__ import annotations

import logging
import sys

from rxserver.core.config import LoggingConfig
from rxserver.core.errors import LoggingError

_OFF = logging.CRITICAL + 10

_LEVELS = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "off": _OFF,
}

_ANSI = {
    logging.DEBUG: "\x1b[34m",
    logging.INFO: "\x1b[32m",
    logging.WARNING: "\x1b[33m",
    logging.ERROR: "\x1b[31m",
    logging.CRITICAL: "\x1b[1;31m",
}
_RESET = "\x1b[0m"

_COMPACT = "%(asctime)s %(levelname)s %(message)s"
_DETAILED = "%(asctime)s %(levelname)s %(threadName)s(%(thread)d) %(filename)s:%(lineno)d: %(message)s"

_MARK = "_rxserver_handler"
_configured_targets: set[str] = set()


class _ColorFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        color = _ANSI.get(record.levelno)
        if color is None:
            return super().format(record)
        original = record.levelname
        record.levelname = f"{color}{original}{_RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def _parse_filter(spec: str) -> tuple[int, dict[str, int]] | None:
    """Parse 'level' / 'target=level' directives separated by commas."""
    directives = [d.strip() for d in spec.split(",") if d.strip()]
    if not directives:
        return None
    default: int | None = None
    targets: dict[str, int] = {}
    for directive in directives:
        if "=" in directive:
            target, level_name = (part.strip() for part in directive.split("=", 1))
            level = _LEVELS.get(level_name.lower())
            if not target or level is None:
                return None
            targets[target.replace("::", ".")] = level
        else:
            level = _LEVELS.get(directive.lower())
            if level is None:
                return None
            default = level
    return (_OFF if default is None else default), targets


def _mark(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _MARK, True)
    return handler


def init_logging(config: LoggingConfig | None = None) -> None:
    """Configure the root logger from *config*, or from defaults when None.

    Calling it again replaces the handlers installed by an earlier call.
    """
    config = config or LoggingConfig()

    file_handler = None
    if config.file is not None:
        try:
            file_handler = logging.FileHandler(config.file, mode="a", encoding="utf-8")
        except OSError as err:
            raise LoggingError(f"Failed to open log file: {err}") from err
        file_handler.setFormatter(logging.Formatter(_COMPACT))

    parsed = _parse_filter(config.level) or (logging.INFO, {})
    default_level, targets = parsed

    root = logging.getLogger()
    for handler in [h for h in root.handlers if getattr(h, _MARK, False)]:
        root.removeHandler(handler)
        handler.close()
    for target in _configured_targets:
        logging.getLogger(target).setLevel(logging.NOTSET)
    _configured_targets.clear()

    console = logging.StreamHandler(sys.stdout)
    if config.json:
        console.setFormatter(logging.Formatter(_COMPACT))
    elif config.colored:
        console.setFormatter(_ColorFormatter(_DETAILED))
    else:
        console.setFormatter(logging.Formatter(_DETAILED))

    root.setLevel(default_level)
    for target, level in targets.items():
        logging.getLogger(target).setLevel(level)
        _configured_targets.add(target)

    root.addHandler(_mark(console))
    if file_handler is not None:
        root.addHandler(_mark(file_handler))

    logging.getLogger(__name__).info("Logging initialized with level: %s", config.level)
"""Layered logging helpers for the attendance upload CLI."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

__all__ = [
    "logger",
    "step",
    "progress",
    "success",
    "debug_detail",
    "get_logger",
    "set_log_profile",
]

BASE_LOGGER_NAME = "attendance_upload"

_PALETTE: Dict[str, str] = {
    "reset": "\033[0m",
    "dim": "\033[2m",
    "bold": "\033[1m",
    "blue": "\033[34m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "red": "\033[31m",
    "cyan": "\033[36m",
    "magenta": "\033[35m",
}

_PROFILE_LEVELS = {
    "quiet": logging.WARNING,
    "debug": logging.DEBUG,
    "verbose": logging.DEBUG,
    "user": logging.INFO,
}


def _apply_color(text: str, *styles: str) -> str:
    if os.getenv("NO_COLOR") is not None or not styles:
        return text
    colors = "".join(_PALETTE.get(style, "") for style in styles)
    return f"{colors}{text}{_PALETTE['reset']}"


class LayeredFormatter(logging.Formatter):
    """Formatter that decorates output based on the record.layer attribute."""

    LAYER_MAPPINGS: Dict[str, Dict[str, Any]] = {
        "step": {"icon": "▶", "style": ("blue", "bold")},
        "progress": {"icon": "…", "style": ("cyan",)},
        "success": {"icon": "✓", "style": ("green", "bold")},
        "warning": {"icon": "!", "style": ("yellow", "bold")},
        "error": {"icon": "✗", "style": ("red", "bold")},
        "debug": {"icon": "·", "style": ("magenta",)},
        "user": {"icon": "•", "style": ()},
    }

    def format(self, record: logging.LogRecord) -> str:
        layer = getattr(record, "layer", "user")
        mapping = self.LAYER_MAPPINGS.get(layer, self.LAYER_MAPPINGS["user"])
        message = super().format(record)
        if layer == "debug":
            return f"{_apply_color('[debug]', 'dim')} {message}"
        return f"{_apply_color(mapping['icon'], *mapping['style'])} {message}"


class LayeredAdapter(logging.LoggerAdapter):
    """Logger adapter that injects a 'layer' extra value."""

    def __init__(self, logger: logging.Logger, default_layer: str = "user"):
        super().__init__(logger, {"layer": default_layer})

    def log(self, level: int, msg: Any, *args, layer: Optional[str] = None, **kwargs) -> None:
        if not self.isEnabledFor(level):
            return
        extra = kwargs.setdefault("extra", {})
        extra.setdefault("layer", layer or self.extra.get("layer", "user"))
        self.logger.log(level, msg, *args, **kwargs)

    def warning(self, msg: Any, *args, **kwargs) -> None:  # type: ignore[override]
        kwargs.setdefault("layer", "warning")
        self.log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: Any, *args, **kwargs) -> None:  # type: ignore[override]
        kwargs.setdefault("layer", "error")
        self.log(logging.ERROR, msg, *args, **kwargs)

    def debug(self, msg: Any, *args, **kwargs) -> None:  # type: ignore[override]
        kwargs.setdefault("layer", "debug")
        self.log(logging.DEBUG, msg, *args, **kwargs)


def _console_level(profile: str) -> int:
    level = _PROFILE_LEVELS.get(profile, logging.INFO)
    override = os.getenv("LOG_LEVEL")
    if override:
        explicit = getattr(logging, override.upper(), None)
        if isinstance(explicit, int):
            level = explicit
    return level


def _configure_base_logger() -> LayeredAdapter:
    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    if base_logger.handlers:
        return LayeredAdapter(base_logger)

    base_logger.setLevel(logging.DEBUG)
    base_logger.propagate = False

    console_handler = logging.StreamHandler()
    console_handler.setLevel(_console_level((os.getenv("LOG_PROFILE") or "user").lower()))
    console_handler.setFormatter(LayeredFormatter("%(message)s"))
    base_logger.addHandler(console_handler)

    log_file = os.getenv("LOG_FILE")
    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as exc:
            base_logger.warning("Failed to configure logfile '%s': %s", log_file, exc)
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(levelname)s] %(name)s %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
            file_handler.setLevel(logging.DEBUG)
            base_logger.addHandler(file_handler)

    return LayeredAdapter(base_logger)


logger = _configure_base_logger()


def step(message: str, *args: Any) -> None:
    """Log a major step in the workflow."""
    logger.log(logging.INFO, message, *args, layer="step")


def progress(message: str, *args: Any) -> None:
    logger.log(logging.INFO, message, *args, layer="progress")


def success(message: str, *args: Any) -> None:
    logger.log(logging.INFO, message, *args, layer="success")


def debug_detail(message: str, *args: Any) -> None:
    """Log detailed debug information (hidden unless LOG_PROFILE=debug)."""
    logger.log(logging.DEBUG, message, *args, layer="debug")


def get_logger(name: str, *, layer: str = "user") -> LayeredAdapter:
    """Return a child logger using the layered formatting."""
    child = logging.getLogger(f"{BASE_LOGGER_NAME}.{name}")
    return LayeredAdapter(child, default_layer=layer)


def set_log_profile(profile: str) -> None:
    """Adjust console logging verbosity at runtime."""
    profile = (profile or "user").lower()
    level = _PROFILE_LEVELS.get(profile, logging.INFO)
    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    for handler in base_logger.handlers:
        if type(handler) is logging.StreamHandler:
            handler.setLevel(level)
    os.environ["LOG_PROFILE"] = profile

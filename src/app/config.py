"""Environment-driven settings and logging setup."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from loguru import logger

from src.app.rendering import CategoryRenderer, SectionLayout

_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {name} | {message}"


def report_dir() -> Path:
    """Directory holding ``<report_id>.json`` files."""

    return Path(os.environ.get("REPORT_DIR", "reports"))


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").upper()


def category_layout() -> SectionLayout:
    raw = os.environ.get("CATEGORY_LAYOUT", SectionLayout.GROUPS_FIRST.value).strip().lower()
    try:
        return SectionLayout(raw)
    except ValueError as exc:
        allowed = ", ".join(item.value for item in SectionLayout)
        raise ValueError(f"CATEGORY_LAYOUT must be one of: {allowed} (got '{raw}').") from exc


def build_renderer() -> CategoryRenderer:
    """Category renderer configured from the environment."""

    return CategoryRenderer(layout=category_layout())


def configure_logging(level: str | None = None) -> None:
    """Replace loguru's default sink with a single stderr sink."""

    logger.remove()
    logger.add(sys.stderr, level=level or log_level(), format=_LOG_FORMAT, backtrace=True)


__all__ = ["build_renderer", "category_layout", "configure_logging", "log_level", "report_dir"]

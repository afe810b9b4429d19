"""Helpers to load, prepare, and persist audit reports."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from loguru import logger

from src.app.config import report_dir as _configured_report_dir

from .schemas import Category, Report


def _ensure_report_dir(directory: Path | None = None) -> Path:
    target = directory or _configured_report_dir()
    target.mkdir(parents=True, exist_ok=True)
    return target


def prepare_report_result(source: Report | Mapping[str, Any]) -> Report:
    """Attach each audit's result to the category references that point at it.

    The input is left untouched; a prepared deep copy is returned. A reference
    to an audit missing from ``audits`` raises :class:`ValueError`.
    """

    report = (
        source.model_copy(deep=True)
        if isinstance(source, Report)
        else Report.model_validate(source)
    )
    for category in report.categories.values():
        for ref in category.auditRefs:
            result = report.audits.get(ref.id)
            if result is None:
                raise ValueError(
                    f"Audit '{ref.id}' referenced by category '{category.id}' has no result."
                )
            ref.result = result.model_copy(deep=True)
    return report


def find_category(report: Report, category_id: str) -> Category:
    """Return the category ``category_id`` or raise :class:`KeyError`."""

    category = report.categories.get(category_id)
    if category is None:
        raise KeyError(category_id)
    return category


def save_report_json(report: Report, report_id: str, *, report_dir: Path | None = None) -> Path:
    """Persist a report payload to disk in canonical JSON form."""

    directory = _ensure_report_dir(report_dir)
    path = directory / f"{report_id}.json"
    payload = report.model_dump(mode="json", exclude_none=True)
    # results are re-attached on load
    for category in payload.get("categories", {}).values():
        for ref in category.get("auditRefs", []):
            ref.pop("result", None)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2, sort_keys=True)
    return path


def load_report(report_id: str, *, report_dir: Path | None = None) -> Report:
    """Load a report from disk and attach audit results to its categories."""

    directory = report_dir or _configured_report_dir()
    path = directory / f"{report_id}.json"
    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as handle:
        raw = json.load(handle)
    report = prepare_report_result(raw)
    logger.info(
        "Loaded report '{}' with {} audit(s) across {} categor(ies)",
        report_id,
        len(report.audits),
        len(report.categories),
    )
    return report


__all__ = [
    "find_category",
    "load_report",
    "prepare_report_result",
    "save_report_json",
]

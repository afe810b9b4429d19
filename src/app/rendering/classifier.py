"""Classification of audit references into manual, grouped and ungrouped."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from src.app.reporting.schemas import AuditRef, AuditResult, ScoreDisplayMode


class AuditKind(str, Enum):
    MANUAL = "manual"
    GROUPED = "grouped"
    UNGROUPED = "ungrouped"


@dataclass(slots=True, frozen=True)
class Classification:
    """Where an audit reference belongs within a rendered category."""

    kind: AuditKind
    group_id: str | None = None


_KNOWN_MODES = {mode.value for mode in ScoreDisplayMode}


def display_mode(result: AuditResult | None) -> str:
    """Return the raw display mode string of ``result`` (empty when absent)."""

    if result is None:
        return ""
    mode = result.scoreDisplayMode
    if isinstance(mode, ScoreDisplayMode):
        return mode.value
    return str(mode)


def is_known_display_mode(result: AuditResult | None) -> bool:
    return display_mode(result) in _KNOWN_MODES


def classify(audit_ref: AuditRef) -> Classification:
    """Classify ``audit_ref``; manual status wins over any group assignment."""

    if display_mode(audit_ref.result) == ScoreDisplayMode.MANUAL.value:
        return Classification(AuditKind.MANUAL)
    group = audit_ref.group
    if isinstance(group, str) and group:
        return Classification(AuditKind.GROUPED, group)
    return Classification(AuditKind.UNGROUPED)


__all__ = [
    "AuditKind",
    "Classification",
    "classify",
    "display_mode",
    "is_known_display_mode",
]

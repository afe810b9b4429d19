"""Collection of manual-verification audits into a single clump."""

from __future__ import annotations

from typing import Iterable

from src.app.reporting.schemas import AuditRef, ManualClumpSection

from .classifier import AuditKind, classify

MANUAL_CLUMP_ID = "manual"
MANUAL_CLUMP_TITLE = "Additional items to manually check"


def build_manual_clump(
    audit_refs: Iterable[AuditRef],
    *,
    title: str = MANUAL_CLUMP_TITLE,
    description: str | None = None,
) -> ManualClumpSection | None:
    """Return the manual clump for ``audit_refs`` or ``None`` when nothing is manual."""

    manual = [
        ref.model_copy(deep=True)
        for ref in audit_refs
        if classify(ref).kind is AuditKind.MANUAL
    ]
    if not manual:
        return None
    return ManualClumpSection(
        clumpId=MANUAL_CLUMP_ID,
        title=title,
        description=description,
        auditRefs=manual,
    )


__all__ = ["MANUAL_CLUMP_ID", "MANUAL_CLUMP_TITLE", "build_manual_clump"]

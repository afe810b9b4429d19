"""Partitioning of automatically scored audits into group sections."""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from src.app.reporting.schemas import AuditRef, AuditResult, GroupDefinition, GroupSection

from .classifier import AuditKind, classify
from .errors import MissingGroupDefinition

PASS_THRESHOLD = 0.9


def shows_as_passed(result: AuditResult | None) -> bool:
    return result is not None and result.score is not None and result.score >= PASS_THRESHOLD


def _partition(audit_refs: Iterable[AuditRef]) -> dict[str, list[AuditRef]]:
    # dict keeps first-occurrence order of the group ids
    grouped: dict[str, list[AuditRef]] = {}
    for ref in audit_refs:
        classification = classify(ref)
        if classification.kind is not AuditKind.GROUPED:
            continue
        grouped.setdefault(classification.group_id, []).append(ref)
    return grouped


def passing_group_ids(audit_refs: Sequence[AuditRef]) -> set[str]:
    """Group ids whose non-manual audits all show as passed."""

    return {
        group_id
        for group_id, refs in _partition(audit_refs).items()
        if all(shows_as_passed(ref.result) for ref in refs)
    }


def assemble_groups(
    audit_refs: Sequence[AuditRef],
    group_defs: Mapping[str, GroupDefinition],
) -> list[GroupSection]:
    """Build one section per group id referenced by a non-manual audit.

    Sections follow the order in which each group id first appears and keep
    the relative order of their audits. Raises :class:`MissingGroupDefinition`
    when a referenced id has no entry in ``group_defs``.
    """

    sections: list[GroupSection] = []
    for group_id, refs in _partition(audit_refs).items():
        definition = group_defs.get(group_id)
        if definition is None:
            raise MissingGroupDefinition(group_id)
        sections.append(
            GroupSection(
                groupId=group_id,
                title=definition.title,
                description=definition.description,
                passed=all(shows_as_passed(ref.result) for ref in refs),
                auditRefs=[ref.model_copy(deep=True) for ref in refs],
            )
        )
    return sections


__all__ = ["PASS_THRESHOLD", "assemble_groups", "passing_group_ids", "shows_as_passed"]

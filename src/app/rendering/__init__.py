"""Category rendering: audit classification, grouping and manual clumping."""

from __future__ import annotations

from .category import CategoryRenderer, SectionLayout, render_category, render_report_categories
from .classifier import AuditKind, Classification, classify
from .clumps import MANUAL_CLUMP_ID, build_manual_clump
from .errors import MissingGroupDefinition
from .groups import assemble_groups, passing_group_ids

__all__ = [
    "AuditKind",
    "CategoryRenderer",
    "Classification",
    "MANUAL_CLUMP_ID",
    "MissingGroupDefinition",
    "SectionLayout",
    "assemble_groups",
    "build_manual_clump",
    "classify",
    "passing_group_ids",
    "render_category",
    "render_report_categories",
]

"""Rendering of report categories into ordered group and clump sections."""

from __future__ import annotations

from enum import Enum
from typing import Mapping

from loguru import logger

from src.app.reporting.schemas import Category, GroupDefinition, RenderedCategory, Report, Section

from .classifier import display_mode, is_known_display_mode
from .clumps import MANUAL_CLUMP_TITLE, build_manual_clump
from .groups import assemble_groups


class SectionLayout(str, Enum):
    """Where the manual clump goes relative to the group sections."""

    GROUPS_FIRST = "groups-first"
    MANUAL_FIRST = "manual-first"


class CategoryRenderer:
    """Turn a category plus group metadata into a :class:`RenderedCategory`.

    Group sections come first and the manual clump last unless the renderer
    is built with :attr:`SectionLayout.MANUAL_FIRST`. Inputs are never
    mutated and every emitted audit reference is a copy.
    """

    def __init__(
        self,
        *,
        layout: SectionLayout | str = SectionLayout.GROUPS_FIRST,
        manual_clump_title: str = MANUAL_CLUMP_TITLE,
    ) -> None:
        self.layout = SectionLayout(layout)
        self.manual_clump_title = manual_clump_title

    def render(
        self,
        category: Category,
        group_defs: Mapping[str, GroupDefinition],
    ) -> RenderedCategory:
        for ref in category.auditRefs:
            if ref.result is not None and not is_known_display_mode(ref.result):
                logger.warning(
                    "Audit '{}' in category '{}' has unknown display mode '{}'",
                    ref.id,
                    category.id,
                    display_mode(ref.result),
                )

        groups = assemble_groups(category.auditRefs, group_defs)
        clump = build_manual_clump(
            category.auditRefs,
            title=self.manual_clump_title,
            description=category.manualDescription,
        )

        sections: list[Section] = list(groups)
        if clump is not None:
            if self.layout is SectionLayout.MANUAL_FIRST:
                sections.insert(0, clump)
            else:
                sections.append(clump)

        logger.debug(
            "Rendered category '{}': {} group section(s), {} manual audit(s)",
            category.id,
            len(groups),
            len(clump.auditRefs) if clump is not None else 0,
        )
        return RenderedCategory(
            categoryId=category.id,
            title=category.title,
            description=category.description,
            score=category.score,
            sections=sections,
        )


_DEFAULT_RENDERER = CategoryRenderer()


def render_category(
    category: Category,
    group_defs: Mapping[str, GroupDefinition],
) -> RenderedCategory:
    """Render ``category`` with the default groups-first layout."""

    return _DEFAULT_RENDERER.render(category, group_defs)


def render_report_categories(
    report: Report,
    renderer: CategoryRenderer | None = None,
) -> list[RenderedCategory]:
    """Render every category of a prepared report in report order."""

    active = renderer if renderer is not None else _DEFAULT_RENDERER
    return [active.render(category, report.categoryGroups) for category in report.reportCategories]


__all__ = ["CategoryRenderer", "SectionLayout", "render_category", "render_report_categories"]

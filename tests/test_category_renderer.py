import pytest
from loguru import logger

from src.app.rendering import (
    CategoryRenderer,
    MissingGroupDefinition,
    SectionLayout,
    assemble_groups,
    build_manual_clump,
    passing_group_ids,
    render_category,
)
from src.app.reporting.schemas import (
    AuditRef,
    AuditResult,
    Category,
    GroupDefinition,
    GroupSection,
    ManualClumpSection,
)


def _ref(
    audit_id: str,
    mode: str = "binary",
    group: str | None = None,
    score: float | None = 1.0,
) -> AuditRef:
    return AuditRef(
        id=audit_id,
        weight=1,
        group=group,
        result=AuditResult(id=audit_id, title=audit_id.upper(), score=score, scoreDisplayMode=mode),
    )


GROUP_DEFS = {
    "perf": GroupDefinition(title="Performance", description="Speed checks"),
    "a11y": GroupDefinition(title="Accessibility"),
    "seo": GroupDefinition(title="SEO"),
}


def _ids(section) -> list[str]:
    return [ref.id for ref in section.auditRefs]


def test_mixed_category_renders_groups_then_manual_clump() -> None:
    category = Category(
        id="mixed",
        title="Mixed",
        manualDescription="Check these by hand.",
        auditRefs=[
            _ref("A", "manual", score=None),
            _ref("B", group="perf"),
            _ref("C", group="perf"),
            _ref("D"),
            _ref("E", "manual", score=None),
        ],
    )

    rendered = render_category(category, GROUP_DEFS)

    assert len(rendered.sections) == 2
    group, clump = rendered.sections
    assert isinstance(group, GroupSection)
    assert group.groupId == "perf"
    assert group.title == "Performance"
    assert _ids(group) == ["B", "C"]
    assert isinstance(clump, ManualClumpSection)
    assert clump.clumpId == "manual"
    assert clump.description == "Check these by hand."
    assert _ids(clump) == ["A", "E"]


def test_three_groups_without_manual_audits() -> None:
    category = Category(
        id="auto",
        title="Automatic",
        auditRefs=[
            _ref("a1", group="perf"),
            _ref("s1", group="seo"),
            _ref("x1", group="a11y"),
            _ref("a2", group="perf"),
            _ref("s2", "numeric", group="seo", score=0.4),
        ],
    )

    rendered = render_category(category, GROUP_DEFS)

    assert rendered.manual_clump is None
    assert [section.groupId for section in rendered.group_sections] == ["perf", "seo", "a11y"]
    assert sum(len(section.auditRefs) for section in rendered.sections) == 5
    assert _ids(rendered.group_sections[0]) == ["a1", "a2"]
    assert _ids(rendered.group_sections[1]) == ["s1", "s2"]


def test_missing_group_definition_is_raised() -> None:
    category = Category(id="broken", title="Broken", auditRefs=[_ref("a", group="x")])

    with pytest.raises(MissingGroupDefinition) as excinfo:
        render_category(category, GROUP_DEFS)

    assert excinfo.value.group_id == "x"
    assert "x" in str(excinfo.value)


def test_manual_audit_with_unknown_group_does_not_raise() -> None:
    category = Category(
        id="manual-only",
        title="Manual",
        auditRefs=[_ref("m", "manual", group="unknown", score=None)],
    )

    rendered = render_category(category, GROUP_DEFS)

    assert rendered.group_sections == []
    assert rendered.manual_clump is not None
    assert _ids(rendered.manual_clump) == ["m"]


def test_manual_first_layout_puts_clump_before_groups() -> None:
    category = Category(
        id="mixed",
        title="Mixed",
        auditRefs=[_ref("B", group="perf"), _ref("A", "manual", score=None)],
    )
    renderer = CategoryRenderer(layout=SectionLayout.MANUAL_FIRST, manual_clump_title="Verify")

    rendered = renderer.render(category, GROUP_DEFS)

    assert isinstance(rendered.sections[0], ManualClumpSection)
    assert rendered.sections[0].title == "Verify"
    assert isinstance(rendered.sections[1], GroupSection)


def test_render_does_not_mutate_inputs_and_copies_references() -> None:
    category = Category(
        id="mixed",
        title="Mixed",
        auditRefs=[_ref("B", group="perf"), _ref("A", "manual", score=None)],
    )
    defs = dict(GROUP_DEFS)
    before = category.model_dump()

    rendered = render_category(category, defs)

    assert category.model_dump() == before
    assert defs == GROUP_DEFS
    rendered.sections[0].auditRefs[0].group = "changed"
    assert category.auditRefs[0].group == "perf"


def test_empty_category_renders_no_sections() -> None:
    rendered = render_category(Category(id="empty", title="Empty"), GROUP_DEFS)
    assert rendered.sections == []


def test_build_manual_clump_returns_none_without_manual_audits() -> None:
    assert build_manual_clump([_ref("a", group="perf"), _ref("b")]) is None


def test_group_passed_flag_and_passing_group_ids() -> None:
    refs = [
        _ref("a", group="perf", score=1.0),
        _ref("b", group="perf", score=0.95),
        _ref("c", group="seo", score=0.5),
        _ref("d", group="a11y", score=None),
        _ref("m", "manual", group="seo", score=None),
    ]

    sections = assemble_groups(refs, GROUP_DEFS)

    assert {section.groupId: section.passed for section in sections} == {
        "perf": True,
        "seo": False,
        "a11y": False,
    }
    assert passing_group_ids(refs) == {"perf"}


@pytest.mark.parametrize("layout", ["groups-first", "manual-first"])
def test_every_classified_reference_appears_exactly_once(layout: str) -> None:
    refs = [
        _ref("m1", "manual", group="perf", score=None),
        _ref("p1", group="perf"),
        _ref("u1", "informative", score=None),
        _ref("s1", group="seo"),
        _ref("m2", "manual", score=None),
        _ref("p2", "error", group="perf", score=None),
    ]
    category = Category(id="all", title="All", auditRefs=refs)

    rendered = CategoryRenderer(layout=layout).render(category, GROUP_DEFS)

    rendered_ids = [ref.id for section in rendered.sections for ref in section.auditRefs]
    assert sorted(rendered_ids) == sorted(["m1", "p1", "s1", "m2", "p2"])
    assert len(rendered_ids) == len(set(rendered_ids))
    assert sum(isinstance(section, ManualClumpSection) for section in rendered.sections) == 1
    assert _ids(rendered.manual_clump) == ["m1", "m2"]
    assert _ids(rendered.group_sections[0]) == ["p1", "p2"]


def test_unknown_layout_is_rejected() -> None:
    with pytest.raises(ValueError):
        CategoryRenderer(layout="sideways")


def test_unknown_display_mode_is_logged_and_still_grouped() -> None:
    category = Category(
        id="future",
        title="Future",
        auditRefs=[_ref("novel-audit", "somethingNew", group="perf"), _ref("b", group="perf")],
    )
    messages: list = []
    sink_id = logger.add(messages.append, level="WARNING", format="{message}")
    try:
        rendered = render_category(category, GROUP_DEFS)
    finally:
        logger.remove(sink_id)

    warnings = [message for message in messages if message.record["level"].name == "WARNING"]
    assert len(warnings) == 1
    assert "novel-audit" in warnings[0]
    assert "somethingNew" in warnings[0]
    assert rendered.manual_clump is None
    assert _ids(rendered.group_sections[0]) == ["novel-audit", "b"]

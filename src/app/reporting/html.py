from __future__ import annotations

"""HTML rendering helpers for audit report categories."""

import datetime as dt
import html
from typing import Any, Iterable

from src.app.rendering import CategoryRenderer, render_report_categories
from src.app.rendering.classifier import display_mode
from src.app.rendering.groups import shows_as_passed

from .schemas import AuditRef, GroupSection, ManualClumpSection, RenderedCategory, Report

__all__ = ["build_category_html", "build_report_html"]


_REPORT_CSS = """
:root {
  color-scheme: light;
}
body {
  margin: 0;
  background: #f8fafc;
  font-family: 'Inter', 'Segoe UI', system-ui, -apple-system, sans-serif;
  color: #1f2937;
}
main.lh-report {
  max-width: 960px;
  margin: 0 auto;
  padding: 48px 40px 64px;
  background: #ffffff;
}
.lh-report__header {
  padding-bottom: 24px;
  border-bottom: 1px solid #e2e8f0;
}
.lh-report__meta {
  font-size: 13px;
  color: #64748b;
  margin-top: 6px;
}
.lh-category {
  margin-top: 36px;
}
.lh-category__score {
  font-size: 14px;
  font-weight: 600;
  color: #0f172a;
}
.lh-audit-group {
  margin-top: 18px;
  border-radius: 12px;
  padding: 12px 16px;
  background: rgba(226, 232, 240, 0.4);
}
.lh-audit-group__header {
  font-size: 15px;
  font-weight: 600;
  color: #0f172a;
}
.lh-audit-group__description {
  font-size: 13px;
  color: #475569;
}
.lh-audit {
  padding: 8px 0;
  border-top: 1px solid #e2e8f0;
  font-size: 13px;
}
.lh-audit__score {
  float: right;
  font-weight: 600;
}
.lh-audit--pass .lh-audit__score {
  color: #047857;
}
.lh-audit--fail .lh-audit__score {
  color: #b91c1c;
}
.lh-clump > summary {
  cursor: pointer;
}
.empty {
  font-size: 13px;
  color: #94a3b8;
  font-style: italic;
}
"""


def _escape(value: Any) -> str:
    """HTML-escape a value, returning an empty string for ``None``."""

    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return html.escape(str(value))


def _score_label(ref: AuditRef) -> str:
    result = ref.result
    if result is None or result.score is None:
        return ""
    if display_mode(result) == "numeric":
        return str(round(result.score * 100))
    return "PASS" if shows_as_passed(result) else "FAIL"


def _render_audit(ref: AuditRef, category_id: str) -> str:
    result = ref.result
    mode = display_mode(result) or "unknown"
    classes = ["lh-audit", f"lh-audit--{_escape(mode)}"]
    if result is not None and result.score is not None and mode in {"binary", "numeric"}:
        classes.append("lh-audit--pass" if shows_as_passed(result) else "lh-audit--fail")
    title = _escape(result.title if result is not None and result.title else ref.id)
    display_value = (
        f" <span class=\"lh-audit__display-text\">{_escape(result.displayValue)}</span>"
        if result is not None and result.displayValue
        else ""
    )
    score = _score_label(ref)
    score_html = f"<span class=\"lh-audit__score\">{score}</span>" if score else ""
    return (
        f"<div class=\"{' '.join(classes)}\" id=\"{_escape(category_id)}-{_escape(ref.id)}\">"
        f"{score_html}<span class=\"lh-audit__title\">{title}</span>{display_value}"
        "</div>"
    )


def _render_audits(refs: Iterable[AuditRef], category_id: str) -> str:
    return "".join(_render_audit(ref, category_id) for ref in refs)


def _render_group(section: GroupSection, category_id: str) -> str:
    description = (
        f"<div class=\"lh-audit-group__description\">{_escape(section.description)}</div>"
        if section.description
        else ""
    )
    passed_class = " lh-audit-group--passed" if section.passed else ""
    return (
        f"<div class=\"lh-audit-group lh-audit-group--{_escape(section.groupId)}{passed_class}\">"
        f"<div class=\"lh-audit-group__header\">{_escape(section.title)}</div>"
        f"{description}"
        f"{_render_audits(section.auditRefs, category_id)}"
        "</div>"
    )


def _render_clump(section: ManualClumpSection, category_id: str) -> str:
    description = (
        f"<div class=\"lh-audit-group__description\">{_escape(section.description)}</div>"
        if section.description
        else ""
    )
    return (
        f"<details class=\"lh-clump lh-clump--{_escape(section.clumpId)} lh-audit-group\">"
        f"<summary class=\"lh-audit-group__header\">{_escape(section.title)}"
        f" <span class=\"lh-audit-group__itemcount\">({len(section.auditRefs)})</span></summary>"
        f"{description}"
        f"{_render_audits(section.auditRefs, category_id)}"
        "</details>"
    )


def build_category_html(rendered: RenderedCategory) -> str:
    """Render the markup fragment for a single rendered category."""

    parts: list[str] = []
    for section in rendered.sections:
        if isinstance(section, ManualClumpSection):
            parts.append(_render_clump(section, rendered.categoryId))
        else:
            parts.append(_render_group(section, rendered.categoryId))
    body = "".join(parts) or "<p class=\"empty\">No audits to display.</p>"

    score_html = (
        f"<div class=\"lh-category__score\">Score {_escape(round(rendered.score * 100))}</div>"
        if rendered.score is not None
        else ""
    )
    description_html = (
        f"<p class=\"lh-category__description\">{_escape(rendered.description)}</p>"
        if rendered.description
        else ""
    )
    return (
        f"<section class=\"lh-category\" id=\"{_escape(rendered.categoryId)}\">"
        f"<h2 class=\"lh-category__title\">{_escape(rendered.title)}</h2>"
        f"{score_html}{description_html}{body}"
        "</section>"
    )


def build_report_html(
    report: Report,
    *,
    renderer: CategoryRenderer | None = None,
) -> str:
    """Render a standalone HTML document covering every category of ``report``."""

    rendered = render_report_categories(report, renderer)
    generated_at = dt.datetime.now(dt.timezone.utc).strftime("%Y-%m-%d %H:%M UTC")

    meta_parts: list[str] = []
    if report.finalUrl or report.requestedUrl:
        meta_parts.append(_escape(report.finalUrl or report.requestedUrl))
    if report.fetchTime:
        meta_parts.append(f"Fetched {_escape(report.fetchTime)}")
    if report.lighthouseVersion:
        meta_parts.append(f"Version {_escape(report.lighthouseVersion)}")
    meta_html = (
        f"<div class=\"lh-report__meta\">{' · '.join(meta_parts)}</div>" if meta_parts else ""
    )
    categories_html = "".join(build_category_html(item) for item in rendered) or (
        "<p class=\"empty\">This report has no categories.</p>"
    )

    return (
        "<!DOCTYPE html>"
        "<html lang=\"en\">"
        "<head>"
        "<meta charset=\"utf-8\" />"
        "<title>Audit Report</title>"
        f"<style>{_REPORT_CSS}</style>"
        "</head>"
        "<body>"
        "<main class=\"lh-report\">"
        "<header class=\"lh-report__header\">"
        "<h1>Audit report</h1>"
        f"{meta_html}"
        f"<div class=\"lh-report__meta\">Generated on {generated_at}</div>"
        "</header>"
        f"{categories_html}"
        "</main>"
        "</body>"
        "</html>"
    )

"""Read-only API endpoints serving audit reports and rendered categories."""

from __future__ import annotations

import json

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import ValidationError

from src.app.rendering import CategoryRenderer, MissingGroupDefinition
from src.app.reporting.report import find_category, load_report
from src.app.reporting.schemas import RenderedCategory, Report


router = APIRouter(prefix="/api/report", tags=["report"])


def get_renderer(request: Request) -> CategoryRenderer:
    """Category renderer built once when the application starts."""

    return request.app.state.renderer


def load_report_or_http_error(report_id: str) -> Report:
    """Load ``report_id`` translating loader failures into HTTP errors."""

    try:
        return load_report(report_id)
    except FileNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Report not found") from exc
    except (json.JSONDecodeError, ValidationError, ValueError) as exc:
        raise HTTPException(status_code=422, detail="Report is invalid") from exc


@router.get("/{report_id}", response_model=Report)
def get_report(report_id: str) -> Report:
    """Return the prepared report associated with ``report_id``."""

    return load_report_or_http_error(report_id)


@router.get("/{report_id}/categories/{category_id}", response_model=RenderedCategory)
def get_rendered_category(
    report_id: str,
    category_id: str,
    renderer: CategoryRenderer = Depends(get_renderer),
) -> RenderedCategory:
    """Return the group and manual-clump sections for one category."""

    report = load_report_or_http_error(report_id)
    try:
        category = find_category(report, category_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail="Category not found") from exc
    try:
        return renderer.render(category, report.categoryGroups)
    except MissingGroupDefinition as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


__all__ = ["get_renderer", "load_report_or_http_error", "router"]

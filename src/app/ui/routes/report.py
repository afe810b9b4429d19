"""Server-rendered HTML view of an audit report."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse

from src.app.api.routes.report import get_renderer, load_report_or_http_error
from src.app.rendering import CategoryRenderer, MissingGroupDefinition
from src.app.reporting.html import build_report_html


router = APIRouter()


@router.get("/report/{report_id}", include_in_schema=False, response_class=HTMLResponse)
def report_view(
    report_id: str,
    renderer: CategoryRenderer = Depends(get_renderer),
) -> HTMLResponse:
    report = load_report_or_http_error(report_id)
    try:
        document = build_report_html(report, renderer=renderer)
    except MissingGroupDefinition as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return HTMLResponse(document)


__all__ = ["router"]

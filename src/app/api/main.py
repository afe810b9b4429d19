"""FastAPI application wiring for the audit report renderer."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import JSONResponse, Response

from src.app.api.routes.report import router as report_api_router
from src.app.config import build_renderer, configure_logging
from src.app.ui.routes import report_router


def health() -> JSONResponse:
    """Simple liveness endpoint used by deployment probes."""

    return JSONResponse({"status": "ok"})


def favicon() -> Response:
    """Return an empty favicon response to silence 404 noise."""

    return Response(status_code=204)


def create_app() -> FastAPI:
    """Build the application; an invalid ``CATEGORY_LAYOUT`` raises ``ValueError`` here."""

    configure_logging()
    application = FastAPI(title="Audit Report Renderer")
    # Shared by every request; routes receive it through ``get_renderer``.
    application.state.renderer = build_renderer()

    application.add_api_route("/health", health, methods=["GET"])
    application.add_api_route("/favicon.ico", favicon, methods=["GET"])

    # JSON API for reports and rendered categories.
    application.include_router(report_api_router)

    # Standalone HTML view.
    application.include_router(report_router)
    return application


app = create_app()


__all__ = ["app", "create_app", "health"]

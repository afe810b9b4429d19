"""FastAPI application entrypoint for the audit report renderer."""

from __future__ import annotations

from src.app.api.main import app, health

__all__ = ["app", "health"]

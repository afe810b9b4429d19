"""Reusable UI route modules."""

from __future__ import annotations

from .report import router as report_router

__all__ = ["report_router"]

"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "CRITERIA"
CLI_DESCRIPTION: str = f"{BRAND_NAME}: evaluate rule expressions against a context and today's date"

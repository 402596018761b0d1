"""Root of the Criteria exception hierarchy."""

from __future__ import annotations


class CriteriaError(Exception):
    """Base exception for all Criteria errors."""

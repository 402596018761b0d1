"""Configuration loading and validation for Criteria.

This package facade re-exports all public names.
"""

from __future__ import annotations

from criteria.config.loader import load_config
from criteria.config.model import CriteriaConfig
from criteria.config.validator import validate_config_file

__all__ = [
    "CriteriaConfig",
    "load_config",
    "validate_config_file",
]

"""Common type aliases shared across Criteria."""

from __future__ import annotations

from typing import Literal

Combinator = Literal["&&", "||"]

"""Clock providers supplying "today" to an evaluator."""

from __future__ import annotations

from datetime import date
from typing import Protocol


class Clock(Protocol):
    """Source of the current calendar date."""

    def today(self) -> date: ...


class SystemClock:
    """Clock backed by the local system date."""

    def today(self) -> date:
        return date.today()


class FixedClock:
    """Clock that always reports the same date."""

    def __init__(self, value: date) -> None:
        self._value = value

    def today(self) -> date:
        return self._value

    def __repr__(self) -> str:
        return f"FixedClock({self._value.isoformat()})"

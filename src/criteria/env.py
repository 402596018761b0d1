"""Key-value providers backing the ``env`` predicate."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Protocol


class EnvLookup(Protocol):
    """Read-only lookup of external configuration values by name."""

    def lookup(self, name: str) -> str | None: ...


class ProcessEnvLookup:
    """Lookup against the process environment at call time."""

    def lookup(self, name: str) -> str | None:
        return os.environ.get(name)


class MappingEnvLookup:
    """Lookup against a snapshot of a preloaded mapping."""

    def __init__(self, values: Mapping[str, str]) -> None:
        self._values = {str(key): str(value) for key, value in values.items()}

    def lookup(self, name: str) -> str | None:
        return self._values.get(name)

"""Resolved configuration model."""

from __future__ import annotations

import random
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from criteria.clock import Clock, FixedClock, SystemClock
from criteria.env import EnvLookup, MappingEnvLookup, ProcessEnvLookup
from criteria.evaluator import Criteria
from criteria.exceptions import ConfigError


@dataclass(frozen=True)
class CriteriaConfig:
    """Resolved ``criteria.yaml`` contents."""

    today: date | None = None
    context: dict[str, Any] = field(default_factory=dict)
    env: dict[str, str] | None = None
    rules: dict[str, str] = field(default_factory=dict)

    @property
    def clock(self) -> Clock:
        """Fixed clock when ``today`` is configured, system clock otherwise."""
        if self.today is not None:
            return FixedClock(self.today)
        return SystemClock()

    @property
    def env_lookup(self) -> EnvLookup:
        """Configured env mapping, or the process environment when unset."""
        if self.env is not None:
            return MappingEnvLookup(self.env)
        return ProcessEnvLookup()

    def rule(self, name: str) -> str:
        """Return the expression for a named rule."""
        try:
            return self.rules[name]
        except KeyError:
            known = ", ".join(sorted(self.rules)) or "none"
            raise ConfigError(f"Unknown rule '{name}' (configured rules: {known})") from None

    def build_evaluator(
        self,
        extra_context: Mapping[str, Any] | None = None,
        *,
        rng: random.Random | None = None,
    ) -> Criteria:
        """Build an evaluator over the configured context plus *extra_context*."""
        data = dict(self.context)
        if extra_context:
            data.update(extra_context)
        return Criteria(data, clock=self.clock, env=self.env_lookup, rng=rng)

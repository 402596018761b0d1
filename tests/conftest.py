"""Shared pytest fixtures for evaluator and predicate tests."""

from __future__ import annotations

import random
from collections.abc import Callable, Mapping
from datetime import date
from types import MappingProxyType
from typing import Any

import pytest

from criteria import Criteria, FixedClock, MappingEnvLookup
from criteria.types import EvalContext

# 29th March 2017 is a Wednesday, 8th April 2017 a Saturday.
WEDNESDAY: date = date(2017, 3, 29)
SATURDAY: date = date(2017, 4, 8)


@pytest.fixture()
def make_criteria() -> Callable[..., Criteria]:
    """Return a factory building evaluators pinned to a known date."""

    def _make(
        data: Mapping[str, Any] | None = None,
        *,
        today: date = WEDNESDAY,
        env: Mapping[str, str] | None = None,
        seed: int | None = None,
    ) -> Criteria:
        return Criteria(
            data,
            clock=FixedClock(today),
            env=MappingEnvLookup(env or {}),
            rng=random.Random(seed),
        )

    return _make


@pytest.fixture()
def make_ctx() -> Callable[..., EvalContext]:
    """Return a factory building raw predicate contexts."""

    def _make(
        data: Mapping[str, Any] | None = None,
        *,
        today: date = WEDNESDAY,
        env: Mapping[str, str] | None = None,
    ) -> EvalContext:
        return EvalContext(
            data=MappingProxyType(dict(data or {})),
            today=today,
            env=MappingEnvLookup(env or {}),
            rng=random.Random(0),
        )

    return _make


@pytest.fixture()
def write_config(tmp_path):
    """Return a helper writing ``criteria.yaml`` content into *tmp_path*."""

    def _write(content: str, name: str = "criteria.yaml"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write

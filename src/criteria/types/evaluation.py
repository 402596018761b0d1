"""Immutable evaluation context handed to every predicate."""

from __future__ import annotations

import random
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any

from criteria.env import EnvLookup


@dataclass(frozen=True)
class EvalContext:
    """Everything a predicate may read during one evaluator's lifetime."""

    data: Mapping[str, Any]
    today: date
    env: EnvLookup
    rng: random.Random

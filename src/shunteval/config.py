"""Evaluator configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class EvaluatorConfig:
    """Evaluator behaviour switches.

    Attributes:
        enable_join: Accept the legacy JOIN digit-concatenation marker
    """

    enable_join: bool = False

    @classmethod
    def from_env(cls) -> EvaluatorConfig:
        """Create config from environment variables.

        SHUNTEVAL_ENABLE_JOIN: "1", "true", "yes" or "on" enables JOIN
        """
        flag = os.environ.get("SHUNTEVAL_ENABLE_JOIN", "")
        return cls(enable_join=flag.strip().lower() in _TRUTHY)

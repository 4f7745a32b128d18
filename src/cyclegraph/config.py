"""cyclegraph runtime configuration helpers."""

from __future__ import annotations

import os
import logging

_STRATEGY_ENV = "CYCLEGRAPH_SCC_STRATEGY"
_VALIDATE_ENV = "CYCLEGRAPH_VALIDATE_SCC"

DEFAULT_STRATEGY = "iterative"
STRATEGIES = ("iterative", "recursive")

LOGGER = logging.getLogger(__name__)


def _env_strategy(env_name: str) -> str | None:
    value = os.getenv(env_name)
    if not value:
        return None
    return value.strip().lower() or None


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    raw = raw.strip().lower()
    if raw in {"", "0", "false", "no"}:
        return False
    if raw in {"1", "true", "yes"}:
        return True
    return default


def resolve_scc_strategy(preferred: str | None) -> str:
    """Resolve the SCC traversal requested by the caller or the environment."""

    strategy = preferred or _env_strategy(_STRATEGY_ENV) or DEFAULT_STRATEGY
    strategy = strategy.strip().lower()
    if strategy not in STRATEGIES:
        raise ValueError(f"Unknown SCC strategy {strategy!r}; expected one of {', '.join(STRATEGIES)}")
    LOGGER.debug(
        "resolve_scc_strategy strategy=%s preferred=%s env=%s",
        strategy,
        preferred,
        _env_strategy(_STRATEGY_ENV),
    )
    return strategy


def validation_enabled() -> bool:
    """Whether every SCC query should re-check its result."""

    return _env_bool(_VALIDATE_ENV)


__all__ = [
    "resolve_scc_strategy",
    "validation_enabled",
    "DEFAULT_STRATEGY",
    "STRATEGIES",
]

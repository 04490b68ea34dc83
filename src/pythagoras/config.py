"""
Configuration module for pythagoras.

Single source of truth for:
- Tolerance used by consistency checks
- Strict handling of non-finite results
- JSON output formatting

All values can be overridden via environment variables.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Optional


def _get_env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _get_env_int(name: str, default: Optional[int]) -> Optional[int]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass
class Config:
    """
    Runtime configuration for pythagoras.

    All fields default from environment variables but can be overridden
    programmatically by constructing Config(...) manually if needed.
    """

    # Absolute tolerance for RightAngle.is_consistent
    atol: float = 1e-6

    # Raise DegenerateTriangleError instead of returning NaN / inf values
    strict: bool = False

    # Passed through to json.dumps; None means compact output
    json_indent: Optional[int] = None

    @classmethod
    def from_env(cls) -> "Config":
        """
        Construct a Config object by reading environment variables.

        Environment variables (all optional):
        - PYTHAGORAS_ATOL         (float)
        - PYTHAGORAS_STRICT       (true/false)
        - PYTHAGORAS_JSON_INDENT  (int)
        """
        return cls(
            atol=_get_env_float("PYTHAGORAS_ATOL", default=1e-6),
            strict=_get_env_bool("PYTHAGORAS_STRICT", default=False),
            json_indent=_get_env_int("PYTHAGORAS_JSON_INDENT", default=None),
        )


_DEFAULT_CONFIG: Optional[Config] = None


def get_config(force_reload: bool = False) -> Config:
    """
    Return a process-wide Config instance.

    Use `force_reload=True` if environment variables changed at runtime
    and you want to refresh.
    """
    global _DEFAULT_CONFIG
    if _DEFAULT_CONFIG is None or force_reload:
        _DEFAULT_CONFIG = Config.from_env()
    return _DEFAULT_CONFIG

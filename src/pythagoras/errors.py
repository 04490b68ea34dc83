"""
Exception hierarchy for right angle resolution.

Every error derives from RightAngleError, which is a ValueError, so callers
that only care about bad input can catch ValueError.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional


class RightAngleError(ValueError):
    """
    Base class for resolution failures.

    `context` holds the input fields that were present, for debugging.
    """

    def __init__(self, message: str, context: Optional[Mapping[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = dict(context) if context else {}

    def __str__(self) -> str:
        return self.message


class MissingInputError(RightAngleError):
    """Neither the angle nor any side was usable for one-side resolution."""


class InsufficientInputError(RightAngleError):
    """Fewer than two sides were present and one-side resolution did not apply."""


class DegenerateTriangleError(RightAngleError):
    """Resolution produced NaN or infinite values (strict mode only)."""

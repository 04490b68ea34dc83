"""
Data schemas for pythagoras.

Defines:
- RightAngleInput: a partially specified right triangle, any field optional
- RightAngle: a fully resolved right triangle

Both are immutable pydantic models. They read and write the JSON form used
at API boundaries. On input the hypotenuse may also be spelled `diagonal`
and the angle `radians`.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Optional

import numpy as np
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .config import get_config
from .functions import ab_c, ab_r

SIDES = ("rise", "run", "hypotenuse")


# Default for `indent`: use Config.json_indent. An explicit None means compact.
_CONFIG_INDENT: Any = object()


def _indent(indent: Any) -> Optional[int]:
    if indent is _CONFIG_INDENT:
        return get_config().json_indent
    return indent


class RightAngleInput(BaseModel):
    """
    Whatever is known about a right triangle.

    Nothing is enforced about how many fields are set until the input is
    resolved, see `pythagoras.right_angle.resolve`.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    rise: Optional[float] = None
    run: Optional[float] = None
    hypotenuse: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("hypotenuse", "diagonal"),
        serialization_alias="diagonal",
    )
    angle: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("angle", "radians"),
        serialization_alias="radians",
    )

    @property
    def side_count(self) -> int:
        return sum(getattr(self, name) is not None for name in SIDES)

    def present(self) -> Dict[str, float]:
        """Return only the fields that were supplied."""
        return self.model_dump(exclude_none=True)

    @classmethod
    def from_json(cls, text: str) -> "RightAngleInput":
        """Parse a JSON object; unknown keys are ignored and null means absent."""
        return cls.model_validate_json(text)

    def to_json(self, *, by_alias: bool = False, indent: Any = _CONFIG_INDENT) -> str:
        return self.model_dump_json(
            exclude_none=True, by_alias=by_alias, indent=_indent(indent)
        )


class RightAngle(BaseModel):
    """
    A complete right triangle.

    Instances coming out of resolution satisfy rise² + run² = hypotenuse²
    and tan(angle) = rise / run, up to floating point error.

    Output uses the field names `hypotenuse` and `angle`; pass
    `by_alias=True` to `to_dict` or `to_json` for `diagonal` and `radians`.
    Input accepts either spelling.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    rise: float
    run: float
    hypotenuse: float = Field(
        validation_alias=AliasChoices("hypotenuse", "diagonal"),
        serialization_alias="diagonal",
    )
    angle: float = Field(
        validation_alias=AliasChoices("angle", "radians"),
        serialization_alias="radians",
    )

    @property
    def degrees(self) -> float:
        return math.degrees(self.angle)

    def is_consistent(self, atol: Optional[float] = None) -> bool:
        """
        Check the Pythagorean and tangent identities.

        `atol` defaults to Config.atol.
        """
        if atol is None:
            atol = get_config().atol
        return bool(
            np.isclose(ab_c(self.rise, self.run), self.hypotenuse, atol=atol)
            and np.isclose(ab_r(self.rise, self.run), self.angle, atol=atol)
        )

    def to_dict(self, *, by_alias: bool = False) -> Dict[str, float]:
        return self.model_dump(by_alias=by_alias)

    def to_json(self, *, by_alias: bool = False, indent: Any = _CONFIG_INDENT) -> str:
        """
        Serialize all four fields.

        NaN and inf, which only appear outside strict mode, are written as
        null so the output stays valid JSON.
        """
        return self.model_dump_json(by_alias=by_alias, indent=_indent(indent))

    @classmethod
    def from_input(cls, data: RightAngleInput) -> "RightAngle":
        """Resolve a partial input, see `pythagoras.right_angle.resolve`."""
        from .right_angle import resolve

        return resolve(data)

    @classmethod
    def from_json(cls, text: str) -> "RightAngle":
        """
        Parse a RightAngleInput from JSON and resolve it.

        >>> RightAngle.from_json('{"rise": 3.0, "run": 4.0}').hypotenuse
        5.0
        """
        return cls.from_input(RightAngleInput.from_json(text))


__all__ = ["SIDES", "RightAngleInput", "RightAngle"]

"""
Complete a right triangle from partial data.

Fill in whatever is known in a RightAngleInput and `resolve` works out the
rest:

1. Two or more sides: the first fully present pair out of rise+run,
   rise+hypotenuse, run+hypotenuse is used. The remaining side and the
   angle are recomputed from it, so a supplied angle or third side is
   overridden, never checked.
2. The angle and one side: the first present side out of rise, run,
   hypotenuse is used to derive the other two.

Anything less raises a RightAngleError.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from .config import get_config
from .errors import DegenerateTriangleError, InsufficientInputError, MissingInputError
from .functions import ab_c, ab_r, ac_b, ac_r, bc_a, bc_r, ra_bc, rb_ac, rc_ab
from .schema import RightAngle, RightAngleInput

logger = logging.getLogger(__name__)


def _build(rise, run, hypotenuse, angle) -> RightAngle:
    return RightAngle(
        rise=float(rise),
        run=float(run),
        hypotenuse=float(hypotenuse),
        angle=float(angle),
    )


def one_side(data: RightAngleInput) -> RightAngle:
    """
    Given the angle and one side, calculate the other two sides.

    If several sides are present the rise wins, then the run, then the
    hypotenuse; the others are ignored.
    """
    r = data.angle
    if r is None:
        raise MissingInputError(
            "Angle is required when only one side is provided", data.present()
        )

    if data.rise is not None:
        logger.debug("Resolving from angle and rise")
        b, c = ra_bc(r, data.rise)
        return _build(data.rise, b, c, r)

    if data.run is not None:
        logger.debug("Resolving from angle and run")
        a, c = rb_ac(r, data.run)
        return _build(a, data.run, c, r)

    if data.hypotenuse is not None:
        logger.debug("Resolving from angle and hypotenuse")
        a, b = rc_ab(r, data.hypotenuse)
        return _build(a, b, data.hypotenuse, r)

    raise MissingInputError("There must be at least one side", data.present())


def two_sides(data: RightAngleInput) -> RightAngle:
    """
    Given two sides, calculate the third side and the angle.

    Any supplied angle is ignored. With all three sides present only the
    rise and run are used.
    """
    a, b, c = data.rise, data.run, data.hypotenuse

    if a is not None and b is not None:
        logger.debug("Resolving from rise and run")
        return _build(a, b, ab_c(a, b), ab_r(a, b))

    if a is not None and c is not None:
        logger.debug("Resolving from rise and hypotenuse")
        return _build(a, ac_b(a, c), c, ac_r(a, c))

    if b is not None and c is not None:
        logger.debug("Resolving from run and hypotenuse")
        return _build(bc_a(b, c), b, c, bc_r(b, c))

    raise InsufficientInputError("At least two sides are required", data.present())


def resolve(data: RightAngleInput, *, strict: Optional[bool] = None) -> RightAngle:
    """
    Resolve a RightAngleInput into a complete RightAngle.

    Raises:
        MissingInputError: no side was given, with or without an angle.
        InsufficientInputError: a single side was given without an angle.
        DegenerateTriangleError: `strict` is on and the result contains
            NaN or inf. `strict` defaults to Config.strict.
    """
    sides = data.side_count

    if sides >= 2:
        result = two_sides(data)
    elif sides == 1 and data.angle is not None:
        result = one_side(data)
    elif sides == 0:
        raise MissingInputError("There must be at least one side", data.present())
    else:
        raise InsufficientInputError(
            "A single side needs an angle, or give a second side", data.present()
        )

    if strict is None:
        strict = get_config().strict
    if strict:
        values = result.to_dict()
        if not np.all(np.isfinite(list(values.values()))):
            logger.warning("Rejecting degenerate triangle %s", values)
            raise DegenerateTriangleError(
                "Input does not describe a valid right triangle", data.present()
            )

    return result


__all__ = ["one_side", "two_sides", "resolve"]

"""Right triangle helpers: pairwise formulas and partial-input completion."""

from __future__ import annotations

import logging

from .config import Config, get_config
from .errors import (
    DegenerateTriangleError,
    InsufficientInputError,
    MissingInputError,
    RightAngleError,
)
from .functions import (
    ab_c,
    ab_r,
    ac_b,
    ac_r,
    bc_a,
    bc_r,
    ra_b,
    ra_bc,
    ra_c,
    rb_a,
    rb_ac,
    rb_c,
    rc_a,
    rc_ab,
    rc_b,
)
from .right_angle import one_side, resolve, two_sides
from .schema import RightAngle, RightAngleInput

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "Config",
    "get_config",
    "RightAngleError",
    "MissingInputError",
    "InsufficientInputError",
    "DegenerateTriangleError",
    "RightAngle",
    "RightAngleInput",
    "one_side",
    "two_sides",
    "resolve",
    "ab_c",
    "ab_r",
    "ac_b",
    "ac_r",
    "bc_a",
    "bc_r",
    "ra_b",
    "ra_c",
    "ra_bc",
    "rb_a",
    "rb_c",
    "rb_ac",
    "rc_a",
    "rc_b",
    "rc_ab",
]

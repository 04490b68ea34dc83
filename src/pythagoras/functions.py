"""
Pure math for right triangles.

No state, no I/O. The sides and angle are consistently named:
- a: opposite side, the rise
- b: adjacent side, the run
- c: hypotenuse, the diagonal
- r: the angle in radians, between the run and the hypotenuse

Function names are the inputs followed by the outputs, so with a and b
in hand, `ab_c(a, b)` returns c. Angles in degrees go through
`math.radians` first.

Every function accepts scalars or numpy arrays. Invalid input is not an
error here: negative lengths, zero divisors and inconsistent sides
produce NaN or inf the way IEEE-754 arithmetic does.
"""

from __future__ import annotations

import functools
from typing import Callable, Tuple, TypeVar, Union

import numpy as np

FloatLike = Union[float, np.ndarray]

_F = TypeVar("_F", bound=Callable[..., object])


def _ieee(func: _F) -> _F:
    """Run `func` with numpy floating point warnings silenced."""

    @functools.wraps(func)
    def wrapper(*args):
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return func(*args)

    return wrapper  # type: ignore[return-value]


# --- Two sides ---------------------------------------------------------------


@_ieee
def ab_c(a: FloatLike, b: FloatLike) -> FloatLike:
    """Return the hypotenuse (c) given the rise (a) and run (b)."""
    return np.sqrt(np.square(a) + np.square(b))


@_ieee
def ab_r(a: FloatLike, b: FloatLike) -> FloatLike:
    """Return the angle (r) given the rise (a) and run (b)."""
    return np.arctan2(a, b)


@_ieee
def ac_b(a: FloatLike, c: FloatLike) -> FloatLike:
    """Return the run (b) given the rise (a) and hypotenuse (c)."""
    return np.sqrt(np.square(c) - np.square(a))


@_ieee
def ac_r(a: FloatLike, c: FloatLike) -> FloatLike:
    """Return the angle (r) given the rise (a) and hypotenuse (c)."""
    return np.arcsin(np.divide(a, c))


@_ieee
def bc_a(b: FloatLike, c: FloatLike) -> FloatLike:
    """Return the rise (a) given the run (b) and hypotenuse (c)."""
    return np.sqrt(np.square(c) - np.square(b))


@_ieee
def bc_r(b: FloatLike, c: FloatLike) -> FloatLike:
    """Return the angle (r) given the run (b) and hypotenuse (c)."""
    return np.arccos(np.divide(b, c))


# --- Angle and one side ------------------------------------------------------


@_ieee
def ra_b(r: FloatLike, a: FloatLike) -> FloatLike:
    """Return the run (b) given the angle (r) and rise (a)."""
    return np.divide(a, np.tan(r))


@_ieee
def ra_c(r: FloatLike, a: FloatLike) -> FloatLike:
    """Return the hypotenuse (c) given the angle (r) and rise (a)."""
    return np.divide(a, np.sin(r))


def ra_bc(r: FloatLike, a: FloatLike) -> Tuple[FloatLike, FloatLike]:
    """Return the run (b) and hypotenuse (c) given the angle (r) and rise (a)."""
    return ra_b(r, a), ra_c(r, a)


@_ieee
def rb_a(r: FloatLike, b: FloatLike) -> FloatLike:
    """Return the rise (a) given the angle (r) and run (b)."""
    return np.multiply(b, np.tan(r))


@_ieee
def rb_c(r: FloatLike, b: FloatLike) -> FloatLike:
    """Return the hypotenuse (c) given the angle (r) and run (b)."""
    return np.divide(b, np.cos(r))


def rb_ac(r: FloatLike, b: FloatLike) -> Tuple[FloatLike, FloatLike]:
    """Return the rise (a) and hypotenuse (c) given the angle (r) and run (b)."""
    return rb_a(r, b), rb_c(r, b)


@_ieee
def rc_a(r: FloatLike, c: FloatLike) -> FloatLike:
    """Return the rise (a) given the angle (r) and hypotenuse (c)."""
    return np.multiply(c, np.sin(r))


@_ieee
def rc_b(r: FloatLike, c: FloatLike) -> FloatLike:
    """Return the run (b) given the angle (r) and hypotenuse (c)."""
    return np.multiply(c, np.cos(r))


def rc_ab(r: FloatLike, c: FloatLike) -> Tuple[FloatLike, FloatLike]:
    """Return the rise (a) and run (b) given the angle (r) and hypotenuse (c)."""
    return rc_a(r, c), rc_b(r, c)


__all__ = [
    "FloatLike",
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

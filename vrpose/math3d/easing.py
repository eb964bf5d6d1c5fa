"""Easing curves for animating transforms over a normalized progress t in [0, 1].

Curves follow https://easings.net/. Every curve maps 0 -> 0 and 1 -> 1.
"""

from __future__ import annotations

import math
from typing import Callable, Optional

import numpy as np

from .transform import lerp

EasingFunc = Callable[[float], float]

EASING_MODES = ("in", "out", "in-out")

_C1 = 1.70158
_C2 = _C1 * 1.525
_C3 = _C1 + 1.0
_C4 = (2.0 * math.pi) / 3.0
_C5 = (2.0 * math.pi) / 4.5


def linear(t: float) -> float:
    return t


def _in_sine(t: float) -> float:
    return 1.0 - math.cos((t * math.pi) / 2.0)


def _out_sine(t: float) -> float:
    return math.sin((t * math.pi) / 2.0)


def _in_out_sine(t: float) -> float:
    return -(math.cos(math.pi * t) - 1.0) / 2.0


def _power(n: int) -> tuple[EasingFunc, EasingFunc, EasingFunc]:
    def ease_in(t: float) -> float:
        return t**n

    def ease_out(t: float) -> float:
        return 1.0 - (1.0 - t) ** n

    def ease_in_out(t: float) -> float:
        if t < 0.5:
            return (2 ** (n - 1)) * t**n
        return 1.0 - ((-2.0 * t + 2.0) ** n) / 2.0

    return ease_in, ease_out, ease_in_out


def _in_expo(t: float) -> float:
    return 0.0 if t == 0 else 2.0 ** (10.0 * t - 10.0)


def _out_expo(t: float) -> float:
    return 1.0 if t == 1 else 1.0 - 2.0 ** (-10.0 * t)


def _in_out_expo(t: float) -> float:
    if t == 0 or t == 1:
        return float(t)
    if t < 0.5:
        return 2.0 ** (20.0 * t - 10.0) / 2.0
    return (2.0 - 2.0 ** (-20.0 * t + 10.0)) / 2.0


def _in_circ(t: float) -> float:
    return 1.0 - math.sqrt(1.0 - t * t)


def _out_circ(t: float) -> float:
    return math.sqrt(1.0 - (t - 1.0) ** 2)


def _in_out_circ(t: float) -> float:
    if t < 0.5:
        return (1.0 - math.sqrt(1.0 - (2.0 * t) ** 2)) / 2.0
    return (math.sqrt(1.0 - (-2.0 * t + 2.0) ** 2) + 1.0) / 2.0


def _in_back(t: float) -> float:
    return _C3 * t**3 - _C1 * t**2


def _out_back(t: float) -> float:
    return 1.0 + _C3 * (t - 1.0) ** 3 + _C1 * (t - 1.0) ** 2


def _in_out_back(t: float) -> float:
    if t < 0.5:
        return ((2.0 * t) ** 2 * ((_C2 + 1.0) * 2.0 * t - _C2)) / 2.0
    return ((2.0 * t - 2.0) ** 2 * ((_C2 + 1.0) * (t * 2.0 - 2.0) + _C2) + 2.0) / 2.0


def _in_elastic(t: float) -> float:
    if t == 0 or t == 1:
        return float(t)
    return -(2.0 ** (10.0 * t - 10.0)) * math.sin((t * 10.0 - 10.75) * _C4)


def _out_elastic(t: float) -> float:
    if t == 0 or t == 1:
        return float(t)
    return 2.0 ** (-10.0 * t) * math.sin((t * 10.0 - 0.75) * _C4) + 1.0


def _in_out_elastic(t: float) -> float:
    if t == 0 or t == 1:
        return float(t)
    if t < 0.5:
        return -(2.0 ** (20.0 * t - 10.0) * math.sin((20.0 * t - 11.125) * _C5)) / 2.0
    return (2.0 ** (-20.0 * t + 10.0) * math.sin((20.0 * t - 11.125) * _C5)) / 2.0 + 1.0


def _out_bounce(t: float) -> float:
    n1 = 7.5625
    d1 = 2.75
    if t < 1.0 / d1:
        return n1 * t * t
    if t < 2.0 / d1:
        t -= 1.5 / d1
        return n1 * t * t + 0.75
    if t < 2.5 / d1:
        t -= 2.25 / d1
        return n1 * t * t + 0.9375
    t -= 2.625 / d1
    return n1 * t * t + 0.984375


def _in_bounce(t: float) -> float:
    return 1.0 - _out_bounce(1.0 - t)


def _in_out_bounce(t: float) -> float:
    if t < 0.5:
        return (1.0 - _out_bounce(1.0 - 2.0 * t)) / 2.0
    return (1.0 + _out_bounce(2.0 * t - 1.0)) / 2.0


# name -> (in, out, in-out)
_EASINGS: dict[str, tuple[EasingFunc, EasingFunc, EasingFunc]] = {
    "linear": (linear, linear, linear),
    "sine": (_in_sine, _out_sine, _in_out_sine),
    "quad": _power(2),
    "cubic": _power(3),
    "quart": _power(4),
    "quint": _power(5),
    "expo": (_in_expo, _out_expo, _in_out_expo),
    "circ": (_in_circ, _out_circ, _in_out_circ),
    "back": (_in_back, _out_back, _in_out_back),
    "elastic": (_in_elastic, _out_elastic, _in_out_elastic),
    "bounce": (_in_bounce, _out_bounce, _in_out_bounce),
}

EASING_TYPES = tuple(_EASINGS)


def get_easing(name: str = "linear", mode: str = "out") -> EasingFunc:
    if name not in _EASINGS:
        raise ValueError(f"unknown easing type {name!r}, expected one of {'|'.join(EASING_TYPES)}")
    if mode not in EASING_MODES:
        raise ValueError(f"unknown easing mode {mode!r}, expected one of {'|'.join(EASING_MODES)}")
    return _EASINGS[name][EASING_MODES.index(mode)]


def tween(a, b, progress: float, easing: Optional[EasingFunc] = None) -> np.ndarray:
    """Blend transform a towards b at eased progress (clamped to [0, 1]).

    Inherits the limitation of transform.lerp(): no spherical interpolation.
    """
    t = max(0.0, min(1.0, float(progress)))
    return lerp(a, b, (easing or linear)(t))

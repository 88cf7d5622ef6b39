"""
Fixed-width integer model.

A width is a numpy signed integer dtype. The algorithms run on Python ints
but every input is checked against a width first, and loop bounds are taken
from the width's precomputed ceilings:

- max         largest representable value
- max_divisor isqrt(max), the largest trial divisor any value can need

For int64: max = 9223372036854775807, max_divisor = 3037000499.
"""

import operator
from dataclasses import dataclass
from math import isqrt
from typing import Dict, Union

import numpy as np

from .errors import IntegerOverflow

DEFAULT_WIDTH = 'int64'

SUPPORTED_WIDTHS = ('int8', 'int16', 'int32', 'int64')

WidthLike = Union[str, np.dtype, type, 'IntegerWidth']


@dataclass(frozen=True)
class IntegerWidth:
    """Bounds of one signed integer width."""
    name: str
    dtype: np.dtype
    min: int
    max: int
    max_divisor: int

    def coerce(self, n) -> int:
        """
        Convert n to a Python int and check it fits this width.

        Raises TypeError for non-integers (floats, strings) and
        IntegerOverflow for integers outside [min, max].
        """
        value = operator.index(n)
        if value < self.min or value > self.max:
            raise IntegerOverflow(value, self.name)
        return value

    def empty(self) -> np.ndarray:
        return np.empty(0, dtype=self.dtype)


def _build(name: str) -> IntegerWidth:
    info = np.iinfo(name)
    return IntegerWidth(
        name=name,
        dtype=np.dtype(name),
        min=int(info.min),
        max=int(info.max),
        max_divisor=isqrt(int(info.max)),
    )


_WIDTHS: Dict[str, IntegerWidth] = {name: _build(name) for name in SUPPORTED_WIDTHS}


def width_for(width: WidthLike = DEFAULT_WIDTH) -> IntegerWidth:
    """
    Resolve a width from a dtype name, numpy dtype or numpy scalar type.

    Parameters
    ----------
    width : str, np.dtype, type or IntegerWidth
        e.g. 'int32', np.int64, np.dtype('int16').

    Returns
    -------
    IntegerWidth

    Raises
    ------
    ValueError
        If the dtype is not one of the supported signed integer widths.
    """
    if isinstance(width, IntegerWidth):
        return width
    try:
        name = np.dtype(width).name
    except TypeError:
        raise ValueError(f"unknown integer width {width!r}")
    if name not in _WIDTHS:
        raise ValueError(f"unsupported integer width {name!r}; expected one of {SUPPORTED_WIDTHS}")
    return _WIDTHS[name]

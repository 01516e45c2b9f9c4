"""Scalar kinds eligible to hold a version value.

Each kind pairs a name with the Python type that carries its values:
``big_integer`` uses the builtin ``int``, the fixed-width kinds use the numpy
scalar of the same width. Kinds are mutually exclusive: a type descriptor
matches at most one of them.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

import numpy as np

# Integer bit widths of the fixed-width kinds
INT8_BIT_WIDTH = 8
INT16_BIT_WIDTH = 16
INT32_BIT_WIDTH = 32
INT64_BIT_WIDTH = 64

INT8_MAX = (1 << (INT8_BIT_WIDTH - 1)) - 1


class ScalarKind(StrEnum):
    """Supported numeric representations, in lookup order."""

    big_integer = "big_integer"
    int8 = "int8"
    int32 = "int32"
    int64 = "int64"
    int16 = "int16"

    @property
    def python_type(self) -> type:
        return _PYTHON_TYPES[self]

    @property
    def bit_width(self) -> int | None:
        """Width in bits, or None for the arbitrary-precision kind."""
        return _BIT_WIDTHS.get(self)

    def matches(self, target_type: Any) -> bool:
        """Return True if *target_type* describes values of this kind.

        ``int`` only selects ``big_integer``. Fixed-width kinds accept any
        numpy signed integer type or dtype of their width, so aliases such as
        ``numpy.longlong`` and ``numpy.dtype("q")`` select ``int64``.
        """
        if self is ScalarKind.big_integer:
            return target_type is int
        if isinstance(target_type, np.dtype):
            dtype = target_type
        elif isinstance(target_type, type) and issubclass(target_type, np.signedinteger):
            dtype = np.dtype(target_type)
        else:
            return False
        return dtype.kind == "i" and dtype.itemsize * 8 == self.bit_width

    def narrow(self, value: int) -> Any:
        """Wrap *value* into this kind's two's-complement range."""
        width = self.bit_width
        if width is None:
            return int(value)
        span = 1 << width
        half = span >> 1
        return self.python_type(((value + half) % span) - half)


_PYTHON_TYPES: dict[ScalarKind, type] = {
    ScalarKind.big_integer: int,
    ScalarKind.int8: np.int8,
    ScalarKind.int32: np.int32,
    ScalarKind.int64: np.int64,
    ScalarKind.int16: np.int16,
}

_BIT_WIDTHS: dict[ScalarKind, int] = {
    ScalarKind.int8: INT8_BIT_WIDTH,
    ScalarKind.int32: INT32_BIT_WIDTH,
    ScalarKind.int64: INT64_BIT_WIDTH,
    ScalarKind.int16: INT16_BIT_WIDTH,
}

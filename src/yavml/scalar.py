# yavml/scalar.py
import logging
import math
import numbers
import operator

import numpy as np

from yavml import config
from yavml.errors import IntegerDivisionByZero

logger = logging.getLogger("yavml.scalar")


class Scalar:
    """
    Arithmetic for one vector component type, backed by a numpy dtype.

    Components travel as plain Python numbers. numpy is only used to carry
    out each operation in the component type and round the result into it.
    """
    name = "scalar"
    dtype = None

    def __init__(self):
        self.zero = self.coerce(0)
        self.one = self.coerce(1)

    def __repr__(self) -> str:
        return f"<Scalar {self.name}>"

    def coerce(self, value):
        """Convert a user-supplied number into this component type."""
        raise NotImplementedError

    def cast(self, value):
        """Convert a component of another vector variant into this type."""
        raise NotImplementedError

    def _apply(self, ufunc, a, b):
        # Wraparound, overflow to inf and x/0.0 are the expected results here.
        with np.errstate(all="ignore"):
            return ufunc(self.dtype.type(a), self.dtype.type(b)).item()

    def add(self, a, b):
        return self._apply(np.add, a, b)

    def sub(self, a, b):
        return self._apply(np.subtract, a, b)

    def mul(self, a, b):
        return self._apply(np.multiply, a, b)

    def div(self, a, b):
        return self._apply(np.true_divide, a, b)

    @staticmethod
    def sqrt(value) -> float:
        """
        Widens value to float64 and takes its square root.
        Negative input gives NaN rather than raising.
        """
        with np.errstate(invalid="ignore"):
            return np.sqrt(np.float64(value)).item()


class Int32(Scalar):
    name = "int32"
    dtype = np.dtype(np.int32)

    def coerce(self, value) -> int:
        value = operator.index(value)
        if not config.INT32_MIN <= value <= config.INT32_MAX:
            raise OverflowError(f"{value} is out of range for {self.name}")
        return value

    def cast(self, value) -> int:
        """
        Truncates toward zero. NaN becomes 0 and anything outside the int32
        range, infinities included, saturates to the nearest bound.
        """
        if isinstance(value, numbers.Integral):
            return self.coerce(value)
        if math.isnan(value):
            logger.debug("NaN component cast to %s as 0", self.name)
            return 0
        if not config.INT32_MIN - 1 < value < config.INT32_MAX + 1:
            bound = config.INT32_MAX if value > 0 else config.INT32_MIN
            logger.debug("Component %r saturated to %s bound %d", value, self.name, bound)
            return bound
        return math.trunc(value)

    def div(self, a: int, b: int) -> int:
        if b == 0:
            raise IntegerDivisionByZero()
        # Round toward zero, not toward negative infinity like Python's //.
        quotient = abs(a) // abs(b)
        if (a < 0) != (b < 0):
            quotient = -quotient
        return self.wrap(quotient)

    @staticmethod
    def wrap(value: int) -> int:
        """Two's complement wraparound of an arbitrary int into int32."""
        return (value - config.INT32_MIN) % 2**32 + config.INT32_MIN


class Floating(Scalar):
    def coerce(self, value) -> float:
        if not isinstance(value, numbers.Real):
            raise TypeError(
                f"{self.name} component must be a real number, not {type(value).__name__}"
            )
        with np.errstate(over="ignore"):
            return self.dtype.type(value).item()

    # Widening is exact and narrowing rounds to nearest, both handled by numpy.
    cast = coerce


class Float32(Floating):
    name = "float32"
    dtype = np.dtype(np.float32)


class Float64(Floating):
    name = "float64"
    dtype = np.dtype(np.float64)


INT32 = Int32()
FLOAT32 = Float32()
FLOAT64 = Float64()

# yavml/vector2.py
import numpy as np

from yavml.scalar import FLOAT32, FLOAT64, INT32, Scalar


class Vector2:
    """
    An immutable 2D vector supporting component-wise arithmetic, dot and
    cross products, length, and conversion between component types.

    Vector2 itself is abstract: each concrete subclass binds a ``scalar``
    that fixes the component type, and every result is computed and rounded
    in that type. Compound assignment (``v += w``) rebinds ``v`` to a new
    vector, the same way it does for ints and floats.
    """
    __slots__ = ("x", "y")

    scalar: Scalar = None

    ZERO: "Vector2"
    ONE: "Vector2"
    NEG_ONE: "Vector2"
    UP: "Vector2"
    DOWN: "Vector2"
    LEFT: "Vector2"
    RIGHT: "Vector2"

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.scalar is None:
            return
        cls.ZERO = cls.splat(0)
        cls.ONE = cls.splat(1)
        cls.NEG_ONE = cls.splat(-1)
        cls.UP = cls(0, 1)
        cls.DOWN = cls(0, -1)
        cls.LEFT = cls(-1, 0)
        cls.RIGHT = cls(1, 0)

    def __init__(self, x=0, y=0):
        if self.scalar is None:
            raise TypeError(
                "Vector2 has no component type; use IntVector2, FloatVector2 or DoubleVector2"
            )
        object.__setattr__(self, "x", self.scalar.coerce(x))
        object.__setattr__(self, "y", self.scalar.coerce(y))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable; use set() or an operator")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def new(cls, x, y) -> "Vector2":
        return cls(x, y)

    @classmethod
    def splat(cls, value) -> "Vector2":
        """Creates a vector with both components set to value."""
        return cls(value, value)

    @classmethod
    def from_array(cls, values) -> "Vector2":
        """
        Creates a vector from a length-2 sequence or numpy array,
        index 0 being x and index 1 being y.
        """
        if len(values) != 2:
            raise ValueError(f"{cls.__name__} needs exactly 2 components, got {len(values)}")
        return cls(values[0], values[1])

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=self.scalar.dtype)

    def set(self, new_x, new_y) -> "Vector2":
        """
        Returns a vector of the same type with both components replaced.
        Rebind to apply it: ``v = v.set(2, 3)``.
        """
        return type(self)(new_x, new_y)

    def _cast(self, target: type) -> "Vector2":
        return target(target.scalar.cast(self.x), target.scalar.cast(self.y))

    def as_int(self) -> "IntVector2":
        """
        Truncates each component toward zero. NaN becomes 0 and values
        outside the int32 range saturate to its bounds.
        """
        return self._cast(IntVector2)

    def as_float(self) -> "FloatVector2":
        """Rounds each component to the nearest float32."""
        return self._cast(FloatVector2)

    def as_double(self) -> "DoubleVector2":
        return self._cast(DoubleVector2)

    def _same_variant(self, other: "Vector2") -> "Vector2":
        if type(other) is not type(self):
            raise TypeError(
                f"expected {type(self).__name__}, got {type(other).__name__}"
            )
        return other

    def dot(self, other: "Vector2"):
        other = self._same_variant(other)
        s = self.scalar
        return s.add(s.mul(self.x, other.x), s.mul(self.y, other.y))

    def cross(self, other: "Vector2"):
        """
        2D cross product, the z component of the 3D cross product:
        the signed area of the parallelogram spanned by both vectors.
        """
        other = self._same_variant(other)
        s = self.scalar
        return s.sub(s.mul(self.x, other.y), s.mul(self.y, other.x))

    def length(self) -> float:
        return self.scalar.sqrt(self.dot(self))

    def _operands(self, other, allow_scalar: bool):
        if type(other) is type(self):
            return other.x, other.y
        if allow_scalar and not isinstance(other, Vector2):
            # A scalar the component type cannot hold, e.g. 2.5 or 2**40 for int32.
            try:
                value = self.scalar.coerce(other)
            except (TypeError, OverflowError):
                return None
            return value, value
        return None

    def _combine(self, op, other, allow_scalar: bool = False):
        operands = self._operands(other, allow_scalar)
        if operands is None:
            return NotImplemented
        return type(self)(op(self.x, operands[0]), op(self.y, operands[1]))

    def __add__(self, other: "Vector2") -> "Vector2":
        return self._combine(self.scalar.add, other)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return self._combine(self.scalar.sub, other)

    def __mul__(self, other):
        # Scalars are broadcast to both components.
        return self._combine(self.scalar.mul, other, allow_scalar=True)

    def __rmul__(self, other) -> "Vector2":
        return self.__mul__(other)

    def __truediv__(self, other):
        return self._combine(self.scalar.div, other, allow_scalar=True)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return type(other) is type(self) and self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.x, self.y))

    def __iter__(self):
        return iter((self.x, self.y))

    def __reduce__(self):
        return type(self), (self.x, self.y)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x}, {self.y})"


class IntVector2(Vector2):
    """
    A vector of two 32-bit signed integers.

    Addition, subtraction and multiplication wrap around on overflow.
    Division truncates toward zero and raises IntegerDivisionByZero
    when any divisor is zero.
    """
    __slots__ = ()
    scalar = INT32


class FloatVector2(Vector2):
    """
    A vector of two 32-bit floats. Every result is rounded to float32;
    division by zero gives inf or NaN as IEEE-754 prescribes.
    """
    __slots__ = ()
    scalar = FLOAT32


class DoubleVector2(Vector2):
    """A vector of two 64-bit floats."""
    __slots__ = ()
    scalar = FLOAT64

# yavml/__init__.py
"""
yavml: small 2D vector types with int32, float32 and float64 components.
"""
import logging

from yavml import config
from yavml.errors import IntegerDivisionByZero
from yavml.scalar import FLOAT32, FLOAT64, INT32, Scalar
from yavml.vector2 import DoubleVector2, FloatVector2, IntVector2, Vector2

__all__ = [
    "Vector2",
    "IntVector2",
    "FloatVector2",
    "DoubleVector2",
    "IntegerDivisionByZero",
    "Scalar",
    "INT32",
    "FLOAT32",
    "FLOAT64",
]

__version__ = "0.1.0"

logger = logging.getLogger("yavml")
logger.addHandler(logging.NullHandler())
_level = getattr(logging, str(config.LOG_LEVEL).upper(), None)
logger.setLevel(_level if isinstance(_level, int) else logging.WARNING)

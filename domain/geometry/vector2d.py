# domain/geometry/vector2d.py
import logging
import math
from numbers import Real
from typing import ClassVar, Tuple
from pydantic import Field
from utils.base_model import ValueConstant, ValueModel
from utils.tolerance import approx_equal, is_approx_zero, quantize

logger = logging.getLogger(__name__)


class Vector2d(ValueModel):
    """
    Two-dimensional vector with double precision.

    Components are mutable in place, either directly or by assigning to
    ``length``. Equality is tolerance based: two vectors are equal when every
    component matches within EPSILON.
    """
    x: float = Field(description="X component")
    y: float = Field(description="Y component")

    ZERO_VECTOR: ClassVar["Vector2d"] = ValueConstant(0.0, 0.0)
    X_AXIS: ClassVar["Vector2d"] = ValueConstant(1.0, 0.0)
    Y_AXIS: ClassVar["Vector2d"] = ValueConstant(0.0, 1.0)

    def __init__(self, x: float, y: float) -> None:
        super().__init__(x=x, y=y)

    @property
    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    @length.setter
    def length(self, value: float) -> None:
        # A zero vector has no direction to keep, so it stays at the origin
        if self.is_zero:
            if not is_approx_zero(value):
                logger.debug(f"Cannot rescale zero vector to length {value}, keeping {self}")
            self.x = 0.0
            self.y = 0.0
            return

        scale_delta = value / self.length
        self.x *= scale_delta
        self.y *= scale_delta

    def set_length(self, value: float) -> "Vector2d":
        """Rescale this vector in place and return it."""
        self.length = value
        return self

    def with_length(self, value: float) -> "Vector2d":
        """Return a rescaled copy, leaving this vector unchanged."""
        return self.clone().set_length(value)

    @property
    def is_zero(self) -> bool:
        """Is this a zero vector?"""
        return is_approx_zero(self.length)

    @property
    def is_unit(self) -> bool:
        """Is this a unit vector?"""
        return approx_equal(self.length, 1.0)

    def normalized(self) -> "Vector2d":
        """
        Unit version of the vector.

        The source vector is not affected.

        Returns:
            Normalized vector, or (0; 0) if this is a zero vector
        """
        if self.is_zero:
            logger.debug(f"Normalizing zero vector {self}")
            return Vector2d(0.0, 0.0)

        return self * (1.0 / self.length)

    def cross_product(self, other: "Vector2d") -> float:
        """
        Compute the cross product with another vector.

        In two dimensions this is the determinant of the matrix made of the
        two vectors, i.e. the signed area of the parallelogram they span.
        """
        return self.x * other.y - self.y * other.x

    def dot_product(self, other: "Vector2d") -> float:
        """Compute the dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def get_vector_to(self, other: "Vector2d") -> "Vector2d":
        """Get the vector leading from the tip of this vector to the tip of another."""
        return other - self

    def as_tuple(self) -> Tuple[float, float]:
        """Components as a plain tuple."""
        return self.x, self.y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2d):
            return NotImplemented
        return approx_equal(self.x, other.x) and approx_equal(self.y, other.y)

    def __hash__(self) -> int:
        # Quantized to the tolerance grid so near-equal vectors usually collide
        return hash(tuple(quantize(c) for c in self.as_tuple()))

    def __neg__(self) -> "Vector2d":
        return Vector2d(-self.x, -self.y)

    def __add__(self, other: "Vector2d") -> "Vector2d":
        if not isinstance(other, Vector2d):
            return NotImplemented
        return Vector2d(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2d") -> "Vector2d":
        if not isinstance(other, Vector2d):
            return NotImplemented
        return Vector2d(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2d":
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector2d(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vector2d":
        if not isinstance(scalar, Real):
            return NotImplemented
        if is_approx_zero(scalar):
            raise ZeroDivisionError("Cannot divide a vector by zero")
        return Vector2d(self.x / scalar, self.y / scalar)

    def __str__(self) -> str:
        """String representation of the vector, (x; y)."""
        return f"({self.x}; {self.y})"

# domain/geometry/vector3d.py
import logging
import math
from numbers import Real
from typing import ClassVar, Tuple
from pydantic import Field
from utils.base_model import ValueConstant, ValueModel
from utils.tolerance import approx_equal, is_approx_zero, quantize

logger = logging.getLogger(__name__)


class Vector3d(ValueModel):
    """
    Three-dimensional vector with double precision.

    Mirrors Vector2d with a third axis; the cross product here yields a vector
    perpendicular to both operands rather than a scalar.
    """
    x: float = Field(description="X component")
    y: float = Field(description="Y component")
    z: float = Field(description="Z component")

    ZERO_VECTOR: ClassVar["Vector3d"] = ValueConstant(0.0, 0.0, 0.0)
    X_AXIS: ClassVar["Vector3d"] = ValueConstant(1.0, 0.0, 0.0)
    Y_AXIS: ClassVar["Vector3d"] = ValueConstant(0.0, 1.0, 0.0)
    Z_AXIS: ClassVar["Vector3d"] = ValueConstant(0.0, 0.0, 1.0)

    def __init__(self, x: float, y: float, z: float) -> None:
        super().__init__(x=x, y=y, z=z)

    @property
    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    @length.setter
    def length(self, value: float) -> None:
        if self.is_zero:
            if not is_approx_zero(value):
                logger.debug(f"Cannot rescale zero vector to length {value}, keeping {self}")
            self.x = 0.0
            self.y = 0.0
            self.z = 0.0
            return

        scale_delta = value / self.length
        self.x *= scale_delta
        self.y *= scale_delta
        self.z *= scale_delta

    def set_length(self, value: float) -> "Vector3d":
        """Rescale this vector in place and return it."""
        self.length = value
        return self

    def with_length(self, value: float) -> "Vector3d":
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

    def normalized(self) -> "Vector3d":
        """Unit version of the vector, or (0; 0; 0) for a zero vector."""
        if self.is_zero:
            logger.debug(f"Normalizing zero vector {self}")
            return Vector3d(0.0, 0.0, 0.0)

        return self * (1.0 / self.length)

    def cross_product(self, other: "Vector3d") -> "Vector3d":
        """
        Compute the cross product with another vector.

        Args:
            other: Right-hand operand

        Returns:
            Vector perpendicular to both operands, following the right-hand rule
        """
        return Vector3d(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def dot_product(self, other: "Vector3d") -> float:
        """Compute the dot product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def get_vector_to(self, other: "Vector3d") -> "Vector3d":
        """Get the vector leading from the tip of this vector to the tip of another."""
        return other - self

    def as_tuple(self) -> Tuple[float, float, float]:
        """Components as a plain tuple."""
        return self.x, self.y, self.z

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3d):
            return NotImplemented
        return (approx_equal(self.x, other.x)
                and approx_equal(self.y, other.y)
                and approx_equal(self.z, other.z))

    def __hash__(self) -> int:
        return hash(tuple(quantize(c) for c in self.as_tuple()))

    def __neg__(self) -> "Vector3d":
        return Vector3d(-self.x, -self.y, -self.z)

    def __add__(self, other: "Vector3d") -> "Vector3d":
        if not isinstance(other, Vector3d):
            return NotImplemented
        return Vector3d(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3d") -> "Vector3d":
        if not isinstance(other, Vector3d):
            return NotImplemented
        return Vector3d(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> "Vector3d":
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector3d(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vector3d":
        if not isinstance(scalar, Real):
            return NotImplemented
        if is_approx_zero(scalar):
            raise ZeroDivisionError("Cannot divide a vector by zero")
        return Vector3d(self.x / scalar, self.y / scalar, self.z / scalar)

    def __str__(self) -> str:
        """String representation of the vector, (x; y; z)."""
        return f"({self.x}; {self.y}; {self.z})"

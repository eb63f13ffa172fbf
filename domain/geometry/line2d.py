# domain/geometry/line2d.py
from pydantic import Field, field_validator
from domain.geometry.vector2d import Vector2d
from utils.base_model import ValueModel


class Line2d(ValueModel):
    """
    A line through the plane, given by a point on it and a direction.

    The line keeps its own copies of the two vectors it is given; the direction
    is not required to be non-zero or normalized.
    """
    point_on_line: Vector2d = Field(description="A point that lies on the line")
    direction: Vector2d = Field(description="Direction along which all points of the line lie")

    def __init__(self, point_on_line: Vector2d, direction: Vector2d) -> None:
        super().__init__(point_on_line=point_on_line, direction=direction)

    @field_validator("point_on_line", "direction")
    @classmethod
    def copy_vector(cls, v: Vector2d) -> Vector2d:
        """Store a private copy so the caller's vector and the line stay independent."""
        return v.clone()

    def __str__(self) -> str:
        """String representation of the line."""
        return f"Line2d({self.point_on_line} -> {self.direction})"

# domain/geometry/line3d.py
from pydantic import Field, field_validator
from domain.geometry.vector3d import Vector3d
from utils.base_model import ValueModel


class Line3d(ValueModel):
    """A line through space, given by a point on it and a direction."""
    point_on_line: Vector3d = Field(description="A point that lies on the line")
    direction: Vector3d = Field(description="Direction along which all points of the line lie")

    def __init__(self, point_on_line: Vector3d, direction: Vector3d) -> None:
        super().__init__(point_on_line=point_on_line, direction=direction)

    @field_validator("point_on_line", "direction")
    @classmethod
    def copy_vector(cls, v: Vector3d) -> Vector3d:
        """Store a private copy so the caller's vector and the line stay independent."""
        return v.clone()

    def __str__(self) -> str:
        return f"Line3d({self.point_on_line} -> {self.direction})"

# utils/base_model.py
from typing import TypeVar, Any, Optional, Tuple, Type, cast
from pydantic import BaseModel

T = TypeVar('T', bound=BaseModel)


class ValueModel(BaseModel):
    """
    Base class for small mutable value types.

    Fields stay writable after creation, but every assignment is validated
    against the declared field type. Since Python shares objects by reference,
    clone() and with_changes() are how callers get independent values.
    """
    model_config = {
        "validate_assignment": True,
    }

    def clone(self: T) -> T:
        """Create an independent copy of this instance."""
        return self.model_copy(deep=True)

    def with_changes(self, **changes: Any) -> T:
        """
        Create a new instance with specified changes.

        Args:
            **changes: Keyword arguments with field values to change

        Returns:
            New instance with updated values

        Raises:
            ValueError: If an invalid field name is provided
        """
        current_data = {name: getattr(self, name) for name in type(self).model_fields}

        for key, value in changes.items():
            if key not in current_data:
                raise ValueError(f"Invalid field: {key}")
            current_data[key] = value

        cls = self.__class__
        return cast(T, cls(**current_data))


class ValueConstant:
    """
    Named constant of a ValueModel class.

    Every access builds a fresh instance from the stored arguments, so callers
    can mutate what they get without touching the constant itself.

    Usage:
        class Vector2d(ValueModel):
            X_AXIS: ClassVar["Vector2d"] = ValueConstant(1.0, 0.0)
    """

    def __init__(self, *args: Any) -> None:
        self.args: Tuple[Any, ...] = args

    def __get__(self, instance: Optional[Any], owner: Type[T]) -> T:
        return owner(*self.args)

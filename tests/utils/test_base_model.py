import pytest
from typing import Dict, List, Optional
from pydantic import BaseModel, ValidationError
from utils.base_model import ValueModel


class SimpleModel(ValueModel):
    """Simple test model with basic attributes."""
    name: str
    value: float


class NestedModel(ValueModel):
    """Model holding another value model."""
    title: str
    data: Dict[str, float]
    tags: List[str]
    simple: Optional[SimpleModel] = None


class TestValueModel:
    """Test suite for ValueModel base class."""

    def test_basic_creation(self):
        model = SimpleModel(name="test", value=42)
        assert model.name == "test"
        assert model.value == 42.0

    def test_fields_are_mutable(self):
        model = SimpleModel(name="test", value=42)
        model.name = "changed"
        model.value = 100

        assert model.name == "changed"
        assert model.value == 100.0

    def test_assignment_is_validated(self):
        model = SimpleModel(name="test", value=42)

        model.value = 7
        assert isinstance(model.value, float)

        with pytest.raises(ValidationError):
            model.value = "not a number"

    def test_clone_is_independent(self):
        original = NestedModel(
            title="Example",
            data={"a": 1.0},
            tags=["test"],
            simple=SimpleModel(name="nested", value=10)
        )
        duplicate = original.clone()

        duplicate.title = "Changed"
        duplicate.simple.value = 20
        duplicate.tags.append("more")

        assert original.title == "Example"
        assert original.simple.value == 10
        assert original.tags == ["test"]

    def test_pydantic_copy_api_is_untouched(self):
        assert ValueModel.copy is BaseModel.copy

        model = SimpleModel(name="test", value=1)
        updated = model.model_copy(update={"value": 2.0})
        assert updated.value == 2.0
        assert model.value == 1.0

    def test_with_changes_basic(self):
        original = SimpleModel(name="test", value=42)
        modified = original.with_changes(name="updated")

        assert original.name == "test"
        assert modified.name == "updated"
        assert modified.value == 42
        assert original is not modified

    def test_with_changes_multiple_fields(self):
        original = SimpleModel(name="test", value=42)
        modified = original.with_changes(name="updated", value=100)

        assert modified.name == "updated"
        assert modified.value == 100

    def test_with_changes_invalid_field(self):
        model = SimpleModel(name="test", value=42)

        with pytest.raises(ValueError) as exc_info:
            model.with_changes(nonexistent="value")

        assert "Invalid field: nonexistent" in str(exc_info.value)

    def test_with_changes_validates_values(self):
        model = SimpleModel(name="test", value=42)

        with pytest.raises(ValidationError):
            model.with_changes(value="not a number")

    def test_chained_with_changes(self):
        original = SimpleModel(name="test", value=1)

        result = original.with_changes(name="step1") \
            .with_changes(value=2) \
            .with_changes(name="final")

        assert result.name == "final"
        assert result.value == 2
        assert original.name == "test"
        assert original.value == 1

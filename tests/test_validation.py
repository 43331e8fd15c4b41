"""Tests for argument validation, exceptions and declared type hierarchies."""

import math

import pytest

import nearmatch as nm
from nearmatch._utils import (
    check_count,
    check_finite,
    check_unit_interval,
    clamp,
    normalize_kind,
)


class Shape:
    pass


class Circle(Shape):
    pass


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_validation_error_is_value_error(self):
        assert issubclass(nm.ValidationError, nm.NearMatchError)
        assert issubclass(nm.ValidationError, ValueError)

    def test_caught_as_value_error(self):
        with pytest.raises(ValueError):
            nm.most_similar("a", ["b"], threshold=math.nan)


class TestHelpers:
    """Tests for the internal validation helpers."""

    def test_normalize_kind(self):
        assert normalize_kind("TEXT") is nm.ValueKind.TEXT
        assert normalize_kind("ordered_sequence") is nm.ValueKind.ORDERED_SEQUENCE
        assert normalize_kind(nm.ValueKind.CHAR) is nm.ValueKind.CHAR

    def test_normalize_kind_unknown(self):
        with pytest.raises(nm.ValidationError, match="Unknown value kind"):
            normalize_kind("colour")

    def test_normalize_kind_wrong_type(self):
        with pytest.raises(TypeError):
            normalize_kind(3)

    def test_check_finite(self):
        assert check_finite("threshold", 1) == 1.0
        with pytest.raises(nm.ValidationError):
            check_finite("threshold", math.inf)
        with pytest.raises(TypeError):
            check_finite("threshold", "0.5")
        with pytest.raises(TypeError):
            check_finite("threshold", True)

    def test_check_unit_interval(self):
        assert check_unit_interval("min_similarity", 0.0) == 0.0
        assert check_unit_interval("min_similarity", 1.0) == 1.0
        with pytest.raises(nm.ValidationError, match="between 0.0 and 1.0"):
            check_unit_interval("min_similarity", -0.1)

    def test_check_count(self):
        assert check_count("limit", None) is None
        assert check_count("limit", 0) == 0
        with pytest.raises(nm.ValidationError, match="non-negative"):
            check_count("limit", -1)
        with pytest.raises(TypeError):
            check_count("limit", 1.5)

    def test_clamp(self):
        assert clamp(-0.5) == 0.0
        assert clamp(1.5) == 1.0
        assert clamp(0.25) == 0.25


class TestTypeTag:
    """Tests for TypeTag."""

    def test_root_is_its_own_supertype(self):
        assert nm.ANY.supertype is nm.ANY
        assert nm.ANY.ancestors() == [nm.ANY]

    def test_ancestors_nearest_first(self):
        types = nm.TypeHierarchy()
        number = types.declare("Number")
        real = types.declare("Real", number)
        integer = types.declare("Integer", "Real")
        assert integer.ancestors() == [real, number, nm.ANY]
        assert integer.is_subtype(number)
        assert integer.is_subtype(integer)
        assert not number.is_subtype(integer)

    def test_repr(self):
        assert repr(nm.TypeHierarchy().declare("Number")) == "TypeTag('Number')"


class TestTypeHierarchy:
    """Tests for declaring types."""

    def test_redeclare_same_parent_returns_existing(self):
        types = nm.TypeHierarchy()
        first = types.declare("Number")
        assert types.declare("Number") is first

    def test_redeclare_different_parent(self):
        types = nm.TypeHierarchy()
        types.declare("Number")
        types.declare("Text")
        with pytest.raises(nm.ValidationError, match="already declared"):
            types.declare("Number", "Text")

    def test_unknown_parent(self):
        types = nm.TypeHierarchy()
        with pytest.raises(nm.ValidationError, match="not declared"):
            types.declare("Integer", "Number")
        with pytest.raises(nm.ValidationError, match="not declared"):
            types.declare("Integer", nm.TypeTag("Number", nm.ANY))

    def test_cannot_redeclare_root(self):
        with pytest.raises(nm.ValidationError, match="root"):
            nm.TypeHierarchy().declare("Any")

    def test_get_and_chain(self):
        types = nm.TypeHierarchy()
        types.declare("Number")
        types.declare("Real", "Number")
        assert types.get("Real").name == "Real"
        assert types.chain("Real") == ["Number", "Any"]
        with pytest.raises(nm.ValidationError):
            types.get("Complex")

    def test_container_protocol(self):
        types = nm.TypeHierarchy()
        types.declare("Number")
        assert "Number" in types
        assert "Any" in types
        assert len(types) == 2
        assert [tag.name for tag in types] == ["Any", "Number"]
        assert repr(types) == "TypeHierarchy(size=2)"

    def test_from_builtin_classes(self):
        types = nm.TypeHierarchy.from_classes(KeyError, IndexError)
        assert types.chain("KeyError") == ["LookupError", "Exception", "BaseException", "Any"]
        assert "IndexError" in types

    def test_from_user_classes(self):
        types = nm.TypeHierarchy.from_classes(Circle)
        circle = f"{__name__}.Circle"
        assert types.chain(circle) == [f"{__name__}.Shape", "Any"]

    def test_object_is_the_root(self):
        assert nm.TypeHierarchy().declare_class(object) is nm.ANY


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

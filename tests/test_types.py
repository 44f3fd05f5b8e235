import pytest
from pydantic import ValidationError

from filter_docs.document.route import DocumentedParameter
from filter_docs.document.types import (
    ArrayType,
    ObjectType,
    PrimitiveKind,
    PrimitiveType,
    array,
    boolean,
    float_,
    integer,
    object_,
    string,
    type_for,
)


class TestConstructors:
    def test_primitives_are_required_without_description(self):
        for t, kind in (
            (boolean(), PrimitiveKind.BOOLEAN),
            (float_(), PrimitiveKind.FLOAT),
            (integer(), PrimitiveKind.INTEGER),
            (string(), PrimitiveKind.STRING),
        ):
            assert t.primitive == kind
            assert t.required is True
            assert t.description is None

    def test_object_defaults_to_no_properties(self):
        assert object_().properties == {}

    def test_object_with_properties(self):
        t = object_({"name": string(), "tags": array(string())})
        assert isinstance(t.properties["tags"], ArrayType)
        assert t.properties["tags"].element == string()

    def test_described_and_optional_return_copies(self):
        base = integer()
        changed = base.described("Page size").optional()
        assert changed.description == "Page size"
        assert changed.required is False
        assert base.description is None
        assert base.required is True

    def test_types_are_frozen(self):
        t = integer()
        with pytest.raises(ValidationError):
            t.required = False


class TestTypeFor:
    def test_known_python_types(self):
        assert type_for(int) == integer()
        assert type_for(str) == string()
        assert type_for(float) == float_()

    def test_bool_is_not_integer(self):
        assert type_for(bool) == boolean()

    def test_unknown_type_falls_back_to_object(self):
        t = type_for(dict)
        assert isinstance(t, ObjectType)
        assert t.properties == {}


class TestTaggedUnion:
    def test_validates_nested_shapes_from_dict(self):
        p = DocumentedParameter.model_validate(
            {
                "name": "ids",
                "parameter_type": {
                    "kind": "array",
                    "element": {"kind": "primitive", "primitive": "integer"},
                },
            }
        )
        assert isinstance(p.parameter_type, ArrayType)
        assert isinstance(p.parameter_type.element, PrimitiveType)
        assert p.parameter_type.element.primitive == PrimitiveKind.INTEGER

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            DocumentedParameter.model_validate(
                {"name": "x", "parameter_type": {"kind": "tuple"}}
            )

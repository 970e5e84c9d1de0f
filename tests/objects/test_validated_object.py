# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Tests for declaring, constructing and inspecting validated objects."""

import pytest

from validated_object import (
    Boolean,
    MalformedInputError,
    UnknownAttributeError,
    ValidatedObject,
    ValidationError,
    validated_attr,
    validates_attr,
)
from validated_object.exceptions import ConstraintDefinitionError


class Apple(ValidatedObject):
    diameter = validated_attr(float)


class ColoredApple(Apple):
    color = validated_attr(str)


class RottenApple(ValidatedObject):
    rotten = validated_attr(Boolean)


class Comment:
    pass


class Post(ValidatedObject):
    comments = validates_attr(list, element_type=Comment, allow_nil=True)
    tags = validates_attr(list, element_type=str, allow_nil=True)


class StreamlinedPost(ValidatedObject):
    comments = validated_attr([Comment], allow_nil=True)
    id = validated_attr(int)


# ------------------------------------------------------------------
# Construction input
# ------------------------------------------------------------------


def test_valid_object_exposes_attributes():
    apple = Apple(diameter=2.0)

    assert apple.diameter == 2.0
    assert apple.valid is True


def test_mapping_and_keyword_input_are_equivalent():
    assert Apple({"diameter": 4.0}) == Apple(diameter=4.0)


@pytest.mark.parametrize("bad_input", [5, "diameter", [("diameter", 4.0)]])
def test_non_mapping_input_raises_malformed_input_error(bad_input):
    with pytest.raises(MalformedInputError) as exc_info:
        Apple(bad_input)

    assert isinstance(exc_info.value, TypeError)
    assert "expects a mapping" in str(exc_info.value)


def test_unknown_attribute_is_rejected():
    with pytest.raises(UnknownAttributeError) as exc_info:
        Apple(diameter=4.0, name="Bert")

    assert isinstance(exc_info.value, AttributeError)
    assert exc_info.value.attributes == ["name"]
    assert "name" in str(exc_info.value)


def test_unknown_attribute_is_reported_before_validation():
    with pytest.raises(UnknownAttributeError):
        Apple(diameter="not a float", name="Bert")


# ------------------------------------------------------------------
# Read-only attributes
# ------------------------------------------------------------------


def test_attributes_are_read_only():
    apple = Apple(diameter=4.0)

    with pytest.raises(AttributeError, match="read-only"):
        apple.diameter = 5.0
    with pytest.raises(AttributeError, match="read-only"):
        del apple.diameter

    assert apple.diameter == 4.0


def test_class_access_returns_the_field():
    field = Apple.diameter

    assert field.name == "diameter"
    assert field.allow_nil is False


# ------------------------------------------------------------------
# Type validation
# ------------------------------------------------------------------


def test_invalid_type_raises_validation_error():
    with pytest.raises(ValidationError) as exc_info:
        Apple(diameter="2")

    assert isinstance(exc_info.value, ValueError)
    assert str(exc_info.value) == "Diameter is a String, not a Float"
    assert exc_info.value.type_name == "Apple"


def test_missing_attribute_is_validated_as_nil():
    with pytest.raises(ValidationError, match="Diameter is a Nil, not a Float"):
        Apple()


def test_subclass_inherits_fields():
    apple = ColoredApple(diameter=5.5, color="red")

    assert apple.valid
    assert list(ColoredApple.fields()) == ["diameter", "color"]
    assert list(Apple.fields()) == ["diameter"]


def test_subclass_reports_inherited_fields_first():
    with pytest.raises(ValidationError) as exc_info:
        ColoredApple(diameter="big", color=7)

    assert str(exc_info.value) == (
        "Diameter is a String, not a Float; Color is a Integer, not a String"
    )
    assert [v.attribute for v in exc_info.value.violations] == ["diameter", "color"]


def test_boolean_attribute():
    assert RottenApple(rotten=True).rotten is True
    assert RottenApple(rotten=False).rotten is False

    with pytest.raises(ValidationError, match="Rotten is a Integer, not a Boolean"):
        RottenApple(rotten=1)


def test_validates_declares_on_existing_class():
    class SynonymApple(ValidatedObject):
        pass

    SynonymApple.validated("diameter", float)

    assert SynonymApple(diameter=1.0).diameter == 1.0
    with pytest.raises(ValidationError):
        SynonymApple(diameter="bad")


def test_validates_refreshes_subclass_registries():
    class Base(ValidatedObject):
        pass

    class Child(Base):
        name = validated_attr(str)

    Base.validates("id", int)

    assert list(Child.fields()) == ["id", "name"]
    with pytest.raises(ValidationError, match="Id is a Nil, not a Integer"):
        Child(name="x")


# ------------------------------------------------------------------
# Arrays
# ------------------------------------------------------------------


def test_verbose_array_syntax_accepts_matching_elements():
    post = Post(comments=[Comment(), Comment()], tags=["foo", "bar"])

    assert len(post.comments) == 2
    assert post.tags == ["foo", "bar"]


def test_verbose_array_syntax_rejects_wrong_elements():
    with pytest.raises(ValidationError, match="contains non-Comment elements"):
        Post(comments=[Comment(), "bad"])
    with pytest.raises(ValidationError, match="contains non-String elements"):
        Post(tags=["foo", 123])


def test_array_field_rejects_non_array():
    with pytest.raises(ValidationError, match="Comments is a String, not a Array"):
        Post(comments="not an array")


def test_array_fields_allow_nil():
    post = Post(comments=None, tags=None)

    assert post.comments is None
    assert post.tags is None


def test_streamlined_array_syntax():
    comments = [Comment(), Comment()]
    post = StreamlinedPost(comments=comments, id=1)

    assert post.id == 1
    assert post.comments == comments
    assert isinstance(post.comments[0], Comment)


def test_element_type_requires_an_array_type():
    with pytest.raises(ConstraintDefinitionError, match="element_type requires an array type"):
        validates_attr(str, element_type=int)


# ------------------------------------------------------------------
# Aggregation and introspection
# ------------------------------------------------------------------


def test_all_violations_are_aggregated_in_declaration_order():
    with pytest.raises(ValidationError) as exc_info:
        StreamlinedPost(id="seven", comments="none")

    assert str(exc_info.value) == (
        "Comments is a String, not a Array; Id is a String, not a Integer"
    )
    assert exc_info.value.message == str(exc_info.value)


def test_validate_reports_current_state():
    result = Apple(diameter=1.5).validate()

    assert result.valid is True
    assert result.violations == []


def test_to_dict_and_repr():
    post = StreamlinedPost(id=3)

    assert post.to_dict() == {"comments": None, "id": 3}
    assert repr(post) == "StreamlinedPost(comments=None, id=3)"


def test_objects_are_unhashable_value_objects():
    assert Apple(diameter=1.0) != Apple(diameter=2.0)
    assert Apple(diameter=1.0) != ColoredApple(diameter=1.0, color="red")
    with pytest.raises(TypeError):
        hash(Apple(diameter=1.0))


def test_plain_array_attribute_accepts_tuples():
    class Tagged(ValidatedObject):
        tags = validates_attr(list)

    assert Tagged(tags=("a", "b")).tags == ("a", "b")
    with pytest.raises(ValidationError, match="Tags is a String, not a Array"):
        Tagged(tags="a")

"""
Tests for object() and list_of().
"""

from collections import OrderedDict

import pytest

from structkit import (
    MISSING,
    Err,
    Ok,
    StructError,
    boolean,
    list_of,
    nullable,
    number,
    object,
    optional,
    string,
)

struct = object(
    {
        "a": string("string test"),
        "b": number(),
        "c": optional(boolean()),
    },
    "test",
)


class TestObject:
    def test_ok_if_object(self):
        assert struct({"a": "hello", "b": 1}) == Ok({"a": "hello", "b": 1})

    def test_err_if_not_object(self):
        assert struct(1) == Err(StructError("test", 1, ()))

    @pytest.mark.parametrize("value", [None, [], ["a"], (), "abc", MISSING])
    def test_rejects_null_arrays_and_scalars(self, value):
        assert struct(value) == Err(StructError("test", value, ()))

    def test_err_if_property_invalid(self):
        assert struct({"a": 1, "b": 1}) == Err(StructError("string test", 1, ("a",)))

    def test_default_label(self):
        assert object({})(1) == Err(StructError("Expected an object", 1))

    def test_missing_required_field(self):
        assert struct({"a": "hello"}) == Err(
            StructError("Expected a number", MISSING, ("b",))
        )

    def test_optional_field_present(self):
        assert struct({"a": "x", "b": 1, "c": True}) == Ok({"a": "x", "b": 1, "c": True})

    def test_optional_field_invalid(self):
        assert struct({"a": "x", "b": 1, "c": "no"}) == Err(
            StructError("Expected a boolean", "no", ("c",))
        )

    def test_extra_keys_dropped(self):
        assert struct({"a": "x", "b": 1, "z": 9}) == Ok({"a": "x", "b": 1})

    def test_nullable_field_kept_as_none(self):
        s = object({"a": nullable(string())})
        assert s({"a": None}) == Ok({"a": None})

    def test_fail_fast_in_shape_order(self):
        calls = []

        def tracking(key):
            def run(value):
                calls.append(key)
                return Err(StructError(f"bad {key}", value))

            return run

        s = object({"x": tracking("x"), "y": tracking("y")})
        assert s({"y": 1, "x": 2}) == Err(StructError("bad x", 2, ("x",)))
        assert calls == ["x"]

    def test_nested_path(self):
        s = object({"x": object({"y": string("L3")}, "L2")}, "L1")
        assert s({"x": {"y": 5}}) == Err(StructError("L3", 5, ("x", "y")))

    def test_nested_not_object(self):
        s = object({"x": object({"y": string()}, "L2")}, "L1")
        assert s({"x": [1]}) == Err(StructError("L2", [1], ("x",)))

    def test_output_is_fresh_dict(self):
        value = {"a": "x", "b": 1}
        result = struct(value)
        assert result.value == value
        assert result.value is not value
        assert struct(value).value is not result.value

    def test_accepts_any_mapping(self):
        value = OrderedDict([("b", 1), ("a", "x")])
        assert struct(value) == Ok({"a": "x", "b": 1})

    def test_input_not_mutated(self):
        value = {"a": "x", "b": 1, "z": 9}
        struct(value)
        assert value == {"a": "x", "b": 1, "z": 9}

    def test_shape_must_be_mapping(self):
        with pytest.raises(TypeError):
            object([("a", string())])  # type: ignore[arg-type]

    def test_shape_copied_at_construction(self):
        shape = {"a": string()}
        s = object(shape)
        shape["b"] = number()
        assert s({"a": "x"}) == Ok({"a": "x"})


class TestListOf:
    def test_ok(self):
        assert list_of(number())([1, 2]) == Ok([1, 2])
        assert list_of(number())((1, 2)) == Ok([1, 2])
        assert list_of(number())([]) == Ok([])

    def test_not_array(self):
        assert list_of(number(), "nums")({"a": 1}) == Err(
            StructError("nums", {"a": 1})
        )

    def test_index_in_path(self):
        assert list_of(number())([1, "x"]) == Err(
            StructError("Expected a number", "x", (1,))
        )

    def test_mixed_path(self):
        s = object({"a": list_of(object({"b": string()}))})
        assert s({"a": [{"b": "ok"}, {"b": 1}]}) == Err(
            StructError("Expected a string", 1, ("a", 1, "b"))
        )

import pytest

from validkit.errors import (
    FieldErrors,
    ListErrors,
    StructErrors,
    ValidationError,
    ValidationErrors,
)

FOO_MESSAGE = "Please provide a valid foo!"


def _bad_foo() -> ValidationErrors:
    errors = ValidationErrors()
    errors.add("foo", ValidationError("length", message=FOO_MESSAGE))
    return errors


def test_message():
    assert str(_bad_foo()) == "foo: Please provide a valid foo!"


def test_nested_struct():
    bar = ValidationErrors().merge_self("bar", _bad_foo())
    assert str(bar) == "bar.foo: Please provide a valid foo!"
    deep = ValidationErrors().merge_self("deep_bar", bar)
    assert str(deep) == "deep_bar.bar.foo: Please provide a valid foo!"


def test_nested_vec():
    collection = ValidationErrors({"_tmp_validator": ListErrors({0: _bad_foo()})})
    baz = ValidationErrors().merge_self("baz", collection)
    assert isinstance(baz.errors["baz"], ListErrors)
    assert str(baz) == "baz[0].foo: Please provide a valid foo!"


def test_error_without_message_shows_code_and_params():
    err = ValidationError("meh")
    err.add_param("value", 1)
    assert str(err) == "Validation error: meh [{'value': 1}]"


def test_with_message_sets_message():
    err = ValidationError("meh").with_message("oops")
    assert err.message == "oops"
    assert err.code == "meh"
    assert str(err) == "oops"


def test_add_param_records_value():
    err = ValidationError("custom")
    err.add_param("value", "")
    assert err.params["value"] == ""


def test_several_field_errors_joined():
    errors = ValidationErrors()
    errors.add("__all__", ValidationError("meh", message="a"))
    errors.add("__all__", ValidationError("meh2", message="b"))
    assert [e.code for e in errors.field_errors()["__all__"]] == ["meh", "meh2"]
    assert str(errors) == "__all__: a, b"


def test_top_level_fields_on_separate_lines():
    errors = ValidationErrors()
    errors.add("a", ValidationError("x", message="first"))
    errors.add("b", ValidationError("y", message="second"))
    assert str(errors) == "a: first\nb: second"


def test_add_to_nested_entry_raises():
    errors = ValidationErrors().merge_self("bar", _bad_foo())
    with pytest.raises(ValueError):
        errors.add("bar", ValidationError("meh"))


def test_merge_self_twice_raises():
    errors = ValidationErrors().merge_self("bar", _bad_foo())
    with pytest.raises(ValueError):
        errors.merge_self("bar", _bad_foo())


def test_merge_self_ok_child_is_noop():
    errors = ValidationErrors()
    assert errors.merge_self("bar", None) is errors
    assert errors.is_empty()


def test_merge_child_ok_returns_parent():
    assert ValidationErrors.merge(None, "a", None) is None
    parent = _bad_foo()
    assert ValidationErrors.merge(parent, "a", None) is parent


def test_merge_child_error_nests_struct():
    child = _bad_foo()
    merged = ValidationErrors.merge(None, "a", child)
    assert merged.errors == {"a": StructErrors(child)}
    parent = _bad_foo()
    merged = ValidationErrors.merge(parent, "a", _bad_foo())
    assert set(merged.errors) == {"foo", "a"}


def test_merge_all_collects_struct_entries_by_index():
    inner = _bad_foo()
    child = ValidationErrors({"items": StructErrors(inner)})
    merged = ValidationErrors.merge_all(None, "items", [None, child])
    assert merged.errors == {"items": ListErrors({1: inner})}


def test_merge_all_without_errors_returns_parent():
    assert ValidationErrors.merge_all(None, "items", [None, None]) is None


def test_field_errors_excludes_nested():
    errors = _bad_foo().merge_self("bar", _bad_foo())
    fields = errors.field_errors()
    assert list(fields) == ["foo"]
    assert fields["foo"][0].message == FOO_MESSAGE


def test_has_error():
    assert not ValidationErrors.has_error(None, "foo")
    assert ValidationErrors.has_error(_bad_foo(), "foo")
    assert not ValidationErrors.has_error(_bad_foo(), "bar")


def test_equality_of_field_errors():
    def make():
        err = ValidationError("custom")
        err.add_param("value", 1)
        return err

    actual = ValidationErrors()
    for name in ("plain", "option", "option_option"):
        actual.add(name, make())
    expected = ValidationErrors(
        {
            "plain": FieldErrors([make()]),
            "option": FieldErrors([make()]),
            "option_option": FieldErrors([make()]),
        }
    )
    assert actual == expected


def test_errors_can_be_raised_and_caught():
    errors = ValidationErrors()
    errors.add("foo", ValidationError("length", message=FOO_MESSAGE))
    with pytest.raises(ValidationErrors) as info:
        raise errors
    assert info.value is errors
    assert info.value.field_errors()["foo"][0].code == "length"
    assert str(info.value) == "foo: Please provide a valid foo!"
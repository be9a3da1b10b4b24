"""Behavioural guarantees every composed validator must keep."""

import copy

import pytest

from composable_validation import (
    ErrorCode,
    ValidationError,
    array,
    either,
    email,
    integer,
    number,
    object_,
    phone,
    string,
)

PAYLOADS = [
    {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "age": 36,
        "tags": ["math", "poetry"],
        "addresses": [{"street": "1 St James Sq", "zip": "12345"}],
    },
    {
        "name": "A",
        "email": "nope",
        "tags": ["ok", 5],
        "addresses": [{"street": "", "zip": "x"}, "not-an-object"],
    },
    {"unexpected": True},
    None,
    ["not", "a", "record"],
]


@pytest.mark.parametrize("payload", PAYLOADS)
def test_validation_is_idempotent_and_does_not_mutate_input(
    user_validator, payload
) -> None:
    snapshot = copy.deepcopy(payload)

    first = user_validator.validate(payload)
    second = user_validator.validate(payload)

    assert first == second
    assert payload == snapshot


def test_object_aggregates_every_invalid_field() -> None:
    validator = object_({"a": integer(), "b": integer()})

    result = validator.validate({"a": "x", "b": "y"})

    assert [e.field for e in result.errors] == ["a", "b"]


def test_nested_paths_point_at_the_offending_value() -> None:
    validator = object_({"user": object_({"tags": array(string())})})

    result = validator.validate({"user": {"tags": ["ok", 5]}})

    assert result.errors == (
        ValidationError("user.tags[1]", "must be a string", ErrorCode.INVALID_TYPE),
    )


def test_deep_paths_through_arrays_of_objects(user_validator) -> None:
    result = user_validator.validate(PAYLOADS[1])

    assert [(e.field, e.code) for e in result.errors] == [
        ("name", ErrorCode.TOO_SHORT),
        ("email", ErrorCode.INVALID_FORMAT),
        ("tags[1]", ErrorCode.INVALID_TYPE),
        ("addresses[0].street", ErrorCode.TOO_SHORT),
        ("addresses[0].zip", ErrorCode.INVALID_FORMAT),
        ("addresses[1]", ErrorCode.INVALID_TYPE),
    ]


def test_success_drops_undeclared_keys() -> None:
    validator = object_({"a": number()})

    result = validator.validate({"a": 5, "extra": "x"})

    assert result.valid
    assert result.value == {"a": 5}


def test_successful_user_value_is_the_validated_copy(user_validator) -> None:
    payload = dict(PAYLOADS[0], password="hunter2")

    result = user_validator.validate(payload)

    assert result.valid
    assert "password" not in result.value
    assert result.value["addresses"] == [{"street": "1 St James Sq", "zip": "12345"}]
    assert result.value["addresses"] is not payload["addresses"]


def test_either_reports_both_branches() -> None:
    validator = either(email(), phone(), labels=("email", "phone"))

    result = validator.validate("not-valid")

    assert not result.valid
    assert {e.branch for e in result.errors} == {("email",), ("phone",)}
    assert [e.code for e in result.errors] == [
        ErrorCode.INVALID_FORMAT,
        ErrorCode.INVALID_FORMAT,
    ]


@pytest.mark.parametrize("value", [None, 42, "text", [1, 2]])
def test_object_type_mismatch_short_path(user_validator, value) -> None:
    result = user_validator.validate(value)

    assert len(result.errors) == 1
    assert result.errors[0].field == ""
    assert result.errors[0].code is ErrorCode.INVALID_TYPE

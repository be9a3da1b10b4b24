import logging

import pytest

from composable_validation import (
    ErrorCode,
    ValidationFailedError,
    either,
    error_response,
    integer,
    object_,
    ok,
    string,
    validate_or_raise,
)


@pytest.fixture
def signup():
    return object_({"name": string(), "age": integer(minimum=18)})


def test_validate_or_raise_returns_validated_value(signup) -> None:
    payload = {"name": "Ada", "age": 36, "is_admin": True}

    value = validate_or_raise(signup, payload)

    assert value == {"name": "Ada", "age": 36}


def test_validate_or_raise_raises_with_all_errors(signup, caplog) -> None:
    with caplog.at_level(logging.INFO, logger="composable_validation.boundary"):
        with pytest.raises(ValidationFailedError) as exc:
            validate_or_raise(signup, {"age": 12})

    assert [(e.field, e.code) for e in exc.value.errors] == [
        ("name", ErrorCode.REQUIRED),
        ("age", ErrorCode.TOO_SMALL),
    ]
    assert "2 error(s)" in caplog.text


def test_error_response_shape(signup) -> None:
    result = signup.validate({"name": 1})

    assert error_response(result) == {
        "errors": [
            {"field": "name", "message": "must be a string", "code": "INVALID_TYPE"},
            {"field": "age", "message": "is required", "code": "REQUIRED"},
        ]
    }


def test_error_response_matches_exception_body(signup) -> None:
    result = signup.validate({})

    with pytest.raises(ValidationFailedError) as exc:
        validate_or_raise(signup, {})

    assert exc.value.to_dict() == error_response(result)


def test_error_response_includes_branch_for_tagged_errors() -> None:
    result = either(integer(), string(), labels=("int", "str")).validate(None)

    body = error_response(result)

    assert [entry["branch"] for entry in body["errors"]] == ["int", "str"]


def test_error_response_for_valid_result_is_empty() -> None:
    assert error_response(ok(1)) == {"errors": []}

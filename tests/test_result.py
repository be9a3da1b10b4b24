import pytest

from composable_validation import (
    MISSING,
    ErrorCode,
    InvalidResultError,
    ValidationError,
    ValidationFailedError,
    ValidationResult,
    fail,
    ok,
    reject,
)


def test_ok_builds_valid_result() -> None:
    result = ok(5)

    assert result.valid
    assert result.value == 5
    assert result.errors == ()
    assert result


def test_fail_builds_invalid_result() -> None:
    error = ValidationError("name", "is required", ErrorCode.REQUIRED)
    result = fail([error])

    assert not result.valid
    assert result.value is None
    assert result.errors == (error,)
    assert not result


def test_fail_accepts_single_error() -> None:
    error = ValidationError("", "must be a string", ErrorCode.INVALID_TYPE)
    assert fail(error).errors == (error,)


def test_fail_with_no_errors_is_rejected() -> None:
    with pytest.raises(InvalidResultError):
        fail([])


def test_result_invariants_enforced_on_construction() -> None:
    error = ValidationError("", "bad", ErrorCode.INVALID_VALUE)

    with pytest.raises(InvalidResultError):
        ValidationResult(valid=True, value=1, errors=(error,))

    with pytest.raises(InvalidResultError):
        ValidationResult(valid=False, value=1, errors=(error,))


def test_results_are_immutable() -> None:
    result = ok(1)
    with pytest.raises(AttributeError):
        result.value = 2  # type: ignore[misc]


def test_results_compare_structurally() -> None:
    assert ok({"a": 1}) == ok({"a": 1})
    assert reject(ErrorCode.REQUIRED, "is required") == reject(
        ErrorCode.REQUIRED, "is required"
    )
    assert ok(1) != ok(2)


def test_error_code_accepts_string_values() -> None:
    error = ValidationError("a", "bad", "INVALID_FORMAT")  # type: ignore[arg-type]
    assert error.code is ErrorCode.INVALID_FORMAT


def test_unknown_error_code_is_rejected() -> None:
    with pytest.raises(ValueError):
        ValidationError("a", "bad", "NOT_A_CODE")  # type: ignore[arg-type]


def test_prefixed_and_tagged() -> None:
    result = reject(ErrorCode.INVALID_TYPE, "must be a string", field="zip")

    prefixed = result.prefixed("[0]").prefixed("address")
    assert prefixed.errors[0].field == "address[0].zip"

    tagged = result.tagged("inner").tagged("outer")
    assert tagged.errors[0].branch == ("outer", "inner")

    # Valid results pass through untouched
    valid = ok(1)
    assert valid.prefixed("x") is valid
    assert valid.tagged("x") is valid


def test_error_to_dict() -> None:
    error = ValidationError("user.name", "is required", ErrorCode.REQUIRED)
    assert error.to_dict() == {
        "field": "user.name",
        "message": "is required",
        "code": "REQUIRED",
    }

    tagged = error.tagged("b").tagged("a")
    assert tagged.to_dict()["branch"] == "a/b"


def test_result_to_dict() -> None:
    assert ok(1).to_dict() == {"valid": True, "errors": []}
    result = reject(ErrorCode.REQUIRED, "is required", field="name")
    assert result.to_dict() == {
        "valid": False,
        "errors": [{"field": "name", "message": "is required", "code": "REQUIRED"}],
    }


def test_unwrap() -> None:
    assert ok("x").unwrap() == "x"

    with pytest.raises(ValidationFailedError) as exc:
        reject(ErrorCode.REQUIRED, "is required", field="name").unwrap()
    assert exc.value.errors[0].field == "name"


def test_missing_sentinel() -> None:
    assert repr(MISSING) == "MISSING"
    assert not MISSING
    assert type(MISSING)() is MISSING

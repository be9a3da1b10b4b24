"""ValidationResult — immutable, structured validation outcomes."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Any, Generic, TypeVar

from .codes import ErrorCode
from .exceptions import InvalidResultError, ValidationFailedError
from .paths import ROOT, join_path, prefix_errors

T = TypeVar("T")


class _Missing:
    """Type of the ``MISSING`` sentinel."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()
"""Passed to a field validator when the record has no such key."""


@dataclass(frozen=True)
class ValidationError:
    """A single field-level failure.

    ``branch`` is empty unless the error came out of ``either``/``any_of``,
    in which case it lists the branch labels, outermost first.
    """

    field: str
    message: str
    code: ErrorCode
    branch: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Unknown codes raise ValueError: the vocabulary is closed.
        object.__setattr__(self, "code", ErrorCode(self.code))
        object.__setattr__(self, "branch", tuple(self.branch))

    def prefixed(self, segment: str) -> ValidationError:
        return replace(self, field=join_path(segment, self.field))

    def tagged(self, label: str) -> ValidationError:
        return replace(self, branch=(label, *self.branch))

    def to_dict(self) -> dict[str, str]:
        data = {
            "field": self.field,
            "message": self.message,
            "code": self.code.value,
        }
        if self.branch:
            data["branch"] = "/".join(self.branch)
        return data


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Outcome of one ``validate`` call.

    ``valid`` results carry a value and no errors; failing results carry
    at least one error and no value. Both are enforced on construction.

    Usage::

        result = ValidationResult.success(42)
        result = ValidationResult.failure(
            ValidationError("name", "is required", ErrorCode.REQUIRED)
        )
    """

    valid: bool
    value: T | None = None
    errors: tuple[ValidationError, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "errors", tuple(self.errors))
        if self.valid and self.errors:
            raise InvalidResultError("A valid result cannot carry errors")
        if not self.valid and not self.errors:
            raise InvalidResultError("A failing result needs at least one error")
        if not self.valid and self.value is not None:
            raise InvalidResultError("A failing result cannot carry a value")

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def success(cls, value: T) -> ValidationResult[T]:
        return cls(valid=True, value=value)

    @classmethod
    def failure(
        cls, errors: ValidationError | Iterable[ValidationError]
    ) -> ValidationResult[T]:
        if isinstance(errors, ValidationError):
            errors = (errors,)
        return cls(valid=False, errors=tuple(errors))

    # ── Path and branch handling ─────────────────────────────────

    def prefixed(self, segment: str) -> ValidationResult[T]:
        """Return a copy whose error paths are prefixed with *segment*."""
        if self.valid:
            return self
        return replace(self, errors=prefix_errors(self.errors, segment))

    def tagged(self, label: str) -> ValidationResult[T]:
        """Return a copy whose errors carry *label* as their outer branch."""
        if self.valid:
            return self
        return replace(self, errors=tuple(e.tagged(label) for e in self.errors))

    # ── Consumption ──────────────────────────────────────────────

    def unwrap(self) -> T:
        """Return the validated value or raise ``ValidationFailedError``."""
        if not self.valid:
            raise ValidationFailedError(self.errors)
        return self.value  # type: ignore[return-value]

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": [error.to_dict() for error in self.errors],
        }

    def __bool__(self) -> bool:
        return self.valid


def ok(value: T) -> ValidationResult[T]:
    """Build a successful result."""
    return ValidationResult.success(value)


def fail(errors: ValidationError | Iterable[ValidationError]) -> ValidationResult[Any]:
    """Build a failing result. An empty error collection is rejected."""
    return ValidationResult.failure(errors)


def reject(
    code: ErrorCode, message: str, field: str = ROOT
) -> ValidationResult[Any]:
    """Build a failing result holding a single error."""
    return fail(ValidationError(field, message, code))

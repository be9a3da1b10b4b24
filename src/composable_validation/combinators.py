"""
Combinators: build validators for structured data from smaller validators.

Every combinator is a plain function returning a small validator object
whose configuration is fixed at construction. Within one invocation they
aggregate: all children run and all errors are collected, in
declaration/index order, before returning. Child error paths are prefixed
with the field name or ``[index]`` that led to them.

A ``MISSING`` value (an absent optional field) never reaches downstream
code: records drop it, and ``map_``/``and_then`` pass it through untouched.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeVar

from .base import BaseValidator
from .codes import ErrorCode
from .paths import ROOT, field_segment, index_segment, prefix_errors
from .result import MISSING, ValidationError, ValidationResult, fail, ok, reject

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from .ports import Validator

T = TypeVar("T")
U = TypeVar("U")

_NON_SEQUENCE_TYPES = (str, bytes, bytearray)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, _NON_SEQUENCE_TYPES)


class ObjectValidator(BaseValidator[dict[str, Any]]):
    """Validates a record field by field.

    Absent keys are passed to their validator as ``MISSING``. The output is
    a fresh ``dict`` holding declared fields only; fields whose validated
    value is ``MISSING`` are left out.
    """

    def __init__(
        self, shape: Mapping[str, Validator[Any]], *, strict: bool = False
    ) -> None:
        self.shape: Mapping[str, Validator[Any]] = MappingProxyType(dict(shape))
        self.strict = strict

    def validate(self, value: Any) -> ValidationResult[dict[str, Any]]:
        if not isinstance(value, Mapping):
            return reject(ErrorCode.INVALID_TYPE, "must be an object")

        errors: list[ValidationError] = []
        output: dict[str, Any] = {}
        for name, validator in self.shape.items():
            result = validator.validate(value.get(name, MISSING))
            if result.valid:
                if result.value is not MISSING:
                    output[name] = result.value
            else:
                errors.extend(prefix_errors(result.errors, field_segment(name)))

        if self.strict:
            errors.extend(
                ValidationError(
                    field_segment(key), "is not an allowed field", ErrorCode.UNKNOWN_FIELD
                )
                for key in value
                if key not in self.shape
            )

        if errors:
            return fail(errors)
        return ok(output)

    def __repr__(self) -> str:
        return f"ObjectValidator(fields={list(self.shape)!r}, strict={self.strict})"


class ArrayValidator(BaseValidator[list[Any]]):
    """Validates every element of a sequence; returns a new ``list``."""

    def __init__(
        self,
        element: Validator[Any],
        *,
        min_items: int | None = None,
        max_items: int | None = None,
    ) -> None:
        if min_items is not None and max_items is not None and min_items > max_items:
            raise ValueError(
                f"min_items {min_items} is greater than max_items {max_items}"
            )
        self.element = element
        self.min_items = min_items
        self.max_items = max_items

    def validate(self, value: Any) -> ValidationResult[list[Any]]:
        if not _is_sequence(value):
            return reject(ErrorCode.INVALID_TYPE, "must be an array")

        errors: list[ValidationError] = []
        if self.min_items is not None and len(value) < self.min_items:
            errors.append(
                ValidationError(
                    ROOT, f"must contain at least {self.min_items} items", ErrorCode.TOO_SHORT
                )
            )
        if self.max_items is not None and len(value) > self.max_items:
            errors.append(
                ValidationError(
                    ROOT, f"must contain at most {self.max_items} items", ErrorCode.TOO_LONG
                )
            )

        output: list[Any] = []
        for index, item in enumerate(value):
            result = self.element.validate(item)
            if result.valid:
                output.append(result.value)
            else:
                errors.extend(prefix_errors(result.errors, index_segment(index)))

        if errors:
            return fail(errors)
        return ok(output)


class MappingValidator(BaseValidator[dict[str, Any]]):
    """Validates every value of a record with arbitrary string keys."""

    def __init__(self, values: Validator[Any]) -> None:
        self.values = values

    def validate(self, value: Any) -> ValidationResult[dict[str, Any]]:
        if not isinstance(value, Mapping):
            return reject(ErrorCode.INVALID_TYPE, "must be an object")

        errors: list[ValidationError] = []
        output: dict[str, Any] = {}
        for key, item in value.items():
            segment = field_segment(key)
            if not isinstance(key, str):
                errors.append(
                    ValidationError(segment, "key must be a string", ErrorCode.INVALID_TYPE)
                )
                continue
            result = self.values.validate(item)
            if result.valid:
                if result.value is not MISSING:
                    output[key] = result.value
            else:
                errors.extend(prefix_errors(result.errors, segment))

        if errors:
            return fail(errors)
        return ok(output)


class OptionalValidator(BaseValidator[Any]):
    """Accepts an absent value (``MISSING``) or ``None``.

    ``MISSING`` yields *default*, which is ``MISSING`` itself unless given, so
    enclosing records leave the field out. ``None`` yields *default* when one
    was given and ``None`` otherwise.
    """

    def __init__(self, inner: Validator[Any], default: Any = MISSING) -> None:
        self.inner = inner
        self.default = default

    def validate(self, value: Any) -> ValidationResult[Any]:
        if value is MISSING:
            return ok(self.default)
        if value is None:
            return ok(None if self.default is MISSING else self.default)
        return self.inner.validate(value)


class NullableValidator(BaseValidator[Any]):
    """Accepts an explicit ``None``; ``MISSING`` still goes to *inner*."""

    def __init__(self, inner: Validator[Any]) -> None:
        self.inner = inner

    def validate(self, value: Any) -> ValidationResult[Any]:
        if value is None:
            return ok(None)
        return self.inner.validate(value)


class AnyOfValidator(BaseValidator[Any]):
    """Tries each branch in order; the first success wins.

    When every branch fails, all of their errors are returned in branch
    order, each tagged with the label of the branch that produced it.
    """

    def __init__(
        self,
        validators: Sequence[Validator[Any]],
        labels: Sequence[str] | None = None,
    ) -> None:
        if not validators:
            raise ValueError("any_of() needs at least one validator")
        if labels is None:
            labels = [str(i) for i in range(len(validators))]
        if len(labels) != len(validators):
            raise ValueError(
                f"Got {len(labels)} labels for {len(validators)} validators"
            )
        if len(set(labels)) != len(labels):
            raise ValueError(f"Branch labels must be unique: {list(labels)!r}")
        self.validators = tuple(validators)
        self.labels = tuple(labels)

    def validate(self, value: Any) -> ValidationResult[Any]:
        errors: list[ValidationError] = []
        for label, validator in zip(self.labels, self.validators):
            result = validator.validate(value)
            if result.valid:
                return result
            errors.extend(result.tagged(label).errors)
        return fail(errors)


class AllOfValidator(BaseValidator[Any]):
    """Runs every validator against the same input and merges their errors.

    Every validator sees the original input and every failure is reported,
    in validator order. On success the last validator's value is returned.
    """

    def __init__(self, validators: Sequence[Validator[Any]]) -> None:
        if not validators:
            raise ValueError("all_of() needs at least one validator")
        self.validators = tuple(validators)

    def validate(self, value: Any) -> ValidationResult[Any]:
        errors: list[ValidationError] = []
        last: ValidationResult[Any] | None = None
        for validator in self.validators:
            last = validator.validate(value)
            errors.extend(last.errors)
        if errors:
            return fail(errors)
        return last  # type: ignore[return-value]


class MapValidator(BaseValidator[Any]):
    """Applies *transform* to the validated value. ``MISSING`` is not transformed."""

    def __init__(self, inner: Validator[Any], transform: Callable[[Any], Any]) -> None:
        self.inner = inner
        self.transform = transform

    def validate(self, value: Any) -> ValidationResult[Any]:
        result = self.inner.validate(value)
        if not result.valid or result.value is MISSING:
            return result
        return ok(self.transform(result.value))


class AndThenValidator(BaseValidator[Any]):
    """Feeds the validated value to *fn*, which returns a ``ValidationResult``."""

    def __init__(
        self,
        inner: Validator[Any],
        fn: Callable[[Any], ValidationResult[Any]],
    ) -> None:
        self.inner = inner
        self.fn = fn

    def validate(self, value: Any) -> ValidationResult[Any]:
        result = self.inner.validate(value)
        if not result.valid or result.value is MISSING:
            return result
        chained = self.fn(result.value)
        if not isinstance(chained, ValidationResult):
            raise TypeError(
                f"and_then() function must return a ValidationResult, "
                f"got {type(chained).__name__}"
            )
        return chained


# ── Factories ────────────────────────────────────────────────────


def object_(
    shape: Mapping[str, Validator[Any]], *, strict: bool = False
) -> ObjectValidator:
    """Validator for a record with a fixed set of fields.

    Non-mapping input yields exactly one ``INVALID_TYPE`` error at the root.
    With ``strict=True`` undeclared keys are reported as ``UNKNOWN_FIELD``.
    """
    return ObjectValidator(shape, strict=strict)


def array(
    element: Validator[Any],
    *,
    min_items: int | None = None,
    max_items: int | None = None,
) -> ArrayValidator:
    """Validator for a sequence. ``str`` and ``bytes`` are not sequences here."""
    return ArrayValidator(element, min_items=min_items, max_items=max_items)


def mapping_of(values: Validator[Any]) -> MappingValidator:
    return MappingValidator(values)


def optional(inner: Validator[T], default: Any = MISSING) -> OptionalValidator:
    return OptionalValidator(inner, default=default)


def nullable(inner: Validator[T]) -> NullableValidator:
    return NullableValidator(inner)


def either(
    a: Validator[Any],
    b: Validator[Any],
    *,
    labels: tuple[str, str] | None = None,
) -> AnyOfValidator:
    """Validator accepting whatever *a* or *b* accepts.

    When both fail, both branches' full error lists are kept, tagged with
    *labels* (``"0"`` and ``"1"`` by default).
    """
    return AnyOfValidator((a, b), labels)


def any_of(
    *validators: Validator[Any], labels: Iterable[str] | None = None
) -> AnyOfValidator:
    return AnyOfValidator(validators, None if labels is None else tuple(labels))


def all_of(*validators: Validator[Any]) -> AllOfValidator:
    return AllOfValidator(validators)


def map_(inner: Validator[T], transform: Callable[[T], U]) -> MapValidator:
    """Apply a total *transform* to the validated value.

    *transform* must not fail; use :func:`and_then` when it can.
    """
    return MapValidator(inner, transform)


def and_then(
    inner: Validator[T], fn: Callable[[T], ValidationResult[U]]
) -> AndThenValidator:
    """Chain a validation step that itself may fail."""
    return AndThenValidator(inner, fn)


chain = and_then

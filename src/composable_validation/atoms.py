"""
Atomic validators: leaves that check a single primitive value.

Every leaf decides "required" semantics itself: ``MISSING`` and ``None``
are rejected with ``REQUIRED`` (``literal`` first accepts any value it
lists, ``None`` included). Wrap a leaf in ``optional``/``nullable``
to accept them.

Each leaf is an isolated class configured once at construction; the
factory functions below are the public spelling.
"""

from __future__ import annotations

import math
import re
from abc import abstractmethod
from typing import TYPE_CHECKING, Any
from urllib.parse import urlsplit

from .base import BaseValidator
from .codes import ErrorCode
from .paths import ROOT
from .result import MISSING, ValidationError, ValidationResult, fail, ok, reject

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

_EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s.]+")
_PHONE_PATTERN = re.compile(r"\+?[0-9 ().\-]+")
_PHONE_MIN_DIGITS = 7
_PHONE_MAX_DIGITS = 15


def _missing(value: Any) -> ValidationResult[Any] | None:
    if value is MISSING or value is None:
        return reject(ErrorCode.REQUIRED, "is required")
    return None


def _check_bounds(low: float | None, high: float | None, what: str) -> None:
    if low is not None and high is not None and low > high:
        raise ValueError(f"{what}: minimum {low!r} is greater than maximum {high!r}")


class StringValidator(BaseValidator[str]):
    """Accepts ``str`` values with optional length and pattern constraints."""

    def __init__(
        self,
        *,
        min_length: int | None = None,
        max_length: int | None = None,
        pattern: str | re.Pattern[str] | None = None,
        strip: bool = False,
    ) -> None:
        _check_bounds(min_length, max_length, "string length")
        self.min_length = min_length
        self.max_length = max_length
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern
        self.strip = strip

    def validate(self, value: Any) -> ValidationResult[str]:
        missing = _missing(value)
        if missing is not None:
            return missing
        if not isinstance(value, str):
            return reject(ErrorCode.INVALID_TYPE, "must be a string")

        text = value.strip() if self.strip else value
        errors: list[ValidationError] = []
        if self.min_length is not None and len(text) < self.min_length:
            errors.append(
                ValidationError(
                    ROOT,
                    f"must be at least {self.min_length} characters long",
                    ErrorCode.TOO_SHORT,
                )
            )
        if self.max_length is not None and len(text) > self.max_length:
            errors.append(
                ValidationError(
                    ROOT,
                    f"must be at most {self.max_length} characters long",
                    ErrorCode.TOO_LONG,
                )
            )
        if self.pattern is not None and self.pattern.fullmatch(text) is None:
            errors.append(
                ValidationError(
                    ROOT,
                    f"must match pattern {self.pattern.pattern!r}",
                    ErrorCode.INVALID_FORMAT,
                )
            )
        if errors:
            return fail(errors)
        return ok(text)


class _RangeValidator(BaseValidator[Any]):
    kind = "number"
    type_message = "must be a number"

    def __init__(
        self, *, minimum: float | None = None, maximum: float | None = None
    ) -> None:
        _check_bounds(minimum, maximum, self.kind)
        self.minimum = minimum
        self.maximum = maximum

    @abstractmethod
    def _accepts(self, value: Any) -> bool: ...

    def validate(self, value: Any) -> ValidationResult[Any]:
        missing = _missing(value)
        if missing is not None:
            return missing
        if not self._accepts(value):
            return reject(ErrorCode.INVALID_TYPE, self.type_message)
        if self.minimum is not None and value < self.minimum:
            return reject(
                ErrorCode.TOO_SMALL, f"must be greater than or equal to {self.minimum}"
            )
        if self.maximum is not None and value > self.maximum:
            return reject(
                ErrorCode.TOO_LARGE, f"must be less than or equal to {self.maximum}"
            )
        return ok(value)


class IntegerValidator(_RangeValidator):
    """Accepts ``int`` values; ``bool`` and integral floats are rejected."""

    kind = "integer"
    type_message = "must be an integer"

    def _accepts(self, value: Any) -> bool:
        return isinstance(value, int) and not isinstance(value, bool)


class NumberValidator(_RangeValidator):
    """Accepts finite ``int`` or ``float`` values, never ``bool``."""

    kind = "number"

    def _accepts(self, value: Any) -> bool:
        if isinstance(value, bool) or not isinstance(value, int | float):
            return False
        return math.isfinite(value)


class BooleanValidator(BaseValidator[bool]):
    def validate(self, value: Any) -> ValidationResult[bool]:
        missing = _missing(value)
        if missing is not None:
            return missing
        if not isinstance(value, bool):
            return reject(ErrorCode.INVALID_TYPE, "must be a boolean")
        return ok(value)


class LiteralValidator(BaseValidator[Any]):
    """Accepts exactly one of a fixed set of values.

    Matching is type-strict so that ``True`` never passes for ``1``. Allowed
    values are checked before "required" semantics, so ``literal(None, "x")``
    accepts ``None``.
    """

    def __init__(self, allowed: Iterable[Any]) -> None:
        self.allowed = tuple(allowed)
        if not self.allowed:
            raise ValueError("literal() needs at least one allowed value")

    def validate(self, value: Any) -> ValidationResult[Any]:
        for candidate in self.allowed:
            if type(candidate) is type(value) and candidate == value:
                return ok(candidate)
        missing = _missing(value)
        if missing is not None:
            return missing
        choices = ", ".join(repr(a) for a in self.allowed)
        return reject(ErrorCode.NOT_ALLOWED, f"must be one of: {choices}")


class FormatValidator(BaseValidator[str]):
    """A string leaf whose content is checked by *check*.

    A ``False`` check yields ``INVALID_FORMAT`` with *message*.
    """

    def __init__(self, name: str, check: Callable[[str], bool], message: str) -> None:
        self.name = name
        self.check = check
        self.message = message

    def validate(self, value: Any) -> ValidationResult[str]:
        missing = _missing(value)
        if missing is not None:
            return missing
        if not isinstance(value, str):
            return reject(ErrorCode.INVALID_TYPE, "must be a string")
        if not self.check(value):
            return reject(ErrorCode.INVALID_FORMAT, self.message)
        return ok(value)

    def __repr__(self) -> str:
        return f"FormatValidator({self.name!r})"


class PredicateValidator(BaseValidator[Any]):
    """Generic leaf for custom rules.

    Exceptions raised by *check* are not caught.
    """

    def __init__(
        self,
        check: Callable[[Any], bool],
        message: str,
        code: ErrorCode = ErrorCode.INVALID_VALUE,
    ) -> None:
        self.check = check
        self.message = message
        self.code = ErrorCode(code)

    def validate(self, value: Any) -> ValidationResult[Any]:
        missing = _missing(value)
        if missing is not None:
            return missing
        if not self.check(value):
            return reject(self.code, self.message)
        return ok(value)


# ── Format checks ────────────────────────────────────────────────


def _is_email(text: str) -> bool:
    return _EMAIL_PATTERN.fullmatch(text) is not None


def _is_phone(text: str) -> bool:
    if _PHONE_PATTERN.fullmatch(text) is None:
        return False
    digits = sum(ch.isdigit() for ch in text)
    return _PHONE_MIN_DIGITS <= digits <= _PHONE_MAX_DIGITS


def _url_check(schemes: tuple[str, ...]) -> Callable[[str], bool]:
    def check(text: str) -> bool:
        try:
            parts = urlsplit(text)
        except ValueError:
            # urlsplit rejects malformed netlocs such as unbalanced brackets
            return False
        return parts.scheme.lower() in schemes and bool(parts.netloc)

    return check


# ── Factories ────────────────────────────────────────────────────


def string(
    *,
    min_length: int | None = None,
    max_length: int | None = None,
    pattern: str | re.Pattern[str] | None = None,
    strip: bool = False,
) -> StringValidator:
    return StringValidator(
        min_length=min_length, max_length=max_length, pattern=pattern, strip=strip
    )


def integer(*, minimum: int | None = None, maximum: int | None = None) -> IntegerValidator:
    return IntegerValidator(minimum=minimum, maximum=maximum)


def number(
    *, minimum: float | None = None, maximum: float | None = None
) -> NumberValidator:
    return NumberValidator(minimum=minimum, maximum=maximum)


def boolean() -> BooleanValidator:
    return BooleanValidator()


def literal(*allowed: Any) -> LiteralValidator:
    return LiteralValidator(allowed)


def email() -> FormatValidator:
    return FormatValidator("email", _is_email, "must be a valid email address")


def phone() -> FormatValidator:
    return FormatValidator("phone", _is_phone, "must be a valid phone number")


def url(schemes: Iterable[str] = ("http", "https")) -> FormatValidator:
    normalised = tuple(s.lower() for s in schemes)
    return FormatValidator("url", _url_check(normalised), "must be a valid URL")


def predicate(
    check: Callable[[Any], bool],
    message: str,
    code: ErrorCode = ErrorCode.INVALID_VALUE,
) -> PredicateValidator:
    return PredicateValidator(check, message, code)

"""Exception hierarchy for composable-validation.

Invalid *data* is never raised: it is reported through a failing
``ValidationResult``. The exceptions below signal programming defects
(a malformed result, a broken registry lookup) or are raised on purpose
at an application boundary via ``validate_or_raise``.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .result import ValidationError


class ValidationEngineError(Exception):
    """Root exception for the entire validation engine."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class InvalidResultError(ValidationEngineError):
    """Raised when a ``ValidationResult`` would break its own invariants.

    Usage: building a failing result with zero errors, or a valid result
    that carries errors, is a bug in the validator that tried it.
    """


class ValidationFailedError(ValidationEngineError):
    """Raised at an application boundary when a payload is rejected.

    Carries the ordered errors of the failing result unchanged.
    """

    def __init__(self, errors: Iterable[ValidationError]) -> None:
        self.errors: tuple[ValidationError, ...] = tuple(errors)
        summary = "; ".join(
            f"{error.field or '<root>'}: {error.message}" for error in self.errors
        )
        super().__init__(
            f"Validation failed with {len(self.errors)} error(s): {summary}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {"errors": [error.to_dict() for error in self.errors]}


class ValidatorRegistrationError(ValidationEngineError):
    """Raised when a validator name is already taken in a registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"A validator named '{name}' is already registered. "
            "Pass replace=True to overwrite it."
        )


class ValidatorNotFoundError(ValidationEngineError):
    """
    Unknown validator name requested from a registry.

    Provides fuzzy-matched suggestions for likely intended names.
    """

    def __init__(self, name: str, available: Iterable[str]) -> None:
        self.name = name
        self.available = sorted(available)
        self.suggestions = get_close_matches(name, self.available, n=3, cutoff=0.6)

        message = f"Unknown validator: '{name}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        if self.available:
            message += f" Registered validators: {', '.join(self.available[:10])}"
            if len(self.available) > 10:
                message += ", ..."
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATOR_NOT_FOUND",
            "name": self.name,
            "suggestions": self.suggestions,
            "available": self.available,
        }

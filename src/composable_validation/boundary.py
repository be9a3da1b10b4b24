"""Helpers for the edge of an application (HTTP handlers, message consumers).

The error objects are the contract: they are rendered as-is, never
reshaped.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from .exceptions import ValidationFailedError

if TYPE_CHECKING:
    from .ports import Validator
    from .result import ValidationResult

logger = logging.getLogger("composable_validation.boundary")

T = TypeVar("T")


def error_response(result: ValidationResult[Any]) -> dict[str, list[dict[str, str]]]:
    """Render *result* as ``{"errors": [{"field", "message", "code"}, ...]}``."""
    return {"errors": [error.to_dict() for error in result.errors]}


def validate_or_raise(validator: Validator[T], payload: Any) -> T:
    """
    Validate *payload* and return the validated value.

    Downstream code should only ever see this value, never *payload*.

    Raises:
        ValidationFailedError: with every error of the failing result.
    """
    result = validator.validate(payload)
    if result.valid:
        return result.value  # type: ignore[return-value]
    logger.info(
        "Rejected payload for %s with %d error(s)",
        type(validator).__name__,
        len(result.errors),
    )
    raise ValidationFailedError(result.errors)

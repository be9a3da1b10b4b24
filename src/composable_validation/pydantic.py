"""PydanticModelValidator: pydantic models as validators with path-aware errors."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .base import BaseValidator
from .codes import ErrorCode
from .paths import path_from_parts
from .result import MISSING, ValidationError, ValidationResult, fail, ok, reject

if TYPE_CHECKING:
    from pydantic_core import ErrorDetails

M = TypeVar("M", bound=BaseModel)

_PYDANTIC_CODES: dict[str, ErrorCode] = {
    "missing": ErrorCode.REQUIRED,
    "string_too_short": ErrorCode.TOO_SHORT,
    "too_short": ErrorCode.TOO_SHORT,
    "string_too_long": ErrorCode.TOO_LONG,
    "too_long": ErrorCode.TOO_LONG,
    "greater_than": ErrorCode.TOO_SMALL,
    "greater_than_equal": ErrorCode.TOO_SMALL,
    "less_than": ErrorCode.TOO_LARGE,
    "less_than_equal": ErrorCode.TOO_LARGE,
    "string_pattern_mismatch": ErrorCode.INVALID_FORMAT,
    "url_parsing": ErrorCode.INVALID_FORMAT,
    "url_scheme": ErrorCode.INVALID_FORMAT,
    "literal_error": ErrorCode.NOT_ALLOWED,
    "enum": ErrorCode.NOT_ALLOWED,
    "extra_forbidden": ErrorCode.UNKNOWN_FIELD,
}


def code_for_error_type(error_type: str) -> ErrorCode:
    """Map a pydantic error type onto the closed ``ErrorCode`` vocabulary."""
    if error_type in _PYDANTIC_CODES:
        return _PYDANTIC_CODES[error_type]
    if error_type.endswith(("_type", "_parsing")):
        return ErrorCode.INVALID_TYPE
    return ErrorCode.INVALID_VALUE


def _convert(error: ErrorDetails) -> ValidationError:
    return ValidationError(
        field=path_from_parts(error.get("loc", ())),
        message=error.get("msg", "validation error"),
        code=code_for_error_type(error.get("type", "")),
    )


class PydanticModelValidator(BaseValidator[M], Generic[M]):
    """Runs ``model.model_validate`` on the input.

    Each pydantic error entry becomes one ``ValidationError`` whose field is
    rendered from its ``loc`` and whose code comes from
    :func:`code_for_error_type`. On success the value is the model instance.
    """

    def __init__(self, model: type[M]) -> None:
        self.model = model

    def validate(self, value: Any) -> ValidationResult[M]:
        if value is MISSING or value is None:
            return reject(ErrorCode.REQUIRED, "is required")
        try:
            instance = self.model.model_validate(value)
        except PydanticValidationError as exc:
            return fail(_convert(error) for error in exc.errors())
        return ok(instance)

    def __repr__(self) -> str:
        return f"PydanticModelValidator({self.model.__name__})"


def from_model(model: type[M]) -> PydanticModelValidator[M]:
    return PydanticModelValidator(model)

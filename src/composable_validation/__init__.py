"""composable-validation — validators that compose into schemas for nested data.

Validators never raise for invalid data; they return a ``ValidationResult``
whose errors carry a structural field path and a stable ``ErrorCode``.
"""

from __future__ import annotations

# ── Leaves ───────────────────────────────────────────────────────
from .atoms import (
    BooleanValidator,
    FormatValidator,
    IntegerValidator,
    LiteralValidator,
    NumberValidator,
    PredicateValidator,
    StringValidator,
    boolean,
    email,
    integer,
    literal,
    number,
    phone,
    predicate,
    string,
    url,
)
from .base import BaseValidator
from .boundary import error_response, validate_or_raise
from .codes import ErrorCode

# ── Combinators ──────────────────────────────────────────────────
from .combinators import (
    AllOfValidator,
    AndThenValidator,
    AnyOfValidator,
    ArrayValidator,
    MappingValidator,
    MapValidator,
    NullableValidator,
    ObjectValidator,
    OptionalValidator,
    all_of,
    and_then,
    any_of,
    array,
    chain,
    either,
    map_,
    mapping_of,
    nullable,
    object_,
    optional,
)

# ── Exceptions ───────────────────────────────────────────────────
from .exceptions import (
    InvalidResultError,
    ValidationEngineError,
    ValidationFailedError,
    ValidatorNotFoundError,
    ValidatorRegistrationError,
)
from .limits import BoundedValidator, ValidationLimits, bounded, check_limits
from .paths import ROOT, field_segment, index_segment, join_path, path_from_parts
from .ports import Validator
from .pydantic import PydanticModelValidator, from_model
from .registry import ValidatorRegistry
from .result import MISSING, ValidationError, ValidationResult, fail, ok, reject

__all__ = [
    # Core types
    "Validator",
    "BaseValidator",
    "ValidationResult",
    "ValidationError",
    "ErrorCode",
    "MISSING",
    "ok",
    "fail",
    "reject",
    # Paths
    "ROOT",
    "field_segment",
    "index_segment",
    "join_path",
    "path_from_parts",
    # Leaves
    "BooleanValidator",
    "FormatValidator",
    "IntegerValidator",
    "LiteralValidator",
    "NumberValidator",
    "PredicateValidator",
    "StringValidator",
    "boolean",
    "email",
    "integer",
    "literal",
    "number",
    "phone",
    "predicate",
    "string",
    "url",
    # Combinators
    "AllOfValidator",
    "AndThenValidator",
    "AnyOfValidator",
    "ArrayValidator",
    "MappingValidator",
    "MapValidator",
    "NullableValidator",
    "ObjectValidator",
    "OptionalValidator",
    "all_of",
    "and_then",
    "any_of",
    "array",
    "chain",
    "either",
    "map_",
    "mapping_of",
    "nullable",
    "object_",
    "optional",
    # Limits
    "BoundedValidator",
    "ValidationLimits",
    "bounded",
    "check_limits",
    # Registry / boundary
    "ValidatorRegistry",
    "error_response",
    "validate_or_raise",
    # Pydantic
    "PydanticModelValidator",
    "from_model",
    # Exceptions
    "ValidationEngineError",
    "InvalidResultError",
    "ValidationFailedError",
    "ValidatorNotFoundError",
    "ValidatorRegistrationError",
]

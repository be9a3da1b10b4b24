"""ErrorCode — the closed vocabulary of validation failure kinds."""

from enum import Enum


class ErrorCode(str, Enum):
    """Machine-readable failure codes carried by every ``ValidationError``.

    Callers branch on these instead of matching ``message`` text.
    """

    # Shape
    INVALID_TYPE = "INVALID_TYPE"
    REQUIRED = "REQUIRED"
    UNKNOWN_FIELD = "UNKNOWN_FIELD"

    # Content
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_VALUE = "INVALID_VALUE"
    NOT_ALLOWED = "NOT_ALLOWED"

    # Bounds
    TOO_SHORT = "TOO_SHORT"
    TOO_LONG = "TOO_LONG"
    TOO_SMALL = "TOO_SMALL"
    TOO_LARGE = "TOO_LARGE"

    # Input limits
    DEPTH_EXCEEDED = "DEPTH_EXCEEDED"
    SIZE_EXCEEDED = "SIZE_EXCEEDED"

"""Input-size limits for validating untrusted payloads."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .base import BaseValidator
from .codes import ErrorCode
from .result import ValidationResult, reject

if TYPE_CHECKING:
    from .ports import Validator

logger = logging.getLogger("composable_validation.limits")

_SCALAR_SEQUENCES = (str, bytes, bytearray)


@dataclass(frozen=True)
class ValidationLimits:
    """
    Bounds applied to an input before it is validated.

    Attributes:
        max_depth: Maximum container nesting. ``[]`` and ``{}`` have depth 1,
            ``{"a": [1]}`` depth 2; scalars have depth 0.
        max_nodes: Maximum number of values in the input, containers and
            scalars alike, the root included.
    """

    max_depth: int = 32
    max_nodes: int = 10_000

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
        if self.max_nodes < 1:
            raise ValueError(f"max_nodes must be positive, got {self.max_nodes}")


def _children(value: Any) -> list[Any] | None:
    if isinstance(value, Mapping):
        return list(value.values())
    if isinstance(value, Sequence) and not isinstance(value, _SCALAR_SEQUENCES):
        return list(value)
    return None


def check_limits(value: Any, limits: ValidationLimits) -> ErrorCode | None:
    """
    Walk *value* iteratively and report the first limit it exceeds.

    Stops as soon as a limit is hit, so self-referencing containers end at
    ``max_nodes`` instead of looping.
    """
    stack: list[tuple[Any, int]] = [(value, 0)]
    nodes = 0
    while stack:
        node, depth = stack.pop()
        nodes += 1
        if nodes > limits.max_nodes:
            return ErrorCode.SIZE_EXCEEDED
        children = _children(node)
        if children is None:
            continue
        if depth + 1 > limits.max_depth:
            return ErrorCode.DEPTH_EXCEEDED
        stack.extend((child, depth + 1) for child in children)
    return None


class BoundedValidator(BaseValidator[Any]):
    """Runs *inner* only when the input stays within *limits*."""

    def __init__(self, inner: Validator[Any], limits: ValidationLimits) -> None:
        self.inner = inner
        self.limits = limits

    def validate(self, value: Any) -> ValidationResult[Any]:
        exceeded = check_limits(value, self.limits)
        if exceeded is ErrorCode.DEPTH_EXCEEDED:
            logger.debug("Input rejected: nesting deeper than %d", self.limits.max_depth)
            return reject(
                exceeded, f"must not be nested deeper than {self.limits.max_depth} levels"
            )
        if exceeded is ErrorCode.SIZE_EXCEEDED:
            logger.debug("Input rejected: more than %d values", self.limits.max_nodes)
            return reject(
                exceeded, f"must not contain more than {self.limits.max_nodes} values"
            )
        return self.inner.validate(value)


def bounded(
    inner: Validator[Any], limits: ValidationLimits | None = None
) -> BoundedValidator:
    """Guard *inner* against oversized or deeply nested input."""
    return BoundedValidator(inner, limits or ValidationLimits())

"""Validator — the single-method validation protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from .result import ValidationResult

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Validator(Protocol, Generic[T_co]):
    """
    Protocol for validators.

    Anything exposing ``validate`` qualifies; combinators accept and return
    this protocol. Implementations are stateless and reusable.
    """

    def validate(self, value: Any) -> ValidationResult[T_co]:
        """
        Check *value* and return a
        :class:`~composable_validation.result.ValidationResult`.

        Must never raise for invalid data: rejections are failing results.
        Must not mutate *value*.
        """
        ...

"""BaseValidator — optional base class with fluent combinator helpers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .result import MISSING

if TYPE_CHECKING:
    from collections.abc import Callable

    from .ports import Validator
    from .result import ValidationResult

T = TypeVar("T")
U = TypeVar("U")


class BaseValidator(ABC, Generic[T]):
    """Base class for validators with combinator operator support.

    Subclassing is not required to satisfy :class:`Validator`; it only adds
    the fluent forms of the combinators::

        contact = (email() | phone()).map(str.lower)
    """

    @abstractmethod
    def validate(self, value: Any) -> ValidationResult[T]: ...

    def __or__(self, other: Validator[U]) -> Validator[T | U]:
        from .combinators import either

        return either(self, other)

    def map(self, transform: Callable[[T], U]) -> Validator[U]:
        from .combinators import map_

        return map_(self, transform)

    def and_then(self, fn: Callable[[T], ValidationResult[U]]) -> Validator[U]:
        from .combinators import and_then

        return and_then(self, fn)

    def optional(self, default: Any = MISSING) -> Validator[T]:
        from .combinators import optional

        return optional(self, default=default)

    def nullable(self) -> Validator[T | None]:
        from .combinators import nullable

        return nullable(self)

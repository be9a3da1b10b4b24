"""ValidatorRegistry — named, long-lived validators for a pipeline."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .exceptions import ValidatorNotFoundError, ValidatorRegistrationError
from .ports import Validator

if TYPE_CHECKING:
    from collections.abc import Callable

    from .result import ValidationResult

logger = logging.getLogger("composable_validation.registry")


class ValidatorRegistry:
    """
    Registry of validators keyed by name.

    Registration happens while wiring the application; lookups and
    validation calls afterwards only read from it.

    Usage::

        registry = ValidatorRegistry()
        registry.register("user", object_({"name": string()}))

        result = registry.validate("user", payload)
    """

    def __init__(self) -> None:
        self._validators: dict[str, Validator[Any]] = {}

    # -- registration --------------------------------------------------------

    def register(
        self, name: str, validator: Validator[Any], *, replace: bool = False
    ) -> None:
        """Register *validator* under *name*."""
        if not isinstance(validator, Validator):
            raise TypeError(
                f"{type(validator).__name__} does not implement validate()"
            )
        if name in self._validators and not replace:
            raise ValidatorRegistrationError(name)
        if name in self._validators:
            logger.info("Replacing validator %r", name)
        self._validators[name] = validator
        logger.debug("Registered validator %r (%s)", name, type(validator).__name__)

    def add(
        self, name: str, *, replace: bool = False
    ) -> Callable[[Callable[[], Validator[Any]]], Callable[[], Validator[Any]]]:
        """Decorator registering the validator built by a factory function.

        Usage::

            @registry.add("address")
            def address() -> Validator[dict[str, Any]]:
                return object_({"zip": string(pattern=r"\\d{5}")})
        """

        def decorator(
            factory: Callable[[], Validator[Any]],
        ) -> Callable[[], Validator[Any]]:
            self.register(name, factory(), replace=replace)
            return factory

        return decorator

    def unregister(self, name: str) -> None:
        """Remove a validator from the registry."""
        self._validators.pop(name, None)

    # -- look-up -------------------------------------------------------------

    def get(self, name: str) -> Validator[Any]:
        try:
            return self._validators[name]
        except KeyError:
            raise ValidatorNotFoundError(name, self._validators) from None

    def has(self, name: str) -> bool:
        return name in self._validators

    def names(self) -> list[str]:
        return sorted(self._validators)

    def __contains__(self, name: object) -> bool:
        return name in self._validators

    def __len__(self) -> int:
        return len(self._validators)

    # -- validation ----------------------------------------------------------

    def validate(self, name: str, value: Any) -> ValidationResult[Any]:
        """Validate *value* with the validator registered as *name*."""
        return self.get(name).validate(value)

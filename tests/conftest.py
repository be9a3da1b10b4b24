"""Shared fixtures for composable-validation tests."""

from __future__ import annotations

import pytest

from composable_validation import (
    array,
    email,
    integer,
    object_,
    optional,
    string,
)


@pytest.fixture
def address_validator():
    return object_(
        {
            "street": string(min_length=1),
            "zip": string(pattern=r"\d{5}"),
        }
    )


@pytest.fixture
def user_validator(address_validator):
    """A nested schema exercising objects, arrays and optional fields."""
    return object_(
        {
            "name": string(min_length=2, max_length=50),
            "email": email(),
            "age": optional(integer(minimum=0, maximum=150)),
            "tags": array(string()),
            "addresses": array(address_validator),
        }
    )

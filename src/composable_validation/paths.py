"""
Field-path rendering for nested validation errors.

Paths locate a value inside the original input:

- object fields join with ``.``   (``user.address``)
- sequence indices render as ``[i]`` with no dot before the bracket
  (``user.address[0].zip``)
- the root path is the empty string

Combinators build paths from the inside out: a child reports an error at
``zip``, the array around it prefixes ``[0]`` and the object around that
prefixes ``address``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .result import ValidationError

ROOT = ""


def field_segment(name: object) -> str:
    """Render a record key as a path segment. Keys are used verbatim."""
    return str(name)


def index_segment(index: int) -> str:
    """Render a sequence index as a path segment."""
    return f"[{index}]"


def join_path(segment: str, path: str) -> str:
    """Prefix *path* with *segment*."""
    if not segment:
        return path
    if not path:
        return segment
    if path.startswith("["):
        return f"{segment}{path}"
    return f"{segment}.{path}"


def path_from_parts(parts: Iterable[str | int]) -> str:
    """
    Build a path from location parts, outermost first.

    Integers become index segments, everything else a field segment::

        path_from_parts(("user", "tags", 1))  # "user.tags[1]"
    """
    path = ROOT
    for part in reversed(tuple(parts)):
        if isinstance(part, int) and not isinstance(part, bool):
            segment = index_segment(part)
        else:
            segment = field_segment(part)
        path = join_path(segment, path)
    return path


def prefix_errors(
    errors: Iterable[ValidationError], segment: str
) -> tuple[ValidationError, ...]:
    """Prefix every error's path with *segment*, preserving order."""
    return tuple(error.prefixed(segment) for error in errors)

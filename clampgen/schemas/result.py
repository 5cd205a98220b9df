"""
Result types for parsing, conversion and formula computation.

Expected input problems (an empty form field, a typo in a size) are values,
not exceptions: every step returns Ok(value) or Err(error). The public
build_clamp boundary collapses any Err to an empty string.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class ClampError(str, Enum):
    """Why a clamp formula could not be computed."""

    EMPTY_FIELD = "empty_field"
    UNPARSEABLE_NUMBER = "unparseable_number"
    UNSUPPORTED_UNIT = "unsupported_unit"
    INVALID_ROOT = "invalid_root"
    DEGENERATE_RANGE = "degenerate_range"


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful step carrying its value."""

    value: T


@dataclass(frozen=True)
class Err:
    """A failed step: the error kind plus the offending field, if known."""

    error: ClampError
    field: str = ""
    detail: str = ""

    def __str__(self) -> str:
        where = f" in {self.field}" if self.field else ""
        return f"{self.error.value}{where}: {self.detail}" if self.detail else f"{self.error.value}{where}"


Result = Union[Ok[T], Err]

"""MD5 spec error codes and exceptions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class ErrorCategory(IntEnum):
    VALIDATION = 0x01
    REGISTRY = 0x02
    INTERNAL = 0xFF


class ErrorCode(IntEnum):
    # Validation (state decoding)
    INVALID_FORMAT = 0x0100
    INVALID_LENGTH = 0x0101
    INVALID_JSON_STATE = 0x0102

    # Registry
    UNKNOWN_ALGORITHM = 0x0200
    DUPLICATE_ALGORITHM = 0x0201

    # Internal
    INTERNAL_ERROR = 0xFF00

    @property
    def category(self) -> ErrorCategory:
        return ErrorCategory(self >> 8)


@dataclass(frozen=True)
class SpecError(Exception):
    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.name}({self.code:#06x}): {self.message}"


# Allow Python's Exception machinery to set __traceback__/__context__/__cause__
# while keeping dataclass fields frozen (Python 3.13 contextlib compat).
_EXCEPTION_ATTRS = frozenset(("__traceback__", "__context__", "__cause__"))
_frozen_setattr = SpecError.__setattr__


def _spec_error_setattr(self: SpecError, name: str, value: object) -> None:
    if name in _EXCEPTION_ATTRS:
        object.__setattr__(self, name, value)
    else:
        _frozen_setattr(self, name, value)


SpecError.__setattr__ = _spec_error_setattr  # type: ignore[method-assign]

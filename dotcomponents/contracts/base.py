"""
Base Contracts and Shared Types

Error taxonomy and the typed present/absent lookup used by every layer.
All types here are IMMUTABLE and represent pure data.

BOUNDARY ENFORCEMENT:
=====================
- Missing optional data is NOT an error. It is an explicit absent state.
- Configuration defects (key collisions) fail fast with a dedicated error.
- Collaborator failures are never wrapped here; they propagate unchanged.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Generic, Mapping, Optional, Tuple, TypeVar


T = TypeVar('T')


# =============================================================================
# ERROR STATES (Explicit, never silent)
# =============================================================================

class ErrorCode(Enum):
    """
    Explicit error codes for deterministic error handling.
    No silent fallbacks - every error state is enumerated.
    """
    # Source contract errors
    MISSING_REQUIRED_FIELD = auto()
    UNEXPECTED_VALUE_TYPE = auto()
    NAIVE_TIMESTAMP = auto()
    MALFORMED_CONFIGURATION = auto()

    # Normalization errors
    SWITCH_KEY_COLLISION = auto()
    CONFIG_KEY_COLLISION = auto()
    INVALID_REVENUE_URL = auto()

    # Model errors
    UNKNOWN_MODEL_VERSION = auto()


class DotcomponentsError(Exception):
    """
    Base class for every error raised by this package.

    Carries an explicit ErrorCode plus key/value context so callers can
    branch on the code instead of parsing messages.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: Tuple[Tuple[str, str], ...] = (),
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.context = tuple(context)

    def __str__(self) -> str:
        if not self.context:
            return f"[{self.code.name}] {self.message}"
        details = ", ".join(f"{k}={v}" for k, v in self.context)
        return f"[{self.code.name}] {self.message} ({details})"


class ContractViolation(DotcomponentsError):
    """A source or collaborator handed over a value outside its contract."""


class SwitchCollisionError(DotcomponentsError):
    """Two feature switches normalize to the same client-side key."""

    def __init__(
        self,
        code: ErrorCode = ErrorCode.SWITCH_KEY_COLLISION,
        message: str = "switch names collide after normalization",
        context: Tuple[Tuple[str, str], ...] = (),
    ):
        super().__init__(code, message, context)


class ConfigKeyCollisionError(DotcomponentsError):
    """Two page-data keys normalize to the same recognised lookup key."""

    def __init__(
        self,
        code: ErrorCode = ErrorCode.CONFIG_KEY_COLLISION,
        message: str = "page data keys collide after normalization",
        context: Tuple[Tuple[str, str], ...] = (),
    ):
        super().__init__(code, message, context)


# =============================================================================
# LOOKUP RESULT (Explicit presence)
# =============================================================================

@dataclass(frozen=True)
class Lookup(Generic[T]):
    """
    Result of looking a key up in a loosely typed bag.

    Either PRESENT with a value or ABSENT, never both.
    A present value is never None.
    """
    key: str
    value: Optional[T] = None
    present: bool = False

    def __post_init__(self):
        if self.present and self.value is None:
            raise ValueError(f"Lookup for {self.key!r} is present but has no value")
        if not self.present and self.value is not None:
            raise ValueError(f"Lookup for {self.key!r} is absent but carries a value")

    @staticmethod
    def found(key: str, value: T) -> Lookup[T]:
        return Lookup(key=key, value=value, present=True)

    @staticmethod
    def missing(key: str) -> Lookup[T]:
        return Lookup(key=key)

    @property
    def is_absent(self) -> bool:
        return not self.present

    def or_none(self) -> Optional[T]:
        """Collapse to the model's explicit absent state (None)."""
        return self.value if self.present else None


def lookup_string(bag: Mapping[str, object], key: str) -> Lookup[str]:
    """
    Look up a string value in a loosely typed mapping.

    Absent keys and None values are ABSENT. Any other non-string value is a
    contract violation: the bag promised strings for these keys.
    """
    if key not in bag or bag[key] is None:
        return Lookup.missing(key)

    value = bag[key]
    if not isinstance(value, str):
        raise ContractViolation(
            ErrorCode.UNEXPECTED_VALUE_TYPE,
            f"expected a string for {key!r}, got {type(value).__name__}",
            (("key", key),),
        )
    return Lookup.found(key, value)

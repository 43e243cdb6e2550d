"""
Data models for the resolver module.

Key concepts
────────────
ModelUnavailable  — why a type's members could not be enumerated
Ok / Err          — outcome of building a member mapping (never partial)
ResolutionStatus  — RESOLVED | NOT_APPLICABLE | MODEL_UNAVAILABLE
ExpansionResult   — what an entry point hands back to its caller
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar, Union

__all__ = [
    "ModelUnavailable",
    "Ok",
    "Err",
    "Result",
    "MemberMapping",
    "ResolutionStatus",
    "ExpansionResult",
]

T = TypeVar("T")

# field name → substitution value ("getId()" or "int"), declaration order
MemberMapping = dict[str, str]


@dataclass(frozen=True)
class ModelUnavailable:
    """The host could not enumerate a type's fields or methods."""
    reason:      str
    type_handle: str = ""

    def __str__(self) -> str:
        if self.type_handle:
            return f"model unavailable for {self.type_handle!r}: {self.reason}"
        return f"model unavailable: {self.reason}"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    error: ModelUnavailable

    @property
    def is_ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]


class ResolutionStatus(str, Enum):
    """
    Outcome of one template variable resolution.

    RESOLVED
        `value` holds the complete expansion (possibly "" for a type
        with no matching members).

    NOT_APPLICABLE
        Parameter count did not match the variant's arity.  The caller
        falls back to its default / unresolved behaviour.

    MODEL_UNAVAILABLE
        Member enumeration failed; `error` explains why.  Distinct from
        an empty expansion on purpose.
    """
    RESOLVED          = "resolved"
    NOT_APPLICABLE    = "not_applicable"
    MODEL_UNAVAILABLE = "model_unavailable"


@dataclass(frozen=True)
class ExpansionResult:
    status: ResolutionStatus
    value:  str = ""
    error:  Optional[ModelUnavailable] = None

    @classmethod
    def resolved(cls, value: str) -> "ExpansionResult":
        return cls(ResolutionStatus.RESOLVED, value=value)

    @classmethod
    def not_applicable(cls) -> "ExpansionResult":
        return cls(ResolutionStatus.NOT_APPLICABLE)

    @classmethod
    def unavailable(cls, error: ModelUnavailable) -> "ExpansionResult":
        return cls(ResolutionStatus.MODEL_UNAVAILABLE, error=error)

    @property
    def is_resolved(self) -> bool:
        return self.status is ResolutionStatus.RESOLVED

    def __str__(self) -> str:
        if self.is_resolved:
            return self.value
        if self.error is not None:
            return f"ExpansionResult({self.status.value}: {self.error})"
        return f"ExpansionResult({self.status.value})"

"""
Project-wide custom exception hierarchy.
All modules raise subclasses of FieldTemplatesError — never bare Exception.

Exceptions only cross host boundaries (type models, signature parsing,
variant lookup).  The resolution core turns them into result values.
"""

__all__ = [
    "FieldTemplatesError",
    "TypeModelError",
    "ModelUnavailableError",
    "SignatureError",
    "TemplateError",
    "UnknownVariantError",
]


class FieldTemplatesError(Exception):
    """Root exception for all fieldtemplates errors."""


# ── Type model ────────────────────────────────────────────────────────────────

class TypeModelError(FieldTemplatesError):
    """Raised when a host type model misbehaves."""


class ModelUnavailableError(TypeModelError):
    """Raised when a type's fields or methods cannot be enumerated."""

    def __init__(self, message: str, type_handle: str = "") -> None:
        super().__init__(message)
        self.type_handle = type_handle


# ── Signatures ────────────────────────────────────────────────────────────────

class SignatureError(FieldTemplatesError, ValueError):
    """Raised when a type signature is malformed."""


# ── Templates ─────────────────────────────────────────────────────────────────

class TemplateError(FieldTemplatesError):
    """Base class for template variable errors."""


class UnknownVariantError(TemplateError, KeyError):
    """Raised when no resolver variant is registered under a variable name."""

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0]) if self.args else ""

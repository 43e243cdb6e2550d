"""
Bean naming convention — which accessor names satisfy a given field.

A field `userName` is a bean field when the enclosing type declares a
zero-argument `getUserName()`.  Boolean fields may use `isUserName()`
instead; `get` always wins when both exist.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fieldtemplates.model.models import MethodInfo

__all__ = [
    "GETTER_PREFIX",
    "IS_PREFIX",
    "capitalize_first",
    "accessor_names_for",
    "is_boolean_like",
    "is_candidate_accessor",
]

GETTER_PREFIX = "get"
IS_PREFIX     = "is"

# Primitive boolean + boxed Boolean, in signature and simple-name spellings
_BOOLEAN_TYPES = frozenset({
    "Z",
    "QBoolean;",
    "Ljava.lang.Boolean;",
    "Qjava.lang.Boolean;",
    "boolean",
    "Boolean",
    "java.lang.Boolean",
})


def capitalize_first(name: str) -> str:
    """Upper-case index 0 of `name`, leaving the remainder verbatim."""
    if not name:
        return name
    return name[0].upper() + name[1:]


def accessor_names_for(field_name: str) -> tuple[str, str]:
    """Return the (get-form, is-form) accessor names for a field."""
    capitalized = capitalize_first(field_name)
    return GETTER_PREFIX + capitalized, IS_PREFIX + capitalized


def is_boolean_like(declared_type: str) -> bool:
    """True iff `declared_type` is primitive boolean or boxed Boolean."""
    return declared_type.strip() in _BOOLEAN_TYPES


def is_candidate_accessor(method: "MethodInfo") -> bool:
    return method.parameter_count == 0 and (
        method.name.startswith(GETTER_PREFIX) or method.name.startswith(IS_PREFIX)
    )

"""
Naming rules shared by every resolver variant.

convention — bean accessor names and boolean detection
signature  — type signature → simple type name
"""

from .convention import (
    accessor_names_for,
    capitalize_first,
    is_boolean_like,
    is_candidate_accessor,
)
from .signature import looks_like_signature, signature_simple_name

__all__ = [
    "accessor_names_for",
    "capitalize_first",
    "is_boolean_like",
    "is_candidate_accessor",
    "looks_like_signature",
    "signature_simple_name",
]

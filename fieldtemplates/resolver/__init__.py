"""
Member resolution and template variable entry points.

Each entry point takes a host type model + type handle + raw variable
parameters and returns an ExpansionResult that tells the caller whether
to insert the text or fall back to its default behaviour.
"""

from .engine import (
    resolve,
    resolve_bean_field_template,
    resolve_bean_field_template2,
    resolve_field_template,
    resolve_variable,
)
from .factory import available_variants, get_variant
from .members import (
    candidate_accessors,
    resolve_bean_pairs,
    resolve_field_types,
    resolve_mapping,
)
from .models import (
    Err,
    ExpansionResult,
    ModelUnavailable,
    Ok,
    ResolutionStatus,
)
from .variants import VariantSpec

__all__ = [
    "Err",
    "ExpansionResult",
    "ModelUnavailable",
    "Ok",
    "ResolutionStatus",
    "VariantSpec",
    "available_variants",
    "candidate_accessors",
    "get_variant",
    "resolve",
    "resolve_bean_field_template",
    "resolve_bean_field_template2",
    "resolve_bean_pairs",
    "resolve_field_template",
    "resolve_field_types",
    "resolve_mapping",
    "resolve_variable",
]

"""
Member resolution — field name → substitution value mappings.

Two pure mapping functions (one per resolver variant) plus the adapters
that pull members from a host type model.  `resolve_mapping` is the only
place host failures are caught; it turns them into Err values so a
partially built mapping can never escape.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from fieldtemplates.exceptions import ModelUnavailableError, SignatureError
from fieldtemplates.model.base import AbstractTypeModel
from fieldtemplates.model.models import Member, MethodInfo
from fieldtemplates.naming.convention import (
    accessor_names_for,
    is_boolean_like,
    is_candidate_accessor,
)
from fieldtemplates.naming.signature import signature_simple_name

from .models import Err, MemberMapping, ModelUnavailable, Ok, Result

__all__ = [
    "MappingStrategy",
    "candidate_accessors",
    "resolve_bean_pairs",
    "resolve_field_types",
    "bean_pairs_strategy",
    "field_types_strategy",
    "resolve_mapping",
]

logger = logging.getLogger(__name__)

# (model, type_handle) → mapping; may raise ModelUnavailableError / SignatureError
MappingStrategy = Callable[[AbstractTypeModel, str], MemberMapping]


def candidate_accessors(methods: Iterable[MethodInfo]) -> frozenset[str]:
    """Names of zero-argument methods starting with "get" or "is"."""
    return frozenset(m.name for m in methods if is_candidate_accessor(m))


def resolve_bean_pairs(
    fields: Iterable[Member],
    methods: Iterable[MethodInfo],
) -> MemberMapping:
    """
    Pair each field with its bean accessor call.

    `getX()` is used when declared; boolean fields fall back to `isX()`.
    Fields without a matching accessor are left out.
    """
    lookup = candidate_accessors(methods)
    result: MemberMapping = {}

    for fld in fields:
        getter, is_getter = accessor_names_for(fld.name)
        if getter in lookup:
            result[fld.name] = getter + "()"
        elif is_boolean_like(fld.declared_type) and is_getter in lookup:
            result[fld.name] = is_getter + "()"
        else:
            logger.debug("No accessor for field %r, skipping", fld.name)

    logger.debug("Bean pairs: %d of %d candidate accessors matched",
                 len(result), len(lookup))
    return result


def resolve_field_types(fields: Iterable[Member]) -> MemberMapping:
    """
    Pair every field with its simple type name.

    Raises:
        SignatureError: A declared type is a malformed signature.
    """
    return {fld.name: signature_simple_name(fld.declared_type) for fld in fields}


# ── Strategies over a host model ──────────────────────────────────────────────

def bean_pairs_strategy(model: AbstractTypeModel, type_handle: str) -> MemberMapping:
    return resolve_bean_pairs(
        model.list_fields(type_handle),
        model.list_methods(type_handle),
    )


def field_types_strategy(model: AbstractTypeModel, type_handle: str) -> MemberMapping:
    return resolve_field_types(model.list_fields(type_handle))


def resolve_mapping(
    model: AbstractTypeModel,
    type_handle: str,
    strategy: MappingStrategy,
) -> Result[MemberMapping]:
    """
    Run `strategy` against the model.

    Returns Ok(mapping) on success, or Err(ModelUnavailable) when the
    model could not be read (or reported an unreadable type signature).
    """
    try:
        mapping = strategy(model, type_handle)
    except ModelUnavailableError as exc:
        logger.warning("Type model unavailable for %r: %s", type_handle, exc)
        return Err(ModelUnavailable(str(exc), type_handle=type_handle))
    except SignatureError as exc:
        logger.warning("Unreadable type signature in %r: %s", type_handle, exc)
        return Err(ModelUnavailable(str(exc), type_handle=type_handle))
    return Ok(mapping)

"""
Resolution engine — arity gate → member mapping → expansion.

    START → VALIDATE_ARITY ─┬─ NOT_APPLICABLE
                            └─ RESOLVE_MEMBERS ─┬─ MODEL_UNAVAILABLE
                                                └─ EXPAND → RESOLVED

Every call is a pure function of (model contents, params, config); no
state survives between calls, so concurrent callers need no locking.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from fieldtemplates.config import TemplateConfig
from fieldtemplates.expander.params import TemplateParameters
from fieldtemplates.expander.template import expand
from fieldtemplates.model.base import AbstractTypeModel

from .factory import get_variant
from .members import resolve_mapping
from .models import Err, ExpansionResult
from .variants import (
    ENCLOSED_BEAN_FIELDS,
    ENCLOSED_FIELDS,
    ENCLOSING_BEAN_FIELDS,
    VariantSpec,
)

__all__ = [
    "resolve",
    "resolve_variable",
    "resolve_bean_field_template",
    "resolve_bean_field_template2",
    "resolve_field_template",
]

logger = logging.getLogger(__name__)


def resolve(
    model: AbstractTypeModel,
    type_handle: str,
    params: Sequence[Any],
    variant: VariantSpec,
    config: Optional[TemplateConfig] = None,
) -> ExpansionResult:
    """
    Resolve one template variable of the given variant.

    Returns
    -------
    ExpansionResult.resolved(text)   on success
    ExpansionResult.not_applicable() if len(params) != variant.arity
    ExpansionResult.unavailable(err) if the model could not be read
    """
    parameters = TemplateParameters.from_params(params, variant.arity)
    if parameters is None:
        logger.debug("%s expects %d parameters, got %d; not applicable",
                     variant.name, variant.arity, len(params))
        return ExpansionResult.not_applicable()

    outcome = resolve_mapping(model, type_handle, variant.strategy)
    if isinstance(outcome, Err):
        return ExpansionResult.unavailable(outcome.error)

    cfg = config or TemplateConfig()
    value = expand(
        parameters.template,
        parameters.effective_separator(cfg),
        outcome.value,
        variant.key_placeholder,
        variant.value_placeholder,
    )
    logger.debug("%s resolved %d member(s) of %r",
                 variant.name, len(outcome.value), type_handle)
    return ExpansionResult.resolved(value)


def resolve_variable(
    model: AbstractTypeModel,
    type_handle: str,
    variable: str,
    params: Sequence[Any],
    config: Optional[TemplateConfig] = None,
) -> ExpansionResult:
    """
    Resolve a template variable by its type name.

    Raises:
        UnknownVariantError: `variable` is not a registered variant.
    """
    return resolve(model, type_handle, params, get_variant(variable), config)


# ── Entry points, one per variant ─────────────────────────────────────────────

def resolve_bean_field_template(
    model: AbstractTypeModel,
    type_handle: str,
    params: Sequence[Any],
    config: Optional[TemplateConfig] = None,
) -> ExpansionResult:
    """params = [template, separator, newline flag]; ${name}, ${getter}."""
    return resolve(model, type_handle, params, ENCLOSING_BEAN_FIELDS, config)


def resolve_bean_field_template2(
    model: AbstractTypeModel,
    type_handle: str,
    params: Sequence[Any],
    config: Optional[TemplateConfig] = None,
) -> ExpansionResult:
    """params = [template, separator]; separator may embed ${newline}."""
    return resolve(model, type_handle, params, ENCLOSED_BEAN_FIELDS, config)


def resolve_field_template(
    model: AbstractTypeModel,
    type_handle: str,
    params: Sequence[Any],
    config: Optional[TemplateConfig] = None,
) -> ExpansionResult:
    """params = [template, separator]; ${type}, ${name}, ${newline}."""
    return resolve(model, type_handle, params, ENCLOSED_FIELDS, config)

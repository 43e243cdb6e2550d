"""
Resolver variants — one per template variable type.

A variant is plain data: arity, mapping strategy and placeholder names.
All variants run through the same engine.resolve(); none subclasses
another.

    ${id:enclosing_bean_fields(template, separator, newline)}
    ${id:enclosed_bean_fields(template, separator)}
    ${id:enclosed_fields(template, separator)}
"""

from __future__ import annotations

from dataclasses import dataclass

from fieldtemplates.expander.template import (
    GETTER_PLACEHOLDER,
    NAME_PLACEHOLDER,
    TYPE_PLACEHOLDER,
)

from .members import MappingStrategy, bean_pairs_strategy, field_types_strategy

__all__ = [
    "VariantSpec",
    "ENCLOSING_BEAN_FIELDS",
    "ENCLOSED_BEAN_FIELDS",
    "ENCLOSED_FIELDS",
]


@dataclass(frozen=True)
class VariantSpec:
    name:              str               # template variable type name
    arity:             int               # exact parameter count accepted
    strategy:          MappingStrategy
    key_placeholder:   str               # replaced by the field name
    value_placeholder: str               # replaced by the mapping value
    description:       str = ""

    def __str__(self) -> str:
        return f"{self.name}({self.arity} params)"


ENCLOSING_BEAN_FIELDS = VariantSpec(
    name="enclosing_bean_fields",
    arity=3,
    strategy=bean_pairs_strategy,
    key_placeholder=NAME_PLACEHOLDER,
    value_placeholder=GETTER_PLACEHOLDER,
    description="bean fields; params: template, separator, newline flag",
)

ENCLOSED_BEAN_FIELDS = VariantSpec(
    name="enclosed_bean_fields",
    arity=2,
    strategy=bean_pairs_strategy,
    key_placeholder=NAME_PLACEHOLDER,
    value_placeholder=GETTER_PLACEHOLDER,
    description="bean fields; params: template, separator (may use ${newline})",
)

ENCLOSED_FIELDS = VariantSpec(
    name="enclosed_fields",
    arity=2,
    strategy=field_types_strategy,
    key_placeholder=NAME_PLACEHOLDER,
    value_placeholder=TYPE_PLACEHOLDER,
    description="all fields; params: template, separator (may use ${newline})",
)

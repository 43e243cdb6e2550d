"""
Template expander — turns a member mapping into the final inserted text.
"""

from .params import TemplateParameters, parse_flag
from .template import (
    GETTER_PLACEHOLDER,
    NAME_PLACEHOLDER,
    NEWLINE_PLACEHOLDER,
    TYPE_PLACEHOLDER,
    expand,
    substitute,
)

__all__ = [
    "GETTER_PLACEHOLDER",
    "NAME_PLACEHOLDER",
    "NEWLINE_PLACEHOLDER",
    "TYPE_PLACEHOLDER",
    "TemplateParameters",
    "expand",
    "parse_flag",
    "substitute",
]

"""User-supplied template variable parameters and the arity gate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence

from fieldtemplates.config import TemplateConfig

from .template import NEWLINE_PLACEHOLDER

__all__ = ["TemplateParameters", "parse_flag"]


def parse_flag(value: Any) -> bool:
    """True iff `value` is True or the text "true" in any case; never fails."""
    if isinstance(value, bool):
        return value
    return str(value).lower() == "true"


@dataclass(frozen=True)
class TemplateParameters:
    """
    template       — line expanded once per member
    separator      — text placed between expanded lines
    force_newline  — three-parameter form only; None in the two-parameter
                     form, where the separator may embed ${newline}
    """
    template:      str
    separator:     str
    force_newline: Optional[bool] = None

    @classmethod
    def from_params(
        cls,
        params: Sequence[Any],
        arity: int,
    ) -> Optional["TemplateParameters"]:
        """
        Build parameters when `params` has exactly `arity` items.

        Returns None (not applicable) on any count mismatch.
        """
        if len(params) != arity:
            return None
        if arity == 3:
            return cls(str(params[0]), str(params[1]), parse_flag(params[2]))
        if arity == 2:
            return cls(str(params[0]), str(params[1]))
        return None

    def effective_separator(self, config: TemplateConfig) -> str:
        """Separator with the line-break policy of this parameter form applied."""
        if self.force_newline is None:
            return self.separator.replace(NEWLINE_PLACEHOLDER, config.line_separator)
        if self.force_newline:
            return config.forced_newline + self.separator
        return self.separator

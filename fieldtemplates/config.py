"""Runtime configuration for template expansion."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

__all__ = ["TemplateConfig"]

ENV_LINE_SEPARATOR  = "FIELDTEMPLATES_LINE_SEPARATOR"
ENV_FORCED_NEWLINE  = "FIELDTEMPLATES_FORCED_NEWLINE"

_ESCAPES = {"\\r\\n": "\r\n", "\\n": "\n", "\\r": "\r"}


def _decode_escapes(value: str) -> str:
    """Turn literal "\\n" / "\\r\\n" (as typed in a shell) into line breaks."""
    for raw, decoded in _ESCAPES.items():
        value = value.replace(raw, decoded)
    return value


@dataclass(frozen=True)
class TemplateConfig:
    """
    Line-break settings used by the template expander.

    line_separator  — substituted for ${newline} in two-parameter separators
    forced_newline  — prefixed to the separator when the three-parameter
                      form sets its newline flag
    """
    line_separator: str = os.linesep
    forced_newline: str = "\n"

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        line_separator: Optional[str] = None,
    ) -> "TemplateConfig":
        """
        Build a config from FIELDTEMPLATES_* environment variables.

        An explicit `line_separator` argument wins over the environment.
        """
        env = os.environ if environ is None else environ
        default = cls()

        sep = line_separator
        if sep is None:
            sep = env.get(ENV_LINE_SEPARATOR)
        forced = env.get(ENV_FORCED_NEWLINE)

        return cls(
            line_separator=_decode_escapes(sep) if sep is not None else default.line_separator,
            forced_newline=_decode_escapes(forced) if forced is not None else default.forced_newline,
        )

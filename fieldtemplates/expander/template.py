"""
Template expansion — literal placeholder substitution and joining.

The only recognised tokens are ${name}, ${getter}, ${type} and ${newline}.
Substitution is plain text search (no regex), and a substituted value is
never scanned again: a field value containing "${name}" stays verbatim.
"""

from __future__ import annotations

from typing import Mapping

__all__ = [
    "NAME_PLACEHOLDER",
    "GETTER_PLACEHOLDER",
    "TYPE_PLACEHOLDER",
    "NEWLINE_PLACEHOLDER",
    "substitute",
    "expand",
]

NAME_PLACEHOLDER    = "${name}"
GETTER_PLACEHOLDER  = "${getter}"
TYPE_PLACEHOLDER    = "${type}"
NEWLINE_PLACEHOLDER = "${newline}"


def _next_placeholder(text: str, start: int, tokens) -> tuple[int, str]:
    """Earliest (index, token) at or after `start`, or (-1, "")."""
    best, best_token = -1, ""
    for token in tokens:
        idx = text.find(token, start)
        if idx != -1 and (best == -1 or idx < best):
            best, best_token = idx, token
    return best, best_token


def substitute(template: str, values: Mapping[str, str]) -> str:
    """
    Replace every occurrence of each placeholder key in `template`.

    One left-to-right pass over the template; replacement text is copied
    as-is and never re-examined.
    """
    tokens = [t for t in values if t]
    if not tokens:
        return template

    parts: list[str] = []
    pos = 0
    while True:
        hit, token = _next_placeholder(template, pos, tokens)
        if hit == -1:
            parts.append(template[pos:])
            break
        parts.append(template[pos:hit])
        parts.append(values[token])
        pos = hit + len(token)
    return "".join(parts)


def expand(
    template: str,
    separator: str,
    mapping: Mapping[str, str],
    key_placeholder: str,
    value_placeholder: str,
) -> str:
    """
    Expand `template` once per mapping entry and join with `separator`.

    Each entry's key replaces `key_placeholder` and its value replaces
    `value_placeholder`.  Entry order is preserved; no entries gives "".
    """
    lines = [
        substitute(template, {key_placeholder: key, value_placeholder: value})
        for key, value in mapping.items()
    ]
    return separator.join(lines)

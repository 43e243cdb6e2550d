"""Factory function — returns the variant registered for a variable name."""

from __future__ import annotations

from fieldtemplates.exceptions import UnknownVariantError

from .variants import (
    ENCLOSED_BEAN_FIELDS,
    ENCLOSED_FIELDS,
    ENCLOSING_BEAN_FIELDS,
    VariantSpec,
)

__all__ = ["get_variant", "available_variants"]

_VARIANT_MAP: dict[str, VariantSpec] = {
    spec.name: spec
    for spec in (ENCLOSING_BEAN_FIELDS, ENCLOSED_BEAN_FIELDS, ENCLOSED_FIELDS)
}


def get_variant(name: str) -> VariantSpec:
    """
    Return the VariantSpec for a template variable type name.

    Parameters
    ----------
    name : variable type, e.g. "enclosed_bean_fields"

    Raises
    ------
    UnknownVariantError if no variant is registered under `name`.
    """
    try:
        return _VARIANT_MAP[name]
    except KeyError:
        known = ", ".join(sorted(_VARIANT_MAP))
        raise UnknownVariantError(
            f"Unknown template variable {name!r} (known: {known})"
        ) from None


def available_variants() -> list[VariantSpec]:
    """All registered variants, in registration order."""
    return list(_VARIANT_MAP.values())

"""
StructureTypeModel — type model backed by a StructureDump.

Used by the CLI (dump files written by an external exporter) and by tests.
Handles are type names; lookup is exact first, then case-insensitive.
"""

from __future__ import annotations

import logging
from pathlib import Path

from fieldtemplates.exceptions import ModelUnavailableError

from .base import AbstractTypeModel
from .models import Member, MethodInfo, StructureDump, TypeInfo

__all__ = ["StructureTypeModel"]

logger = logging.getLogger(__name__)


class StructureTypeModel(AbstractTypeModel):
    """Read-only type model over an in-memory StructureDump."""

    def __init__(self, structure: StructureDump) -> None:
        self._structure = structure

    # ── Construction ──────────────────────────────────────────────────────

    @classmethod
    def from_json(cls, raw: str) -> "StructureTypeModel":
        """
        Raises:
            ModelUnavailableError: `raw` is not a valid structure dump.
        """
        try:
            structure = StructureDump.from_json(raw)
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise ModelUnavailableError(f"Invalid structure dump: {exc}") from exc
        return cls(structure)

    @classmethod
    def from_json_file(cls, path: str | Path) -> "StructureTypeModel":
        """
        Raises:
            ModelUnavailableError: The file is missing, unreadable or invalid.
        """
        p = Path(path).expanduser()
        logger.debug("Loading structure dump from %s", p)
        try:
            raw = p.read_text(encoding="utf-8")
        except OSError as exc:
            raise ModelUnavailableError(f"Cannot read structure dump {p}: {exc}") from exc
        return cls.from_json(raw)

    # ── AbstractTypeModel ─────────────────────────────────────────────────

    def list_fields(self, type_handle: str) -> list[Member]:
        return list(self._lookup(type_handle).fields)

    def list_methods(self, type_handle: str) -> list[MethodInfo]:
        return list(self._lookup(type_handle).methods)

    # ── Helpers ───────────────────────────────────────────────────────────

    def type_names(self) -> list[str]:
        return [t.name for t in self._structure.types]

    def _lookup(self, type_handle: str) -> TypeInfo:
        info = self._structure.find_type(type_handle)
        if info is None:
            raise ModelUnavailableError(
                f"Type not found in structure dump: {type_handle!r}",
                type_handle=type_handle,
            )
        return info

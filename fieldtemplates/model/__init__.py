"""
Host type models — the capability the resolver consumes.

AbstractTypeModel   — list_fields / list_methods for one type handle
StructureTypeModel  — concrete model over a JSON structure dump
"""

from .base import AbstractTypeModel
from .models import Member, MethodInfo, StructureDump, TypeInfo
from .structure import StructureTypeModel

__all__ = [
    "AbstractTypeModel",
    "Member",
    "MethodInfo",
    "StructureDump",
    "StructureTypeModel",
    "TypeInfo",
]

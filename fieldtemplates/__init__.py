"""
fieldtemplates — expand a line template once per field of a class.

    from fieldtemplates import StructureTypeModel, resolve_bean_field_template2

    model = StructureTypeModel.from_json_file("person.json")
    result = resolve_bean_field_template2(model, "Person",
                                          ["${name}: ${getter}", ", "])
    if result.is_resolved:
        print(result.value)   # id: getId(), active: isActive()
"""

from fieldtemplates.config import TemplateConfig
from fieldtemplates.model import AbstractTypeModel, Member, MethodInfo, StructureTypeModel
from fieldtemplates.resolver import (
    ExpansionResult,
    ResolutionStatus,
    resolve_bean_field_template,
    resolve_bean_field_template2,
    resolve_field_template,
    resolve_variable,
)

__version__ = "0.3.0"

__all__ = [
    "AbstractTypeModel",
    "ExpansionResult",
    "Member",
    "MethodInfo",
    "ResolutionStatus",
    "StructureTypeModel",
    "TemplateConfig",
    "resolve_bean_field_template",
    "resolve_bean_field_template2",
    "resolve_field_template",
    "resolve_variable",
]

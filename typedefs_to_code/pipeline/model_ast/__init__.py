"""
Model AST module.

Contains the definition nodes and the parser for the type model.
"""

from __future__ import annotations

from .nodes import (
    PRIMITIVE_TYPES,
    ArrayOf,
    Definition,
    EnumDefinition,
    FieldDef,
    FieldSpec,
    Primitive,
    RecordDefinition,
    Reference,
    Required,
    TypeModel,
)
from .parser import ModelParser

__all__ = [
    "PRIMITIVE_TYPES",
    "FieldSpec",
    "Primitive",
    "Reference",
    "ArrayOf",
    "Required",
    "FieldDef",
    "Definition",
    "RecordDefinition",
    "EnumDefinition",
    "TypeModel",
    "ModelParser",
]

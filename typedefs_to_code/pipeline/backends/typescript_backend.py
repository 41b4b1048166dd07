"""
TypeScript code generation backend.

Generates native interfaces, type aliases and enums.
"""

from __future__ import annotations

from ..model_ast.nodes import ArrayOf, EnumDefinition, RecordDefinition, Reference, Required, is_required
from .base import CodeBackend


class TypeScriptBackend(CodeBackend):
    """TypeScript code generation backend."""

    TEMPLATE_LANG = "typescript"
    FILE_EXTENSION = "ts"

    TYPE_MAP = {
        "string": "string",
        "number": "number",
        "boolean": "boolean",
        "id": "string",
        "any": "any",
    }

    def generate_record(self, definition: RecordDefinition) -> str:
        if definition.is_alias:
            return self.render("alias", name=definition.name, parent=definition.extends)

        fields = [
            {
                "name": field_def.name,
                "type": self.translate_type(field_def.spec),
                "required": is_required(field_def.spec),
            }
            for field_def in definition.fields
        ]
        return self.render("interface", name=definition.name, parent=definition.extends, fields=fields)

    def generate_enum(self, definition: EnumDefinition) -> str:
        return self.render("enum", name=definition.name, values=definition.values)

    def translate_reference(self, spec: Reference) -> str:
        return spec.name

    def translate_array(self, spec: ArrayOf) -> str:
        return f"{self.translate_type(spec.item)}[]"

    def translate_required(self, spec: Required) -> str:
        # Required-ness is expressed on the property name, not the type
        return self.translate_type(spec.inner)

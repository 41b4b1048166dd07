"""
Mongoose code generation backend.

Generates `SchemaDefinition` objects used to validate stored documents.
"""

from __future__ import annotations

from ..model_ast.nodes import (
    ArrayOf,
    EnumDefinition,
    FieldSpec,
    RecordDefinition,
    Reference,
    Required,
    is_required,
    unwrap_required,
)
from .base import CodeBackend


class MongooseBackend(CodeBackend):
    """Mongoose schema definition backend."""

    TEMPLATE_LANG = "mongoose"
    FILE_EXTENSION = "ts"

    TYPE_MAP = {
        "string": "String",
        "number": "Number",
        "boolean": "Boolean",
        "id": "String",
        "any": "{}",
    }

    @property
    def suffix(self) -> str:
        return self.config.orm_suffix

    def generate_record(self, definition: RecordDefinition) -> str:
        if definition.is_alias:
            return self.render("alias", name=definition.name, parent=definition.extends, suffix=self.suffix)

        fields = [{"name": field_def.name, "type": self.field_value(field_def.spec)} for field_def in definition.fields]
        return self.render(
            "schema",
            name=definition.name,
            parent=definition.extends,
            suffix=self.suffix,
            fields=fields,
        )

    def generate_enum(self, definition: EnumDefinition) -> str:
        return self.render("enum", name=definition.name, values=definition.values, suffix=self.suffix)

    def field_value(self, spec: FieldSpec) -> str:
        """
        Render the value of one schema path.

        Plain types are written directly; arrays (and required fields when
        enforcement is enabled) use the `{ type: ... }` options form.
        """
        base = unwrap_required(spec)
        type_str = self.translate_type(base)
        enforce_required = self.config.mongoose_enforce_required and is_required(spec)

        if not isinstance(base, ArrayOf) and not enforce_required:
            return type_str

        options = [f"type: {type_str}"]
        if enforce_required:
            options.append("required: true")
        return "{ " + ", ".join(options) + " }"

    def translate_reference(self, spec: Reference) -> str:
        return f"{spec.name}{self.suffix}"

    def translate_array(self, spec: ArrayOf) -> str:
        return f"[{self.translate_type(spec.item)}]"

    def translate_required(self, spec: Required) -> str:
        return self.translate_type(spec.inner)

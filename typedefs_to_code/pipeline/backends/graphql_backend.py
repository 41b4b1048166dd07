"""
GraphQL SDL code generation backend.

SDL has no inheritance, so every type lists the fields of its ancestors
first. Ancestor field lines come from the registry, which the tree walk
fills parent-first.
"""

from __future__ import annotations

import logging

from ..analyzer.registry import InterfaceRegistry
from ..config import CodeGeneratorConfig
from ..model_ast.nodes import ArrayOf, EnumDefinition, Primitive, RecordDefinition, Reference, Required
from .base import CodeBackend

logger = logging.getLogger(__name__)

ID_FIELD = "_id: ID!"


class GraphQLBackend(CodeBackend):
    """GraphQL SDL backend."""

    TEMPLATE_LANG = "graphql"
    FILE_EXTENSION = "graphql"

    TYPE_MAP = {
        "string": "String",
        "number": "Int",
        "boolean": "Boolean",
        "id": "ID",
    }

    def __init__(self, config: CodeGeneratorConfig, registry: InterfaceRegistry):
        super().__init__(config)
        self.registry = registry

    def generate_record(self, definition: RecordDefinition) -> str:
        inherited: list[str] = []
        if definition.extends is not None:
            inherited = [
                f"# START Inherited from {definition.extends}",
                *self.registry.lines_for(definition.extends),
                f"# END Inherited from {definition.extends}",
            ]

        lines: list[str] = []
        if definition.db_base and not any(line.startswith("_id:") for line in inherited):
            lines.append(ID_FIELD)
        lines.extend(inherited)
        lines.extend(f"{field_def.name}: {self.translate_type(field_def.spec)}" for field_def in definition.fields)

        if not lines:
            logger.warning("%s has no fields; its GraphQL type will be empty", definition.name)

        self.registry.register(definition.name, lines)
        return self.render("type", name=definition.name, lines=lines)

    def generate_enum(self, definition: EnumDefinition) -> str:
        return self.render("enum", name=definition.name, values=definition.values)

    def translate_primitive(self, spec: Primitive) -> str:
        if spec.name == "any":
            return self.config.graphql_any_scalar
        return super().translate_primitive(spec)

    def translate_reference(self, spec: Reference) -> str:
        return spec.name

    def translate_array(self, spec: ArrayOf) -> str:
        return f"[{self.translate_type(spec.item)}!]"

    def translate_required(self, spec: Required) -> str:
        return f"{self.translate_type(spec.inner)}!"

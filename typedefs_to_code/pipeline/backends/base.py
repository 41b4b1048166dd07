"""
Base class for code generation backends.

Defines the interface that all target-specific backends must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from ..config import CodeGeneratorConfig
from ..errors import InvalidDefinitionError
from ..model_ast.nodes import (
    ArrayOf,
    Definition,
    EnumDefinition,
    FieldSpec,
    Primitive,
    RecordDefinition,
    Reference,
    Required,
)
from ..templating import template_environment


class CodeBackend(ABC):
    """Abstract base class for code generation backends."""

    # Type mapping from model primitives to target types
    TYPE_MAP: dict[str, str] = {}

    # Template directory name
    TEMPLATE_LANG: str = ""

    # Template file extension
    FILE_EXTENSION: str = ""

    def __init__(self, config: CodeGeneratorConfig):
        """
        Initialize the backend.

        Args:
            config: Code generation configuration
        """
        self.config = config
        self.jinja_env = template_environment(self.TEMPLATE_LANG)

    def render(self, template_name: str, **context: Any) -> str:
        template = self.jinja_env.get_template(f"{template_name}.{self.FILE_EXTENSION}.jinja2")
        return template.render(**context)

    def generate(self, definition: Definition) -> str:
        """
        Generate the fragment for one definition.

        Args:
            definition: A record or enum definition

        Returns:
            Target-specific source fragment
        """
        if isinstance(definition, RecordDefinition):
            return self.generate_record(definition)
        if isinstance(definition, EnumDefinition):
            return self.generate_enum(definition)
        raise InvalidDefinitionError(definition.name, "definition has neither fields nor values")

    @abstractmethod
    def generate_record(self, definition: RecordDefinition) -> str:
        """Generate an aggregate declaration, or an alias for a pure extension."""

    @abstractmethod
    def generate_enum(self, definition: EnumDefinition) -> str:
        """Generate an enumeration."""

    def translate_type(self, spec: FieldSpec) -> str:
        """
        Translate a field spec to a target type string.

        Args:
            spec: The field spec

        Returns:
            Target-specific type string
        """
        if isinstance(spec, Required):
            return self.translate_required(spec)
        if isinstance(spec, ArrayOf):
            return self.translate_array(spec)
        if isinstance(spec, Reference):
            return self.translate_reference(spec)
        if isinstance(spec, Primitive):
            return self.translate_primitive(spec)
        raise TypeError(f"Unsupported field spec: {spec!r}")

    def translate_primitive(self, spec: Primitive) -> str:
        return self.TYPE_MAP[spec.name]

    @abstractmethod
    def translate_reference(self, spec: Reference) -> str:
        """Translate a reference to another model type."""

    @abstractmethod
    def translate_array(self, spec: ArrayOf) -> str:
        """Translate an array type."""

    @abstractmethod
    def translate_required(self, spec: Required) -> str:
        """Translate a required (non-optional) field type."""

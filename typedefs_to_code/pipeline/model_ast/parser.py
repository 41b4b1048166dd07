"""
Model parser that builds typed definitions.

Phase 1 of the pipeline: turn the raw model mapping (as loaded from JSON)
into definition nodes, without resolving inheritance.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from ..errors import InvalidDefinitionError
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

logger = logging.getLogger(__name__)

# Field names and enum values end up as bare SDL names
NAME_PATTERN = re.compile(r"^[_A-Za-z][_0-9A-Za-z]*$")


class ModelParser:
    """Parses a raw model mapping into a TypeModel."""

    def parse(self, model: Mapping[str, Any]) -> TypeModel:
        """
        Parse every definition in the model.

        Args:
            model: Mapping from type name to raw definition dict

        Returns:
            TypeModel with definitions in model order

        Raises:
            InvalidDefinitionError: If a definition has no valid shape
        """
        type_model = TypeModel()
        for name, raw in model.items():
            type_model.definitions[name] = self.parse_definition(name, raw)

        self._check_references(type_model)
        return type_model

    def parse_definition(self, name: str, raw: Any) -> Definition:
        if not isinstance(raw, Mapping):
            raise InvalidDefinitionError(name, "definition must be an object")

        # fields wins over values when both are present
        if "fields" in raw:
            return self._parse_record(name, raw)
        if "values" in raw:
            return self._parse_enum(name, raw)
        if "extends" in raw:
            return self._parse_record(name, raw)

        raise InvalidDefinitionError(name, "definition has neither fields nor values")

    def _parse_record(self, name: str, raw: Mapping[str, Any]) -> RecordDefinition:
        raw_fields = raw.get("fields") or {}
        if not isinstance(raw_fields, Mapping):
            raise InvalidDefinitionError(name, "fields must be an object")

        extends = raw.get("extends")
        if extends is not None and (not isinstance(extends, str) or not extends):
            raise InvalidDefinitionError(name, "extends must be a type name")

        meta = raw.get("meta") or {}
        if not isinstance(meta, Mapping):
            raise InvalidDefinitionError(name, "meta must be an object")

        for field_name in raw_fields:
            if not NAME_PATTERN.match(field_name):
                raise InvalidDefinitionError(name, f"field name {field_name!r} is not a valid GraphQL name")

        fields = [
            FieldDef(name=field_name, spec=self.parse_field_spec(name, field_name, type_info))
            for field_name, type_info in raw_fields.items()
        ]

        return RecordDefinition(
            name=name,
            fields=fields,
            extends=extends,
            db_base=bool(meta.get("dbBase", False)),
        )

    def _parse_enum(self, name: str, raw: Mapping[str, Any]) -> EnumDefinition:
        values = raw["values"]
        if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
            raise InvalidDefinitionError(name, "values must be a list of strings")
        if not values:
            raise InvalidDefinitionError(name, "values must not be empty")
        for value in values:
            if not NAME_PATTERN.match(value):
                raise InvalidDefinitionError(name, f"value {value!r} is not a valid GraphQL name")
        if "extends" in raw:
            raise InvalidDefinitionError(name, "an enum cannot extend another type")
        return EnumDefinition(name=name, values=list(values))

    def parse_field_spec(self, type_name: str, field_name: str, type_info: Any) -> FieldSpec:
        """
        Parse one field spec.

        A bare token is an optional primitive or reference. The object form
        may mark the field as an array and/or required.
        """
        if isinstance(type_info, str):
            return self._parse_token(type_name, field_name, type_info)

        if not isinstance(type_info, Mapping):
            raise InvalidDefinitionError(type_name, f"field {field_name} must be a type name or an object")

        token = type_info.get("type")
        if not isinstance(token, str):
            raise InvalidDefinitionError(type_name, f"field {field_name} has no type")

        spec: FieldSpec
        if token == "array":
            array_type = type_info.get("arrayType")
            if not isinstance(array_type, str):
                raise InvalidDefinitionError(type_name, f"array field {field_name} has no arrayType")
            spec = ArrayOf(self._parse_token(type_name, field_name, array_type))
        else:
            spec = self._parse_token(type_name, field_name, token)

        if type_info.get("required"):
            spec = Required(spec)
        return spec

    def _parse_token(self, type_name: str, field_name: str, token: str) -> FieldSpec:
        if not token:
            raise InvalidDefinitionError(type_name, f"field {field_name} has an empty type")
        if token == "array":
            raise InvalidDefinitionError(type_name, f"field {field_name} uses array without arrayType")
        if token in PRIMITIVE_TYPES:
            return Primitive(token)
        return Reference(token)

    def _check_references(self, type_model: TypeModel) -> None:
        """Check inheritance targets and warn about unknown field types."""
        for definition in type_model.definitions.values():
            if not isinstance(definition, RecordDefinition):
                continue

            parent = type_model.definitions.get(definition.extends) if definition.extends else None
            if isinstance(parent, EnumDefinition):
                raise InvalidDefinitionError(definition.name, f"a record cannot extend enum {parent.name}")

            for field_def in definition.fields:
                for ref in _references(field_def.spec):
                    if ref not in type_model:
                        logger.warning("%s.%s references unknown type %s", definition.name, field_def.name, ref)


def _references(spec: FieldSpec) -> list[str]:
    if isinstance(spec, Reference):
        return [spec.name]
    if isinstance(spec, ArrayOf):
        return _references(spec.item)
    if isinstance(spec, Required):
        return _references(spec.inner)
    return []

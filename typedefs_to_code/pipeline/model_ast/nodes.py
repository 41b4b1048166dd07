"""
Node definitions for the type model.

These nodes represent parsed definitions before any inheritance
resolution. Field specs form a closed set of cases so that every backend
can translate them exhaustively.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# Base types that need no further expansion
PRIMITIVE_TYPES = ("string", "number", "boolean", "id", "any")


@dataclass(frozen=True)
class FieldSpec:
    """Base class for field type specifications."""


@dataclass(frozen=True)
class Primitive(FieldSpec):
    """One of PRIMITIVE_TYPES."""

    name: str = ""


@dataclass(frozen=True)
class Reference(FieldSpec):
    """A reference to another type in the model."""

    name: str = ""


@dataclass(frozen=True)
class ArrayOf(FieldSpec):
    """An array whose items have the given spec."""

    item: FieldSpec = field(default_factory=Primitive)


@dataclass(frozen=True)
class Required(FieldSpec):
    """A non-optional field wrapping another spec."""

    inner: FieldSpec = field(default_factory=Primitive)


@dataclass
class FieldDef:
    """A named field of a record definition."""

    name: str = ""
    spec: FieldSpec = field(default_factory=Primitive)


@dataclass
class Definition:
    """Base class for a named model definition."""

    name: str = ""


@dataclass
class RecordDefinition(Definition):
    """A record with ordered fields and an optional parent."""

    fields: list[FieldDef] = field(default_factory=list)
    extends: str | None = None

    # meta.dbBase: persisted root type that needs an identity field
    db_base: bool = False

    @property
    def is_alias(self) -> bool:
        """A pure extension: no fields of its own, only a parent."""
        return not self.fields and self.extends is not None


@dataclass
class EnumDefinition(Definition):
    """An enumeration of literal string values."""

    values: list[str] = field(default_factory=list)


@dataclass
class TypeModel:
    """Parsed definitions keyed by type name, in model order."""

    definitions: dict[str, Definition] = field(default_factory=dict)

    def __contains__(self, name: str) -> bool:
        return name in self.definitions

    def __getitem__(self, name: str) -> Definition:
        return self.definitions[name]

    def names(self) -> list[str]:
        return list(self.definitions)


def is_required(spec: FieldSpec) -> bool:
    return isinstance(spec, Required)


def unwrap_required(spec: FieldSpec) -> FieldSpec:
    """Strip the Required marker, returning the underlying type spec."""
    while isinstance(spec, Required):
        spec = spec.inner
    return spec

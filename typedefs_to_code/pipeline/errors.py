"""
Errors raised while building code from a type model.

Every schema error names the offending type and the rule it violates so
the CLI can report it without a traceback.
"""

from __future__ import annotations


class SchemaError(Exception):
    """Base class for errors caused by the input model.

    Attributes:
        type_name: Name of the definition that triggered the error
        rule: Short description of the violated rule
    """

    def __init__(self, type_name: str, rule: str):
        self.type_name = type_name
        self.rule = rule
        super().__init__(f"{type_name}: {rule}")


class MissingParentError(SchemaError):
    """Raised when `extends` names a type that is not in the model."""

    def __init__(self, type_name: str, parent_name: str):
        self.parent_name = parent_name
        super().__init__(
            type_name,
            f"Broken inheritance tree: {type_name} extends {parent_name}, which does not exist",
        )


class CyclicInheritanceError(SchemaError):
    """Raised when an `extends` chain comes back to a type being resolved."""

    def __init__(self, type_name: str, chain: list[str]):
        self.chain = list(chain)
        super().__init__(type_name, "Cyclic inheritance: " + " -> ".join(self.chain))


class InvalidDefinitionError(SchemaError):
    """Raised when a definition does not have a record or enum shape."""

    pass


class RegistryError(Exception):
    """Raised when the interface registry is used out of order.

    This indicates a bug in the tree walk rather than a bad model:
    - a type is registered twice
    - a parent is looked up before it was emitted
    """

    pass


class OutputValidationError(Exception):
    """Raised when generated output fails the pre-write structural checks."""

    pass

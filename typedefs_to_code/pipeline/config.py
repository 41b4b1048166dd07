"""
Configuration for the code generator pipeline.

Holds generation options plus the formatter and output settings used by
the CLI when writing the final artifact.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum

DEFAULT_HEADER_LINES = [
    'import gql from "graphql-tag";',
    'import { SchemaDefinition } from "mongoose";',
]


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Default: raise error if file exists
    FORCE = "force"  # Overwrite the existing file


class SiblingOrder(str, Enum):
    """Order of unrelated types that share the same parent."""

    DISCOVERY = "discovery"  # Model iteration order
    NAME = "name"  # Lexical by type name


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        atomic_write: Whether to use atomic file writes
    """

    mode: OutputMode = OutputMode.ERROR_IF_EXISTS
    atomic_write: bool = True


@dataclass
class FormatterConfig:
    """Configuration for the prettier post-processing step."""

    # Whether formatting is enabled
    enabled: bool = False

    # Maximum line width passed to prettier
    print_width: int = 100

    # Prettier parser for the combined output
    parser: str = "typescript"


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # Fixed lines placed after the generation comment (imports)
    header_lines: list[str] = field(default_factory=lambda: list(DEFAULT_HEADER_LINES))

    # Order of sibling types in the output
    sibling_order: SiblingOrder = SiblingOrder.DISCOVERY

    # Suffix appended to type names for Mongoose schema definitions
    orm_suffix: str = "Def"

    # Name of the exported constant holding the SDL document
    sdl_export_name: str = "AllGql"

    # GraphQL scalar used for the `any` primitive
    graphql_any_scalar: str = "Any"

    # Emit `required: true` in Mongoose definitions (off: required is ignored)
    mongoose_enforce_required: bool = False

    formatter: FormatterConfig = field(default_factory=FormatterConfig)

    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary. Unknown keys are ignored.

        Raises:
            ValueError: If an enumerated option has an unknown value
        """
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if k == "formatter" and isinstance(v, dict):
                config.formatter = FormatterConfig(**_known_keys(FormatterConfig, v))
            elif k == "output" and isinstance(v, dict):
                output = OutputConfig(**_known_keys(OutputConfig, v))
                output.mode = OutputMode(output.mode)
                config.output = output
            elif k == "sibling_order":
                config.sibling_order = SiblingOrder(v)
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "add_generation_comment": self.add_generation_comment,
            "header_lines": list(self.header_lines),
            "sibling_order": self.sibling_order.value,
            "orm_suffix": self.orm_suffix,
            "sdl_export_name": self.sdl_export_name,
            "graphql_any_scalar": self.graphql_any_scalar,
            "mongoose_enforce_required": self.mongoose_enforce_required,
            "formatter": {
                "enabled": self.formatter.enabled,
                "print_width": self.formatter.print_width,
                "parser": self.formatter.parser,
            },
            "output": {
                "mode": self.output.mode.value,
                "atomic_write": self.output.atomic_write,
            },
        }


def _known_keys(cls: type, d: dict) -> dict:
    names = {f.name for f in fields(cls)}
    return {k: v for k, v in d.items() if k in names}

"""Type Model to Code Generator

A Python package for generating TypeScript interfaces, Mongoose schema
definitions and a GraphQL SDL document from one set of declarative type
definitions with single inheritance.
"""

__version__ = "1.0.0"

from .pipeline import (
    BuildResult,
    CodeGeneratorConfig,
    CyclicInheritanceError,
    FormatterConfig,
    InvalidDefinitionError,
    MissingParentError,
    OutputConfig,
    OutputMode,
    PipelineGenerator,
    SchemaError,
    SiblingOrder,
    build,
    load_model,
)

__all__ = [
    "build",
    "BuildResult",
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "FormatterConfig",
    "OutputConfig",
    "OutputMode",
    "SiblingOrder",
    "SchemaError",
    "MissingParentError",
    "CyclicInheritanceError",
    "InvalidDefinitionError",
    "load_model",
]

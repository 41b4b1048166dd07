"""
Pipeline - type model to code generator.

This module provides a multi-phase architecture for generating
TypeScript, Mongoose and GraphQL code from one type model:

1. Phase 1 (Parser): Parse raw definitions into typed nodes
2. Phase 2 (Analyzer): Build the inheritance tree
3. Phase 3 (Backends): Render each type for every target, parents first
4. Phase 4 (Assembler): Join fragments and wrap the SDL document
5. Phase 5 (Formatter): Optional post-processing with prettier
6. Phase 6 (Writer): Atomic write of the final module
"""

from __future__ import annotations

from .config import CodeGeneratorConfig, FormatterConfig, OutputConfig, OutputMode, SiblingOrder
from .errors import (
    CyclicInheritanceError,
    InvalidDefinitionError,
    MissingParentError,
    OutputValidationError,
    RegistryError,
    SchemaError,
)
from .generator import BuildResult, PipelineGenerator, build
from .loader import load_model
from .writer import AtomicWriter, write_output

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
    "RegistryError",
    "OutputValidationError",
    "load_model",
    "AtomicWriter",
    "write_output",
]

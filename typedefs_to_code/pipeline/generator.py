"""
Pipeline generator.

Runs the phases in order: parse the model, build the inheritance tree,
walk it parent-first dispatching every type to the three backends, then
assemble the fragments into one module. All state (tree, registry,
fragment lists) lives inside a single build call.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .. import __version__
from ..cli_utils import reconstruct_command_line
from .analyzer import InterfaceRegistry, build_tree
from .backends import GraphQLBackend, MongooseBackend, TypeScriptBackend
from .config import CodeGeneratorConfig
from .formatters import PrettierFormatter
from .model_ast import ModelParser, TypeModel
from .templating import template_environment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildResult:
    """Fragments produced by one build, in tree order."""

    type_names: tuple[str, ...] = ()
    native_fragments: tuple[str, ...] = ()
    orm_fragments: tuple[str, ...] = ()
    sdl_fragments: tuple[str, ...] = ()
    sdl_document: str = ""

    @property
    def fragments(self) -> list[str]:
        """Native and ORM fragments interleaved per type, then the SDL document."""
        combined = []
        for native, orm in zip(self.native_fragments, self.orm_fragments):
            combined.append(native)
            combined.append(orm)
        combined.append(self.sdl_document)
        return combined


def build(model: Mapping[str, Any] | TypeModel, config: CodeGeneratorConfig | None = None) -> BuildResult:
    """
    Generate all fragments for a model.

    Args:
        model: Raw mapping from type name to definition, or a parsed TypeModel
        config: Generation options

    Returns:
        BuildResult holding every fragment

    Raises:
        SchemaError: If the model is invalid; nothing is returned
    """
    config = config or CodeGeneratorConfig()
    type_model = model if isinstance(model, TypeModel) else ModelParser().parse(model)

    # The tree is complete before any fragment is generated
    tree = build_tree(type_model, config.sibling_order)

    registry = InterfaceRegistry()
    typescript = TypeScriptBackend(config)
    mongoose = MongooseBackend(config)
    graphql = GraphQLBackend(config, registry)

    type_names: list[str] = []
    native_fragments: list[str] = []
    orm_fragments: list[str] = []
    sdl_fragments: list[str] = []
    for node in tree.walk():
        definition = type_model[node.name]
        logger.debug("Generating %s", node.name)
        type_names.append(node.name)
        native_fragments.append(typescript.generate(definition))
        orm_fragments.append(mongoose.generate(definition))
        sdl_fragments.append(graphql.generate(definition))

    return BuildResult(
        type_names=tuple(type_names),
        native_fragments=tuple(native_fragments),
        orm_fragments=tuple(orm_fragments),
        sdl_fragments=tuple(sdl_fragments),
        sdl_document=wrap_sdl(sdl_fragments, config),
    )


def wrap_sdl(fragments: list[str], config: CodeGeneratorConfig) -> str:
    """Wrap all SDL fragments in a single exported gql template literal."""
    template = template_environment("output").get_template("sdl_document.ts.jinja2")
    return template.render(export_name=config.sdl_export_name, fragments=fragments)


class PipelineGenerator:
    """Generates the complete TypeScript module for a model."""

    def __init__(self, model: Mapping[str, Any], config: CodeGeneratorConfig | None = None):
        """
        Initialize the generator.

        Args:
            model: Mapping from type name to raw definition
            config: Generation options
        """
        self.model = model
        self.config = config or CodeGeneratorConfig()
        self.env = template_environment("output")

    def generate(self) -> str:
        """Build the model and return the module source."""
        result = build(self.model, self.config)
        code = self.prefix() + "\n\n" + "\n\n".join(result.fragments) + "\n"

        if self.config.formatter.enabled:
            code = PrettierFormatter().format(code, self.config.formatter)
        return code

    def prefix(self) -> str:
        """The do-not-edit banner, generation comment and header lines."""
        template = self.env.get_template("prefix.ts.jinja2")
        return template.render(
            generation_comment=self.generation_comment(),
            header_lines=self.config.header_lines,
        ).rstrip("\n")

    def generation_comment(self) -> str:
        if not self.config.add_generation_comment:
            return ""

        # The CLI module imports this one
        from ..typedefs_to_code import typedefs_to_code as click_command  # noqa

        command_line = reconstruct_command_line(click_command)
        return f"Generated by typedefs_to_code v{__version__} : {command_line}"

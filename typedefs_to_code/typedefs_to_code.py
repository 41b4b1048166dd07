import json
import logging
from pathlib import Path

import click

from .pipeline import (
    CodeGeneratorConfig,
    OutputMode,
    OutputValidationError,
    PipelineGenerator,
    SchemaError,
    SiblingOrder,
    load_model,
    write_output,
)


def load_config(path):
    """Read the generator config file, or return the defaults when no path is given."""
    if path is None:
        return CodeGeneratorConfig()

    try:
        with open(path) as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("expected a JSON object")
        return CodeGeneratorConfig.from_dict(data)
    except (ValueError, TypeError) as e:
        raise click.ClickException(f"Invalid config {Path(path).name}: {e}") from e


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--force", "-f", is_flag=True, default=False, help="Overwrite the output file if it exists")
@click.option(
    "--format",
    "format_output",
    is_flag=True,
    default=False,
    help="Run prettier on the generated module",
)
@click.option(
    "--sibling-order",
    default=None,
    type=click.Choice([order.value for order in SiblingOrder]),
    help="Order of unrelated types sharing a parent",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log every inserted and generated type")
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, type=click.Path(resolve_path=True))
def typedefs_to_code(config, force, format_output, sibling_order, verbose, path, output):
    """Generate TypeScript, Mongoose and GraphQL code from the type model at PATH."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = load_config(config)

    # CLI flags override the config file
    if force:
        config.output.mode = OutputMode.FORCE
    if format_output:
        config.formatter.enabled = True
    if sibling_order is not None:
        config.sibling_order = SiblingOrder(sibling_order)

    try:
        model = load_model(path)
        out = PipelineGenerator(model, config).generate()
        write_output(Path(output), out, config.output)
    except SchemaError as e:
        raise click.ClickException(f"Invalid type model: {e}") from e
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Invalid JSON in type model: {e}") from e
    except (FileExistsError, OutputValidationError) as e:
        raise click.ClickException(str(e)) from e

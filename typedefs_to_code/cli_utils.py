"""
CLI utilities for command line reconstruction and introspection.
"""

from enum import Enum
from pathlib import Path

import click

PROGRAM_NAME = "typedefs_to_code"


def _format_value(param: click.Parameter, value) -> str:
    # File paths are shown by name only so the comment is stable across machines
    if isinstance(param.type, click.Path):
        return Path(str(value)).name
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def reconstruct_command_line(click_command: click.Command, program_name: str = PROGRAM_NAME) -> str:
    """
    Reconstruct command line from current Click context using introspection.

    Args:
        click_command: Click command object for introspection
        program_name: Name shown in place of the executable

    Returns:
        Reconstructed command line string
    """
    try:
        ctx = click.get_current_context()
        cli_args = ctx.params
    except RuntimeError:
        # No active context, return basic command
        return program_name

    if not cli_args:
        return program_name

    arguments = []
    options = []

    for param in click_command.params:
        if param.name not in cli_args:
            continue

        value = cli_args[param.name]
        if value is None or value is False:
            continue

        if isinstance(param, click.Argument):
            arguments.append(_format_value(param, value))
        elif isinstance(param, click.Option):
            if param.is_flag:
                # Flags carry no value
                options.append(param.opts[0])
                continue

            # Skip defaults
            if value == param.default:
                continue

            flag = param.opts[0] if param.opts else f"--{param.name}"
            options.extend([flag, _format_value(param, value)])

    return " ".join([program_name, *arguments, *options])

"""
Utility functions for the type model to code generator.
"""

import json
import re

# Property names that can be written without quotes in TypeScript
_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def js_string(value) -> str:
    """Render a string or list of strings as a JavaScript literal.

    Examples:
        "RED" -> '"RED"'
        ["RED", "GREEN"] -> '["RED", "GREEN"]'
    """
    return json.dumps(value)


def ts_property(name: str) -> str:
    """Quote a property or enum member name unless it is a plain identifier.

    Examples:
        "first_name" -> "first_name"
        "in-progress" -> '"in-progress"'
    """
    if _IDENTIFIER_PATTERN.match(name):
        return name
    return js_string(name)

"""
Jinja2 environment shared by the backends and the output assembler.
"""

from __future__ import annotations

from pathlib import Path

import jinja2

from ..utils import js_string, ts_property

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"


def template_environment(template_lang: str) -> jinja2.Environment:
    """Create an environment loading templates from templates/<template_lang>."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATES_DIR / template_lang)),
        lstrip_blocks=True,
        trim_blocks=True,
        undefined=jinja2.StrictUndefined,
    )
    env.filters["js_string"] = js_string
    env.filters["ts_property"] = ts_property
    return env

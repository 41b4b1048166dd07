"""
Loading of model definition files.

A model is a JSON object mapping type names to definitions. It may be
split across several files in one directory; they are merged in sorted
filename order so the result does not depend on directory listing order.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .errors import InvalidDefinitionError

logger = logging.getLogger(__name__)


def load_model_file(path: Path) -> dict[str, Any]:
    """Load a single JSON model file."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise InvalidDefinitionError(path.name, "a model file must contain a JSON object")
    return data


def load_model(path: str | Path) -> dict[str, Any]:
    """
    Load a model from a JSON file or a directory of JSON files.

    Args:
        path: File or directory path

    Returns:
        Merged mapping from type name to raw definition
    """
    path = Path(path)
    if path.is_file():
        return load_model_file(path)

    model: dict[str, Any] = {}
    sources: dict[str, str] = {}
    for file_path in sorted(path.glob("*.json")):
        for name, definition in load_model_file(file_path).items():
            if name in model:
                logger.warning("%s is defined in %s and %s, using %s", name, sources[name], file_path.name, file_path.name)
            model[name] = definition
            sources[name] = file_path.name
        logger.debug("Loaded %s", file_path)
    return model

"""
Atomic file writer for safe code generation.

Ensures that file writes are atomic so that a failed or interrupted run
never leaves a partially written artifact behind.
"""

from __future__ import annotations

import logging
import tempfile
from collections.abc import Callable
from pathlib import Path

from .config import OutputConfig, OutputMode
from .errors import OutputValidationError

logger = logging.getLogger(__name__)


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(self, validate: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate: Optional validation function for the generated module
        """
        self._validate = validate or self._default_validate

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            OutputValidationError: If validation fails
            OSError: If file operations fail
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)

            if validate:
                self._validate(content)

            temp_path.replace(path)
        except Exception:
            temp_path.unlink(missing_ok=True)
            raise

    def _default_validate(self, content: str) -> None:
        """Basic structural checks on the generated TypeScript module.

        Raises:
            OutputValidationError: If validation fails
        """
        if "export " not in content:
            raise OutputValidationError("Generated module has no exports")

        open_braces = content.count("{")
        close_braces = content.count("}")
        if open_braces != close_braces:
            raise OutputValidationError(f"Generated module has unbalanced braces: {open_braces} open, {close_braces} close")

        if content.count("`") % 2:
            raise OutputValidationError("Generated module has an unterminated template literal")


def write_output(path: Path, content: str, config: OutputConfig, writer: AtomicWriter | None = None) -> None:
    """Write the final artifact according to the output configuration.

    Raises:
        FileExistsError: If the file exists and the mode is not force
    """
    writer = writer or AtomicWriter()
    if config.mode == OutputMode.ERROR_IF_EXISTS and path.exists():
        raise FileExistsError(f"Output file already exists: {path}. Use force mode to overwrite.")

    if config.atomic_write:
        writer.write(path, content)
    else:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    logger.info("Done writing to %s", path)

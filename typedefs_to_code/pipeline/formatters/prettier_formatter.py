"""
Prettier formatter for the generated TypeScript module.
"""

from __future__ import annotations

import logging
import shutil
import subprocess

from ..config import FormatterConfig
from .base import Formatter

logger = logging.getLogger(__name__)


class PrettierFormatter(Formatter):
    """Formatter using the prettier command line tool."""

    def __init__(self, executable: str = "prettier"):
        self.executable = executable
        self._available = None

    def is_available(self) -> bool:
        """Check if prettier is installed."""
        if self._available is None:
            if shutil.which(self.executable) is None:
                self._available = False
            else:
                try:
                    result = subprocess.run(
                        [self.executable, "--version"],
                        capture_output=True,
                        text=True,
                        timeout=10,
                    )
                    self._available = result.returncode == 0
                except (subprocess.SubprocessError, FileNotFoundError):
                    self._available = False
        return self._available

    def format(self, code: str, config: FormatterConfig) -> str:
        """
        Format TypeScript code using prettier.

        Args:
            code: Source code to format
            config: Formatter configuration

        Returns:
            Formatted code, or the original code if prettier is unavailable or fails
        """
        if not self.is_available():
            logger.warning("%s is not available, output left unformatted", self.executable)
            return code

        cmd = [self.executable, "--parser", config.parser]
        if config.print_width:
            cmd.extend(["--print-width", str(config.print_width)])

        try:
            # prettier reads stdin when no file is given
            result = subprocess.run(
                cmd,
                input=code,
                capture_output=True,
                text=True,
                timeout=60,
            )
        except subprocess.SubprocessError as e:
            logger.warning("prettier failed: %s", e)
            return code

        if result.returncode != 0:
            logger.warning("prettier failed: %s", result.stderr.strip())
            return code
        return result.stdout


"""
Registry of emitted GraphQL field lines.

GraphQL SDL has no inheritance, so each type repeats the fields of its
ancestors. The registry keeps the flattened field lines of every type
already emitted during one build.
"""

from __future__ import annotations

from ..errors import RegistryError


class InterfaceRegistry:
    """Write-once mapping from type name to its flattened field lines."""

    def __init__(self):
        self._lines: dict[str, tuple[str, ...]] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._lines

    def register(self, name: str, lines: list[str]) -> None:
        if name in self._lines:
            raise RegistryError(f"Field lines for {name} are already registered")
        self._lines[name] = tuple(lines)

    def lines_for(self, name: str) -> list[str]:
        try:
            return list(self._lines[name])
        except KeyError:
            raise RegistryError(f"Field lines for {name} requested before it was emitted") from None

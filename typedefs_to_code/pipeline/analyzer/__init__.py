"""
Analyzer module.

Contains inheritance resolution and the interface registry used to
flatten inherited fields.
"""

from __future__ import annotations

from .inheritance_tree import InheritanceTree, TreeNode, build_tree
from .registry import InterfaceRegistry

__all__ = [
    "InheritanceTree",
    "TreeNode",
    "build_tree",
    "InterfaceRegistry",
]

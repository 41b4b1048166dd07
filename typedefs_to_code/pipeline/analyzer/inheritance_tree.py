"""
Inheritance tree builder.

Phase 2 of the pipeline: arrange every definition under its parent so
that a pre-order walk emits each parent before its descendants. Parents
may be declared after their children; they are resolved on demand.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from ..config import SiblingOrder
from ..errors import CyclicInheritanceError, MissingParentError
from ..model_ast.nodes import RecordDefinition, TypeModel

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class TreeNode:
    """A type in the inheritance tree. The root has an empty name."""

    name: str = ""
    children: list[TreeNode] = field(default_factory=list)
    parent: TreeNode | None = field(default=None, repr=False)

    @property
    def is_root(self) -> bool:
        return self.parent is None and not self.name


class InheritanceTree:
    """Tree of `extends` relationships under a synthetic empty root."""

    def __init__(self, model: TypeModel, sibling_order: SiblingOrder = SiblingOrder.DISCOVERY):
        """
        Initialize an empty tree.

        Args:
            model: Parsed type model used to look up parents
            sibling_order: Order in which walk() visits siblings
        """
        self.model = model
        self.sibling_order = sibling_order
        self.root = TreeNode()
        self._index: dict[str, TreeNode] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._index

    def __len__(self) -> int:
        return len(self._index)

    def find(self, name: str) -> TreeNode | None:
        return self._index.get(name)

    def insert(self, name: str) -> TreeNode:
        """
        Insert a type, resolving any parents that are not in the tree yet.

        Inserting a name that is already present is a no-op. The tree is
        left unchanged when an error is raised.

        Raises:
            MissingParentError: If a parent in the chain is not in the model
            CyclicInheritanceError: If the chain revisits a type
        """
        if name in self._index:
            return self._index[name]

        # Walk up until we hit a known node or a root-level type
        chain: list[str] = []
        resolving: set[str] = set()
        current = name
        while current not in self._index:
            if current in resolving:
                raise CyclicInheritanceError(current, chain + [current])
            resolving.add(current)
            chain.append(current)

            parent_name = self._parent_name(current)
            if parent_name is None:
                break
            if parent_name not in self.model:
                raise MissingParentError(current, parent_name)
            current = parent_name

        # Attach top-down so each parent exists before its child
        for child_name in reversed(chain):
            parent_name = self._parent_name(child_name)
            parent_node = self.root if parent_name is None else self._index[parent_name]
            node = TreeNode(name=child_name, parent=parent_node)
            parent_node.children.append(node)
            self._index[child_name] = node
            logger.debug("Inserted %s under %s", child_name, parent_name or "<root>")

        return self._index[name]

    def _parent_name(self, name: str) -> str | None:
        definition = self.model[name]
        if isinstance(definition, RecordDefinition):
            return definition.extends
        return None

    def walk(self) -> Iterator[TreeNode]:
        """Yield every type in pre-order, parents before children. The root is skipped."""
        stack = list(reversed(self._ordered(self.root.children)))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(self._ordered(node.children)))

    def _ordered(self, children: list[TreeNode]) -> list[TreeNode]:
        if self.sibling_order == SiblingOrder.NAME:
            return sorted(children, key=lambda node: node.name)
        return children

    def ancestors(self, name: str) -> list[str]:
        """Names of the ancestors of a type, nearest first."""
        node = self._index[name].parent
        names = []
        while node is not None and not node.is_root:
            names.append(node.name)
            node = node.parent
        return names


def build_tree(model: TypeModel, sibling_order: SiblingOrder = SiblingOrder.DISCOVERY) -> InheritanceTree:
    """Build the complete inheritance tree for a model."""
    tree = InheritanceTree(model, sibling_order)
    for name in model.names():
        tree.insert(name)
    return tree

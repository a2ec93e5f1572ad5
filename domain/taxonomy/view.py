"""Expand/collapse state, selection and keyboard navigation over a forest."""

import logging
from typing import NamedTuple

from domain.schemas import Forest, NodePath, TreeNode
from domain.taxonomy.tree import iter_paths

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10


class VisibleRow(NamedTuple):
    """One row of the flattened, open-set-respecting traversal."""

    path: NodePath
    node: TreeNode
    depth: int
    is_open: bool


class TreeView:
    """
    Owns the open set and selection path for one forest.

    Every navigation operation and both scroll values (visible_count,
    selected_index) are computed from `visible_rows`, a depth-first pre-order
    walk that only descends into nodes whose path is open.
    """

    def __init__(self, forest: Forest = (), *, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        if page_size <= 0:
            raise ValueError("page_size must be a positive integer")
        self.page_size = page_size
        self.forest: Forest = ()
        self.open: set[NodePath] = set()
        self.selection: NodePath | None = None
        self.reset(forest)

    # ----- Rebuild -----

    def reset(self, forest: Forest, *, expand_all: bool = False) -> None:
        """Replace the forest, clear open set and selection, select the first root."""
        self.forest = forest
        # Leaf paths are left out; opening a leaf has no visible effect
        self.open = set(iter_paths(forest, branches_only=True)) if expand_all else set()
        self.selection = (forest[0].id,) if forest else None
        logger.debug(
            "TreeView reset: roots=%d expanded=%d selection=%s",
            len(forest),
            len(self.open),
            self.selection,
        )

    # ----- Flattening -----

    def visible_rows(self) -> list[VisibleRow]:
        rows: list[VisibleRow] = []
        stack: list[tuple[TreeNode, NodePath]] = [(n, (n.id,)) for n in reversed(self.forest)]
        while stack:
            node, path = stack.pop()
            is_open = path in self.open
            rows.append(VisibleRow(path, node, len(path) - 1, is_open))
            if is_open:
                stack.extend((c, path + (c.id,)) for c in reversed(node.children))
        return rows

    def visible_count(self) -> int:
        return len(self.visible_rows())

    def selected_index(self) -> int | None:
        """0-based position of the selection in `visible_rows`, or None if nothing is selected."""
        if self.selection is None:
            return None
        for i, row in enumerate(self.visible_rows()):
            if row.path == self.selection:
                return i
        return None

    def selected_node(self) -> TreeNode | None:
        if self.selection is None:
            return None
        nodes = self.forest
        node: TreeNode | None = None
        for node_id in self.selection:
            node = next((n for n in nodes if n.id == node_id), None)
            if node is None:
                return None
            nodes = node.children
        return node

    # ----- Navigation -----

    def _step(self, delta: int) -> None:
        rows = self.visible_rows()
        idx = self.selected_index()
        if idx is None:
            if rows:
                self.selection = rows[0].path
            return
        target = max(0, min(idx + delta, len(rows) - 1))
        self.selection = rows[target].path

    def move_down(self) -> None:
        self._step(1)

    def move_up(self) -> None:
        self._step(-1)

    def page_down(self) -> None:
        self._step(self.page_size)

    def page_up(self) -> None:
        self._step(-self.page_size)

    def move_left(self) -> None:
        if self.selection is None:
            return
        if self.selection in self.open:
            self.open.discard(self.selection)
        elif len(self.selection) > 1:
            self.selection = self.selection[:-1]

    def move_right(self) -> None:
        node = self.selected_node()
        if node is not None and node.has_children:
            self.open.add(self.selection)  # ty: ignore

    def toggle(self) -> None:
        if self.selection is None:
            return
        if self.selection in self.open:
            self.open.discard(self.selection)
        else:
            self.open.add(self.selection)

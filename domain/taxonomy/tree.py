"""Assemble a forest of TreeNodes from flat parent-linked records."""

from collections import defaultdict
from collections.abc import Sequence

from domain.schemas import Forest, TaxonomyRecord, TreeNode


def _is_root(record: TaxonomyRecord, by_id: dict[str, TaxonomyRecord]) -> bool:
    parent = record.parent_id
    return parent is None or parent == record.id or parent not in by_id


def _assemble(
    root: TaxonomyRecord,
    children: dict[str, list[TaxonomyRecord]],
    placed: set[str],
) -> TreeNode:
    """Depth-first expansion of one root with an explicit stack.

    Nodes are immutable, so each one is created once all of its children are
    built. Ids already in `placed` are skipped, which cuts any parent cycle.
    """
    placed.add(root.id)
    stack: list[tuple[TaxonomyRecord, int, list[TreeNode]]] = [(root, 0, [])]

    while True:
        record, pos, built = stack[-1]
        kids = children.get(record.id, ())
        if pos < len(kids):
            stack[-1] = (record, pos + 1, built)
            child = kids[pos]
            if child.id in placed:
                continue
            placed.add(child.id)
            stack.append((child, 0, []))
            continue

        stack.pop()
        node = TreeNode.from_record(record, built)
        if not stack:
            return node
        stack[-1][2].append(node)


def build_forest(records: Sequence[TaxonomyRecord]) -> Forest:
    """
    Build an ordered forest from flat records.

    Roots are records with no parent, a parent equal to their own id, or a
    parent that is not among `records`. Child order follows input order.
    Records only reachable through a parent cycle are emitted as extra roots
    in input order, so every distinct id ends up in exactly one node.

    Args:
        records: Records in source order (any subset of a category)

    Returns:
        Tuple of root TreeNodes
    """
    by_id: dict[str, TaxonomyRecord] = {}
    for record in records:
        by_id.setdefault(record.id, record)

    roots: list[TaxonomyRecord] = []
    children: dict[str, list[TaxonomyRecord]] = defaultdict(list)
    for record in records:
        if by_id[record.id] is not record:
            continue  # duplicate id, first wins
        if _is_root(record, by_id):
            roots.append(record)
        else:
            children[record.parent_id].append(record)  # ty: ignore

    placed: set[str] = set()
    forest = [_assemble(root, children, placed) for root in roots]

    if len(placed) < len(by_id):
        for record in records:
            if record.id not in placed:
                forest.append(_assemble(by_id[record.id], children, placed))

    return tuple(forest)


def iter_paths(forest: Forest, *, branches_only: bool = False) -> list[tuple[str, ...]]:
    """Return the path of every node in pre-order (optionally only nodes with children)."""
    paths: list[tuple[str, ...]] = []
    stack: list[tuple[TreeNode, tuple[str, ...]]] = [(n, (n.id,)) for n in reversed(forest)]
    while stack:
        node, path = stack.pop()
        if node.children or not branches_only:
            paths.append(path)
        stack.extend((c, path + (c.id,)) for c in reversed(node.children))
    return paths

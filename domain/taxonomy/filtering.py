"""Record filtering: free-text query with hierarchy context, and CLI predicates."""

from collections import defaultdict
from collections.abc import Sequence
from enum import Enum

from pydantic import BaseModel

from domain.schemas import TaxonomyRecord


def matches_query(record: TaxonomyRecord, query_lower: str) -> bool:
    """
    Case-insensitive match of an already-lowercased query against a record.

    Id and parent id must be equal to the query; name, tiers and extension
    only need to contain it.
    """
    if record.id.lower() == query_lower:
        return True
    if record.parent_id is not None and record.parent_id.lower() == query_lower:
        return True
    if query_lower in record.name.lower():
        return True
    if any(query_lower in tier.lower() for tier in record.tiers):
        return True
    return record.extension is not None and query_lower in record.extension.lower()


def _ancestor_ids(matches: list[TaxonomyRecord], by_id: dict[str, TaxonomyRecord]) -> set[str]:
    found: set[str] = set()
    for record in matches:
        seen = {record.id}
        current = record.parent_id
        while current is not None and current not in seen:
            seen.add(current)
            found.add(current)
            parent = by_id.get(current)
            if parent is None:
                break
            current = parent.parent_id
    return found


def _descendant_ids(matches: list[TaxonomyRecord], children: dict[str, list[str]]) -> set[str]:
    found: set[str] = set()
    stack = [r.id for r in matches]
    visited = set(stack)
    while stack:
        for child_id in children.get(stack.pop(), ()):
            if child_id not in visited:
                visited.add(child_id)
                found.add(child_id)
                stack.append(child_id)
    return found


def filter_records(records: Sequence[TaxonomyRecord], query: str) -> Sequence[TaxonomyRecord]:
    """
    Reduce records to query matches plus their ancestors and descendants.

    Examples:
        A (root) <- B <- C:
        filter_records(records, "C") keeps A, B, C (C plus its ancestor chain)
        filter_records(records, "A") keeps A, B, C (A plus its whole subtree)

    Args:
        records: Records in source order
        query: Raw filter text; an empty string disables filtering

    Returns:
        The input unchanged for an empty query, otherwise an order-preserving
        sub-list of `records`
    """
    if not query:
        return records

    q = query.lower()
    matches = [r for r in records if matches_query(r, q)]
    if not matches:
        return []

    by_id: dict[str, TaxonomyRecord] = {}
    children: dict[str, list[str]] = defaultdict(list)
    for record in records:
        by_id.setdefault(record.id, record)
        if record.parent_id is not None and record.parent_id != record.id:
            children[record.parent_id].append(record.id)

    included = {r.id for r in matches}
    included |= _ancestor_ids(matches, by_id)
    included |= _descendant_ids(matches, children)

    return [r for r in records if r.id in included]


class FilterKind(str, Enum):
    """Filter selectors of the non-interactive listing."""

    ID = "id"
    PARENT = "parent"
    NAME = "name"


class RecordFilter(BaseModel):
    """A single listing predicate: exact id, parent-or-self, or name substring."""

    kind: FilterKind
    value: str

    def matches(self, record: TaxonomyRecord) -> bool:
        if self.kind is FilterKind.ID:
            return record.id == self.value
        if self.kind is FilterKind.PARENT:
            return record.parent_id == self.value or record.id == self.value
        return self.value.lower() in record.name.lower()

    def apply(self, records: Sequence[TaxonomyRecord]) -> list[TaxonomyRecord]:
        return [r for r in records if self.matches(r)]

"""Read-only per-category record storage."""

from collections.abc import Iterable, Iterator

from domain.schemas import Category, TaxonomyRecord


class RecordStore:
    """Ordered, immutable list of one category's records with lookup by id."""

    def __init__(self, category: Category, records: Iterable[TaxonomyRecord]) -> None:
        self.category = category
        self._records: tuple[TaxonomyRecord, ...] = tuple(records)
        self._by_id: dict[str, TaxonomyRecord] = {}
        for record in self._records:
            if record.category is not category:
                raise ValueError(
                    f"Record {record.id!r} belongs to {record.category.value}, not {category.value}"
                )
            if record.id in self._by_id:
                raise ValueError(f"Duplicate id {record.id!r} in {category.value} taxonomy")
            self._by_id[record.id] = record

    @property
    def records(self) -> tuple[TaxonomyRecord, ...]:
        return self._records

    def get(self, record_id: str) -> TaxonomyRecord | None:
        return self._by_id.get(record_id)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._by_id

    def __iter__(self) -> Iterator[TaxonomyRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"RecordStore(category={self.category.value!r}, records={len(self._records)})"

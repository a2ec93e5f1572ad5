"""Pydantic models for taxonomy records and tree nodes."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Category(str, Enum):
    """The three bundled IAB taxonomies."""

    PRODUCT = "product"
    CONTENT = "content"
    AUDIENCE = "audience"

    @property
    def tier_count(self) -> int:
        return _TIER_COUNTS[self]

    @property
    def has_extension(self) -> bool:
        return self is not Category.PRODUCT

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


_TIER_COUNTS = {
    Category.PRODUCT: 3,
    Category.CONTENT: 4,
    Category.AUDIENCE: 6,
}

# Tuple of ids from a root down to a node
NodePath = tuple[str, ...]


def _blank_to_none(value: object) -> str | None:
    if value is None:
        return None
    s = str(value).strip()
    return s or None


class TaxonomyRecord(BaseModel):
    """One flat row of a taxonomy, linked to its parent by id."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Unique ID within the category.")
    parent_id: str | None = Field(
        default=None,
        description="Parent ID. May be absent, equal to id, dangling, or part of a cycle.",
    )
    name: str = Field(..., min_length=1)
    tiers: tuple[str, ...] = Field(default_factory=tuple, description="Tier names, empty entries dropped.")
    extension: str | None = None
    category: Category

    @field_validator("id", "name", mode="before")
    @classmethod
    def _strip(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    @field_validator("parent_id", "extension", mode="before")
    @classmethod
    def _optional(cls, v: object) -> str | None:
        return _blank_to_none(v)

    @field_validator("tiers", mode="before")
    @classmethod
    def _drop_empty_tiers(cls, v: object) -> tuple[str, ...]:
        if v is None:
            return ()
        return tuple(s for s in (_blank_to_none(t) for t in v) if s is not None)

    @property
    def label(self) -> str:
        return f"{self.id}  {self.name}"


class TreeNode(BaseModel):
    """Immutable tree node built from a record; owns its children."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    children: tuple["TreeNode", ...] = ()

    @classmethod
    def from_record(cls, record: TaxonomyRecord, children: list["TreeNode"] | None = None) -> "TreeNode":
        return cls(id=record.id, label=record.label, children=tuple(children or ()))

    @property
    def has_children(self) -> bool:
        return bool(self.children)


Forest = tuple[TreeNode, ...]

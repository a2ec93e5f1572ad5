"""Configuration models (Pydantic classes)."""

from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from domain.schemas import Category
from domain.taxonomy.view import DEFAULT_PAGE_SIZE
from infrastructure.constants import DATA_DIR


class CategorySourceConfig(BaseModel):
    """Where one category's TSV lives and how to read it."""

    file: str = Field(..., min_length=1, description="File name relative to data_dir.")
    skip_lines: int = Field(
        default=0,
        ge=0,
        description="Lines to skip before the column header line (e.g. a section-header line).",
    )


class BrowserConfig(BaseModel):
    """
    Runtime configuration.
    - Loaded from browser.yaml
    - data_dir may be replaced by the IAB_TAXONOMY_DATA_DIR environment variable
    - Consumed by the record source, the CLI listing and the interactive browser
    """

    data_dir: Path = Field(default_factory=lambda: DATA_DIR, description="Directory holding the taxonomy TSVs.")
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, gt=0, description="Rows moved by page up/down.")
    start_category: Category = Field(default=Category.PRODUCT, description="Category shown first by --browse.")
    categories: dict[Category, CategorySourceConfig]

    @model_validator(mode="after")
    def _validate(self) -> "BrowserConfig":
        missing = [c.value for c in Category if c not in self.categories]
        if missing:
            raise ValueError(f"categories missing source config for: {', '.join(missing)}")
        return self

    def source_path(self, category: Category) -> Path:
        return self.data_dir / self.categories[category].file

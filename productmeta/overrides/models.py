"""Override record types.

Override files are YAML lists of records:

    - type: PRODUCT_BASE_PATH
      details:
        basepathidentifier: os_config
    - type: PRODUCT_TITLE
      details:
        title: OS Config

Records with a ``field`` target a single resource field and are ignored by
product metadata; only field-less records are product overrides.
"""

from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class OverrideKind(str, Enum):
    """Product-level override types."""

    BASE_PATH = "PRODUCT_BASE_PATH"
    TITLE = "PRODUCT_TITLE"
    DOCS_SECTION = "PRODUCT_DOCS_SECTION"

    def __str__(self) -> str:
        return self.value


class OverrideRecord(BaseModel):
    """A single hand-authored override as it appears in the file."""

    model_config = ConfigDict(extra="ignore")

    type: str = Field(description="Override type tag, e.g. PRODUCT_TITLE")
    field: str | None = Field(
        default=None, description="Resource field the override applies to"
    )
    details: Any = Field(
        default_factory=dict,
        description="Override payload, decoded only when a product override is looked up",
    )

    @field_validator("details", mode="before")
    @classmethod
    def empty_details(cls, v: Any) -> Any:
        # A bare "details:" key parses as null
        if v is None:
            return {}
        return v

    @property
    def is_product_override(self) -> bool:
        return not self.field


class ProductBasePathDetails(BaseModel):
    """Details for PRODUCT_BASE_PATH overrides."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    base_path_identifier: str = Field(
        default="",
        validation_alias=AliasChoices("basepathidentifier", "base_path_identifier"),
    )
    skip: bool = False


class ProductTitleDetails(BaseModel):
    """Details for PRODUCT_TITLE overrides."""

    model_config = ConfigDict(extra="forbid")

    title: str | None = None


class ProductDocsSectionDetails(BaseModel):
    """Details for PRODUCT_DOCS_SECTION overrides."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    docs_section: str = Field(
        validation_alias=AliasChoices("docssection", "docs_section"),
    )


class Overrides(BaseModel):
    """Every override record declared for one package path."""

    records: list[OverrideRecord] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)

    def product_overrides(self) -> list[OverrideRecord]:
        return [r for r in self.records if r.is_product_override]

    def find(self, kind: OverrideKind) -> OverrideRecord | None:
        for record in self.product_overrides():
            if record.type == kind.value:
                return record
        return None

    def duplicate_kinds(self) -> list[str]:
        seen: set[str] = set()
        duplicates: list[str] = []
        for record in self.product_overrides():
            if record.type in seen and record.type not in duplicates:
                duplicates.append(record.type)
            seen.add(record.type)
        return duplicates

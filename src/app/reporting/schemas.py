"""Typed models for audit reports and their rendered categories."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class ScoreDisplayMode(str, Enum):
    """How an audit result should be presented."""

    BINARY = "binary"
    NUMERIC = "numeric"
    MANUAL = "manual"
    INFORMATIVE = "informative"
    NOT_APPLICABLE = "notApplicable"
    ERROR = "error"


class AuditResult(BaseModel):
    """Outcome of a single audit as recorded in the report."""

    model_config = ConfigDict(extra="ignore")

    id: str
    title: str = ""
    description: str = ""
    score: float | None = Field(default=None, description="Normalised score between 0 and 1")
    # Unknown modes are kept verbatim and treated as non-manual.
    scoreDisplayMode: ScoreDisplayMode | str = ScoreDisplayMode.BINARY
    displayValue: str | None = None
    explanation: str | None = None
    errorMessage: str | None = None
    details: dict[str, Any] | None = None


class AuditRef(BaseModel):
    """Reference from a category to one of the report's audits."""

    model_config = ConfigDict(extra="ignore")

    id: str
    weight: float = 0
    group: str | None = Field(default=None, description="Key into the report's category groups")
    result: AuditResult | None = Field(
        default=None,
        description="Audit outcome attached when the report is prepared",
    )


class Category(BaseModel):
    """Named, ordered set of audit references."""

    model_config = ConfigDict(extra="ignore")

    id: str
    title: str
    description: str | None = None
    manualDescription: str | None = None
    score: float | None = None
    auditRefs: list[AuditRef] = Field(default_factory=list)


class GroupDefinition(BaseModel):
    """Title and description for a group of audits within a category."""

    model_config = ConfigDict(extra="ignore")

    title: str
    description: str | None = None


class Report(BaseModel):
    """Audit report as produced by the collecting tool."""

    model_config = ConfigDict(extra="ignore")

    lighthouseVersion: str | None = None
    requestedUrl: str | None = None
    finalUrl: str | None = None
    fetchTime: str | None = None
    audits: dict[str, AuditResult] = Field(default_factory=dict)
    categories: dict[str, Category] = Field(default_factory=dict)
    categoryGroups: dict[str, GroupDefinition] = Field(default_factory=dict)

    @property
    def reportCategories(self) -> list[Category]:
        """Categories in report order."""

        return list(self.categories.values())


class GroupSection(BaseModel):
    """Rendered container for the non-manual audits sharing a group id."""

    kind: Literal["group"] = "group"
    groupId: str
    title: str
    description: str | None = None
    passed: bool = False
    auditRefs: list[AuditRef]


class ManualClumpSection(BaseModel):
    """Rendered clump holding every audit that needs manual verification."""

    kind: Literal["clump"] = "clump"
    clumpId: Literal["manual"] = "manual"
    title: str
    description: str | None = None
    auditRefs: list[AuditRef]


Section = Annotated[Union[GroupSection, ManualClumpSection], Field(discriminator="kind")]


class RenderedCategory(BaseModel):
    """Ordered sections produced for one category."""

    categoryId: str
    title: str
    description: str | None = None
    score: float | None = None
    sections: list[Section] = Field(default_factory=list)

    @property
    def group_sections(self) -> list[GroupSection]:
        return [item for item in self.sections if isinstance(item, GroupSection)]

    @property
    def manual_clump(self) -> ManualClumpSection | None:
        for item in self.sections:
            if isinstance(item, ManualClumpSection):
                return item
        return None


__all__ = [
    "AuditRef",
    "AuditResult",
    "Category",
    "GroupDefinition",
    "GroupSection",
    "ManualClumpSection",
    "RenderedCategory",
    "Report",
    "ScoreDisplayMode",
    "Section",
]

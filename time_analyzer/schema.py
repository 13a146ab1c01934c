"""Core data schema for task log analysis."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class DurationUnit(str, Enum):
    HOUR = "hour"
    MINUTE = "minute"


class Category(str, Enum):
    """Closed set of activity categories, in rule-table order."""

    MEETINGS = "Meetings & Calls"
    RESEARCH = "Research & Documentation"
    DEVELOPMENT = "Development & Engineering"
    PLANNING = "Planning & Strategy"
    COMMUNICATION = "Communication & Coordination"
    DESIGN = "Design & Creative"
    MARKETING = "Marketing & Content"
    PROJECT_MANAGEMENT = "Project Management"
    CUSTOMER = "Customer & Support"
    ADMINISTRATION = "Administration & Ops"
    LEARNING = "Learning & Growth"
    MISCELLANEOUS = "Miscellaneous"


class ErrorKind(str, Enum):
    NO_VALID_ENTRIES = "no_valid_entries"
    PROCESSING_ERROR = "processing_error"


@dataclass(frozen=True)
class TimeEntry:
    """One task line with its duration tag resolved to minutes."""

    minutes: float
    description: str
    source_value: float
    source_unit: DurationUnit


@dataclass(frozen=True)
class ClassifiedEntry(TimeEntry):
    category: Category = Category.MISCELLANEOUS


@dataclass
class CategoryBucket:
    category: Category
    total_minutes: float = 0.0
    entries: list[ClassifiedEntry] = field(default_factory=list)


@dataclass(frozen=True)
class DistributionRecord:
    """One category's share of the grand total."""

    category: Category
    percentage: float
    hours: float

    def to_dict(self) -> dict:
        return {
            "category": self.category.value,
            "percentage": self.percentage,
            "hours": self.hours,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of one pipeline run: either records or a named failure."""

    records: list[DistributionRecord] = field(default_factory=list)
    error: Optional[ErrorKind] = None
    message: Optional[str] = None
    lines_read: int = 0
    entries_parsed: int = 0
    total_minutes: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        return {
            "ok": self.ok,
            "error": self.error.value if self.error else None,
            "message": self.message,
            "lines_read": self.lines_read,
            "entries_parsed": self.entries_parsed,
            "total_minutes": self.total_minutes,
            "distribution": [record.to_dict() for record in self.records],
        }

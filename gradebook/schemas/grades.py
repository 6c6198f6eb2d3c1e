"""
Pydantic schemas for course grade calculation.

Documents exported by the storage layer use camelCase keys; both those and
the snake_case field names validate. Malformed numbers are read as absent so
that a half-filled gradebook still produces a grade.
"""

import math
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def as_number(value: Any) -> Optional[float]:
    """Return `value` as a float, or None if it is not a finite real number."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    return float(value)


def _as_id(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


class _GradeModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# ---- Assignment ----
class Assignment(_GradeModel):
    id: Optional[str] = None
    name: Optional[str] = None
    score: Optional[float] = None
    total_score: Optional[float] = Field(default=None, alias="totalScore")
    weight: Optional[float] = None  # only used when ungrouped
    is_dropped: bool = Field(default=False, alias="isDropped")
    is_extra_credit: bool = Field(default=False, alias="isExtraCredit")
    group_id: Optional[str] = Field(default=None, alias="groupId")
    relative_weight_in_group: Optional[float] = Field(
        default=None, alias="relativeWeightInGroup"
    )

    @field_validator(
        "score", "total_score", "weight", "relative_weight_in_group", mode="before"
    )
    @classmethod
    def _numeric_or_none(cls, value: Any) -> Optional[float]:
        return as_number(value)

    @field_validator("is_dropped", "is_extra_credit", mode="before")
    @classmethod
    def _flag(cls, value: Any) -> bool:
        return bool(value)

    @field_validator("id", "group_id", mode="before")
    @classmethod
    def _identifier(cls, value: Any) -> Optional[str]:
        return _as_id(value)


# ---- Assignment Group ----
class AssignmentGroup(_GradeModel):
    id: str
    name: Optional[str] = None
    weight: Optional[float] = None  # percentage of the course grade

    @field_validator("weight", mode="before")
    @classmethod
    def _numeric_or_none(cls, value: Any) -> Optional[float]:
        return as_number(value)

    @field_validator("id", mode="before")
    @classmethod
    def _identifier(cls, value: Any) -> Optional[str]:
        # "" is kept: it never matches a member, since blank group_id means ungrouped
        return value if value is None else str(value)


# ---- Grade Cutoff ----
class GradeCutoff(_GradeModel):
    id: Optional[str] = None
    grade: Optional[str] = None
    min_percentage: Optional[float] = Field(default=None, alias="minPercentage")

    @field_validator("min_percentage", mode="before")
    @classmethod
    def _numeric_or_none(cls, value: Any) -> Optional[float]:
        return as_number(value)

    @field_validator("grade", mode="before")
    @classmethod
    def _label(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None

    @field_validator("id", mode="before")
    @classmethod
    def _identifier(cls, value: Any) -> Optional[str]:
        return _as_id(value)


# ---- Course snapshot / summary ----
class CourseGradeInput(_GradeModel):
    assignments: List[Assignment] = []
    groups: List[AssignmentGroup] = []
    grade_cutoffs: List[GradeCutoff] = Field(default=[], alias="gradeCutoffs")

    @field_validator("assignments", "groups", "grade_cutoffs", mode="before")
    @classmethod
    def _missing_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class CourseGradeSummary(BaseModel):
    percentage: Optional[float] = None
    letter: str
    display_percentage: str

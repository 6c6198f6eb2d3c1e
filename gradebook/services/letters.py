"""
Letter grades from percentage cutoffs.

Cutoffs are inclusive lower bounds evaluated from the highest
`min_percentage` down. Callers may pass them in any order.
"""

import logging
from typing import Iterable, List, Optional

from gradebook.core.config import settings
from gradebook.core.exceptions import InvalidGradeCutoffs
from gradebook.schemas.grades import GradeCutoff

logger = logging.getLogger(__name__)

DEFAULT_GRADE_CUTOFFS = (
    GradeCutoff(id="cutoff-a", grade="A", min_percentage=90),
    GradeCutoff(id="cutoff-b", grade="B", min_percentage=80),
    GradeCutoff(id="cutoff-c", grade="C", min_percentage=70),
    GradeCutoff(id="cutoff-d", grade="D", min_percentage=60),
    GradeCutoff(id="cutoff-f", grade="F", min_percentage=0),
)


def default_grade_cutoffs() -> List[GradeCutoff]:
    """Cutoffs a new course starts with."""
    return [c.model_copy() for c in DEFAULT_GRADE_CUTOFFS]


def sort_grade_cutoffs(cutoffs: Iterable[GradeCutoff]) -> List[GradeCutoff]:
    # sorted() is stable, so cutoffs sharing a minimum keep their input order
    return sorted(cutoffs, key=lambda c: c.min_percentage, reverse=True)


def letter_grade(percentage: Optional[float], cutoffs: Optional[Iterable[GradeCutoff]]) -> str:
    """
    Map a percentage to a letter grade.

    An undetermined percentage (None) gives the ungraded sentinel. Below
    every cutoff, the grade of a cutoff at or under 0% is used if there is
    one, otherwise the fallback letter.
    """
    if percentage is None:
        return settings.UNGRADED_LETTER

    usable = [
        c for c in (cutoffs or [])
        if c.min_percentage is not None and isinstance(c.grade, str)
    ]
    ordered = sort_grade_cutoffs(usable)

    for cutoff in ordered:
        if percentage >= cutoff.min_percentage:
            return cutoff.grade

    floor = next((c for c in ordered if c.min_percentage <= 0), None)
    if floor is not None and floor.grade:
        return floor.grade

    logger.debug("No cutoff matches %.2f%%; using fallback letter", percentage)
    return settings.FALLBACK_LETTER


def validate_grade_cutoffs(cutoffs: Iterable[GradeCutoff]) -> List[GradeCutoff]:
    """
    Check a set of edited cutoffs before they are saved.

    Grade labels are stripped and upper-cased. Every cutoff needs a label and
    a minimum between 0 and 100. Returns the normalized cutoffs sorted from
    highest to lowest, or raises InvalidGradeCutoffs listing each problem.
    """
    normalized = []
    errors = []

    for index, cutoff in enumerate(cutoffs):
        grade = (cutoff.grade or "").strip().upper()
        minimum = cutoff.min_percentage

        if not grade:
            errors.append({"index": index, "grade": cutoff.grade, "reason": "missing grade letter"})
        if minimum is None or not 0 <= minimum <= 100:
            errors.append({
                "index": index,
                "grade": grade,
                "reason": "minimum percentage must be between 0 and 100",
            })
        normalized.append(cutoff.model_copy(update={"grade": grade}))

    if errors:
        raise InvalidGradeCutoffs(errors)

    return sort_grade_cutoffs(normalized)

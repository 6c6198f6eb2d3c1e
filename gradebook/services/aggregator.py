"""
Overall course percentage.
"""

import logging
from typing import List, NamedTuple, Optional

from gradebook.schemas.grades import Assignment, AssignmentGroup
from gradebook.services.weights import effective_weight

logger = logging.getLogger(__name__)


class Contribution(NamedTuple):
    points_obtained: float
    points_total: float


NO_CONTRIBUTION = Contribution(0, 0)


def assignment_percentage(assignment: Assignment) -> Optional[float]:
    """Score as a fraction of the total, or None when it cannot be computed."""
    if assignment.score is None or assignment.total_score is None:
        return None
    if assignment.total_score == 0:
        return None
    return assignment.score / assignment.total_score


def assignment_contribution(assignment: Assignment, weight: Optional[float]) -> Contribution:
    """
    Weighted points an assignment adds to the course grade.

    Extra credit adds to the points obtained but never to the points total,
    so it can only raise the grade.
    """
    percentage = assignment_percentage(assignment)
    if percentage is None or weight is None or weight <= 0:
        return NO_CONTRIBUTION

    return Contribution(
        points_obtained=percentage * weight,
        points_total=0 if assignment.is_extra_credit else weight,
    )


def overall_percentage(
    all_assignments: List[Assignment], groups: List[AssignmentGroup]
) -> Optional[float]:
    """
    Weighted overall percentage (0-100, unbounded above) for a course.

    Returns None while there is no graded, positively weighted work, which
    is distinct from a grade of 0%.
    """
    total_obtained = 0.0
    total_weight = 0.0

    for assignment in all_assignments:
        if assignment.is_dropped:
            continue
        # Always recomputed against the full list: siblings change group shares.
        weight = effective_weight(assignment, all_assignments, groups) or 0
        contribution = assignment_contribution(assignment, weight)
        total_obtained += contribution.points_obtained
        total_weight += contribution.points_total

    if total_weight == 0:
        logger.debug("No graded, weighted assignments; overall grade undetermined")
        return None

    return max(0.0, total_obtained / total_weight * 100)

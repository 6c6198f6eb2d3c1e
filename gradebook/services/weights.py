"""
Effective weight resolution.

An assignment's effective weight is the share of the course grade it is
worth right now. It is derived from the current assignment and group lists
on every call and never stored, since adding, dropping or re-weighting a
sibling changes it.
"""

import logging
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from gradebook.core.exceptions import InvalidAssignmentGroup
from gradebook.schemas.grades import Assignment, AssignmentGroup

logger = logging.getLogger(__name__)


class GroupWeightingPolicy(str, Enum):
    EQUAL = "equal"    # group weight split evenly across members
    MANUAL = "manual"  # split in proportion to relative_weight_in_group


def _positive(value: Optional[float]) -> bool:
    return value is not None and value > 0


def find_group(
    group_id: Optional[str], groups: Iterable[AssignmentGroup]
) -> Optional[AssignmentGroup]:
    for group in groups:
        if group.id == group_id:
            return group
    return None


def group_members(group_id: str, all_assignments: Iterable[Assignment]) -> List[Assignment]:
    """Non-dropped assignments belonging to the group."""
    return [
        a for a in all_assignments
        if a.group_id == group_id and not a.is_dropped
    ]


def group_policy(members: Iterable[Assignment]) -> GroupWeightingPolicy:
    """A group is manually weighted as soon as any member has a positive relative weight."""
    if any(_positive(a.relative_weight_in_group) for a in members):
        return GroupWeightingPolicy.MANUAL
    return GroupWeightingPolicy.EQUAL


def _share_of_group(
    assignment: Assignment,
    group: AssignmentGroup,
    members: List[Assignment],
    policy: GroupWeightingPolicy,
) -> float:
    if policy is GroupWeightingPolicy.MANUAL:
        total_relative = sum(
            a.relative_weight_in_group for a in members
            if _positive(a.relative_weight_in_group)
        )
        if total_relative == 0:
            return 0
        own = assignment.relative_weight_in_group or 0
        return group.weight * own / total_relative

    return group.weight / len(members)


def effective_weight(
    assignment: Assignment,
    all_assignments: Iterable[Assignment],
    groups: Iterable[AssignmentGroup],
) -> Optional[float]:
    """
    Resolve the weight `assignment` contributes to the course grade.

    Ungrouped assignments use their own `weight` (None when it is unset).
    Grouped assignments receive a share of the group weight, split equally
    or by relative weight depending on the group's policy. Dropped
    assignments, unknown groups and groups without a positive weight yield 0.
    """
    if assignment.is_dropped:
        return 0

    if not assignment.group_id:
        return assignment.weight

    group = find_group(assignment.group_id, groups)
    if group is None or not _positive(group.weight):
        logger.debug(
            "Group %s is missing or has no positive weight; assignment %s weighs 0",
            assignment.group_id, assignment.id,
        )
        return 0

    members = group_members(group.id, all_assignments)
    if not members:
        return 0

    return _share_of_group(assignment, group, members, group_policy(members))


def group_weight_breakdown(
    group: AssignmentGroup, all_assignments: Iterable[Assignment]
) -> List[Tuple[Assignment, float]]:
    """
    Effective weight of every non-dropped member of `group`, in list order.

    The policy is derived once for the whole group. A group without a
    positive weight gives every member 0.
    """
    members = group_members(group.id, all_assignments)
    if not _positive(group.weight):
        return [(a, 0) for a in members]

    policy = group_policy(members)
    return [(a, _share_of_group(a, group, members, policy)) for a in members]


def validate_assignment_group(group: AssignmentGroup) -> AssignmentGroup:
    """
    Check an edited group before it is saved.

    The name is stripped and must not be empty; the weight must be a
    non-negative number. Returns the normalized group.
    """
    name = (group.name or "").strip()
    errors = []

    if not name:
        errors.append({"field": "name", "reason": "missing group name"})
    if group.weight is None or group.weight < 0:
        errors.append({"field": "weight", "reason": "weight must be a non-negative number"})

    if errors:
        raise InvalidAssignmentGroup(errors)

    return group.model_copy(update={"name": name})

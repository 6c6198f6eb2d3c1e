"""
Shared fixtures for the gradebook tests.
"""

import pytest

from gradebook.schemas.grades import Assignment, AssignmentGroup, GradeCutoff
from gradebook.services.letters import default_grade_cutoffs


@pytest.fixture
def make_assignment():
    """Build an Assignment with sensible defaults; override any field by keyword."""
    counter = {"n": 0}

    def _make(**fields):
        counter["n"] += 1
        fields.setdefault("id", f"a{counter['n']}")
        fields.setdefault("score", None)
        fields.setdefault("total_score", None)
        fields.setdefault("weight", 0)
        return Assignment(**fields)

    return _make


@pytest.fixture
def make_group():
    def _make(id="g1", weight=40, name="Homework"):
        return AssignmentGroup(id=id, weight=weight, name=name)

    return _make


@pytest.fixture
def cutoffs():
    return default_grade_cutoffs()


@pytest.fixture
def two_cutoffs():
    return [
        GradeCutoff(grade="A", min_percentage=90),
        GradeCutoff(grade="B", min_percentage=80),
    ]

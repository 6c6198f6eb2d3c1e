"""
Course grade summary — overall percentage, letter and display text.
"""

from gradebook.core.config import settings
from gradebook.schemas.grades import CourseGradeInput, CourseGradeSummary
from gradebook.services.aggregator import overall_percentage
from gradebook.services.letters import letter_grade
from gradebook.utils.formatting import format_percentage


def summarize_course(course: CourseGradeInput) -> CourseGradeSummary:
    """Compute the grade shown for one course snapshot."""
    percentage = overall_percentage(course.assignments, course.groups)

    if percentage is None:
        letter = settings.UNGRADED_LETTER
    else:
        letter = letter_grade(percentage, course.grade_cutoffs)

    return CourseGradeSummary(
        percentage=percentage,
        letter=letter,
        display_percentage=format_percentage(percentage),
    )

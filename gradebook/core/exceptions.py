"""
Gradebook exceptions.

Calculation code never raises these: missing or malformed grade data
degrades to sentinel results instead. They are reserved for editing-time
checks such as validating a new set of grade cutoffs.
"""


class GradebookError(Exception):
    """Base class for gradebook errors."""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class InvalidGradeCutoffs(GradebookError):
    """
    Raised when a set of grade cutoffs cannot be saved.

    `errors` holds one dict per offending cutoff: {"index", "grade", "reason"}.
    """

    def __init__(self, errors: list[dict]):
        super().__init__(
            "Please ensure all cutoffs have a grade letter and a valid "
            "percentage between 0 and 100."
        )
        self.errors = errors


class InvalidAssignmentGroup(GradebookError):
    """
    Raised when an edited assignment group cannot be saved.

    `errors` holds one dict per problem: {"field", "reason"}.
    """

    def __init__(self, errors: list[dict]):
        super().__init__("Valid name & non-negative weight required.")
        self.errors = errors

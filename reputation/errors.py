"""
Reputation Errors

The scoring engine itself never raises. These errors are for the boundary
layer that decides which statistics are acceptable before scoring.
"""


class ReputationError(Exception):
    """Base error for all reputation operations."""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidStatsError(ReputationError):
    """Agent statistics failed boundary validation."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        super().__init__(
            f"Invalid agent statistics: {'; '.join(problems)}",
            {"problems": problems},
        )

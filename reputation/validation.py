"""
Boundary validation for agent statistics.

The engine accepts anything; callers that want stricter guarantees check
the statistics here before scoring.
"""

from __future__ import annotations

from reputation.errors import InvalidStatsError
from reputation.models import ReputationInput

MAX_RATING = 5.0
MAX_UPTIME = 100.0


def find_problems(stats: ReputationInput) -> list[str]:
    """List every way the statistics fall outside their nominal domain."""
    problems = []

    for field in ("total_transactions", "successful_transactions", "reviews_count", "connections_count"):
        value = getattr(stats, field)
        if value < 0:
            problems.append(f"{field} must be non-negative, got {value}")

    if stats.successful_transactions > stats.total_transactions:
        problems.append(
            f"successful_transactions ({stats.successful_transactions}) exceeds "
            f"total_transactions ({stats.total_transactions})"
        )

    if not 0.0 <= stats.avg_rating <= MAX_RATING:
        problems.append(f"avg_rating must be within [0, {MAX_RATING:g}], got {stats.avg_rating}")

    if not 0.0 <= stats.uptime_percent <= MAX_UPTIME:
        problems.append(f"uptime_percent must be within [0, {MAX_UPTIME:g}], got {stats.uptime_percent}")

    return problems


def validate_input(stats: ReputationInput) -> ReputationInput:
    """
    Return the statistics unchanged if they are consistent.

    Raises:
        InvalidStatsError: listing every problem found
    """
    problems = find_problems(stats)
    if problems:
        raise InvalidStatsError(problems)
    return stats

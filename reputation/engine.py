"""
Reputation Engine — weighted aggregation of factor scores.

Score formula:
    weighted         = Σ WEIGHTS[factor] × subscore[factor]      (0-100)
    normalized_score = round(weighted)
    score            = round(weighted × 10)                      (0-1000)

The two roundings are independent: `score` is scaled before rounding and is
not derived from `normalized_score`. Rounding is half-up.
"""

from __future__ import annotations

import math
from datetime import datetime

from reputation.models import (
    DeltaDirection,
    ReputationInput,
    ReputationResult,
    ScoreBreakdown,
    ScoreDelta,
    _now,
)
from reputation.scoring import (
    WEIGHTS,
    score_age,
    score_connections,
    score_reviews,
    score_success_rate,
    score_transactions,
    score_uptime,
)
from reputation.tiers import tier_for_score, tier_info


SCORE_SCALE = 10

# (minimum |delta|, label), checked in order
DELTA_LABELS: tuple[tuple[int, str], ...] = (
    (100, "Major change"),
    (50, "Significant change"),
    (20, "Moderate change"),
    (5, "Small change"),
)
MINOR_DELTA_LABEL = "Minor adjustment"
NO_CHANGE_LABEL = "No change"


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def score_breakdown(stats: ReputationInput, now: datetime) -> ScoreBreakdown:
    """Run all six factor scorers over one agent's statistics."""
    return ScoreBreakdown(
        transactions=score_transactions(stats.total_transactions),
        success_rate=score_success_rate(stats.successful_transactions, stats.total_transactions),
        reviews=score_reviews(stats.avg_rating, stats.reviews_count),
        uptime=score_uptime(stats.uptime_percent),
        age=score_age(stats.created_at, now),
        connections=score_connections(stats.connections_count),
    )


def weighted_score(breakdown: ScoreBreakdown) -> float:
    subscores = breakdown.as_dict()
    return sum(weight * subscores[factor] for factor, weight in WEIGHTS.items())


def compute_reputation(stats: ReputationInput, now: datetime | None = None) -> ReputationResult:
    """
    Compute an agent's reputation from its raw statistics.

    Args:
        stats: The agent's raw signals
        now: Evaluation instant for the account-age factor. Defaults to the
             current UTC time; pass a fixed value for reproducible results.

    Returns:
        ReputationResult with score, normalized score, tier and breakdown
    """
    if now is None:
        now = _now()

    breakdown = score_breakdown(stats, now)
    weighted = weighted_score(breakdown)

    score = _round_half_up(weighted * SCORE_SCALE)
    tier = tier_for_score(score)

    return ReputationResult(
        score=score,
        normalized_score=_round_half_up(weighted),
        tier=tier,
        tier_info=tier_info(tier),
        breakdown=breakdown,
    )


def describe_delta(old_score: int, new_score: int) -> ScoreDelta:
    """Classify the direction and magnitude of a score change."""
    delta = new_score - old_score
    if delta == 0:
        return ScoreDelta(delta=0, direction=DeltaDirection.SAME, description=NO_CHANGE_LABEL)

    direction = DeltaDirection.UP if delta > 0 else DeltaDirection.DOWN
    magnitude = abs(delta)
    description = next(
        (label for threshold, label in DELTA_LABELS if magnitude >= threshold),
        MINOR_DELTA_LABEL,
    )
    return ScoreDelta(delta=delta, direction=direction, description=description)


def format_score(score: int) -> str:
    """Render a score for display, with a thousands separator from 1000 up."""
    if score >= 1000:
        return f"{score:,}"
    return str(score)

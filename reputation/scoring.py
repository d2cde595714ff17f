"""
Reputation Factor Scorers — one normalizing curve per behavioral signal.

Each scorer maps a raw signal to a sub-score in [0, 100]. The curves are
monotonic and deliberately nonlinear: early progress is rewarded quickly,
the high end saturates, and poor performance is penalized sharply.

Scorers never raise. Out-of-domain input flows through the same formula and
the result is clamped to [0, 100].
"""

from __future__ import annotations

import math
from datetime import datetime, timezone


# Tuning constants
MIN_SUBSCORE = 0.0
MAX_SUBSCORE = 100.0
NEUTRAL_SUBSCORE = 50.0   # No history yet: neither reward nor penalty
FLOOR_SUBSCORE = 20.0     # Age and connections never drop below this
SECONDS_PER_DAY = 86_400

WEIGHTS: dict[str, float] = {
    "transactions": 0.25,
    "success_rate": 0.20,
    "reviews": 0.20,
    "uptime": 0.15,
    "age": 0.10,
    "connections": 0.10,
}


def _clamp(value: float) -> float:
    if math.isnan(value):
        return MIN_SUBSCORE
    return min(MAX_SUBSCORE, max(MIN_SUBSCORE, value))


def score_transactions(count: int) -> float:
    """Logarithmic volume score: 0 → 0, 10 → ~35, 100 → ~67, 1000+ → 100."""
    if count <= 0:
        return MIN_SUBSCORE
    return _clamp(math.log10(count + 1) * 33.3)


def score_success_rate(successful: int, total: int) -> float:
    """
    Three linear segments with increasing slope.

        rate < 50       rate * 0.5               (harsh penalty zone)
        50 <= rate < 80 25 + (rate - 50) * 1.25
        rate >= 80      62.5 + (rate - 80) * 1.875

    Agents with no transactions get the neutral score.
    """
    if total == 0:
        return NEUTRAL_SUBSCORE

    rate = successful / total * 100
    if rate < 50:
        return _clamp(rate * 0.5)
    if rate < 80:
        return _clamp(25 + (rate - 50) * 1.25)
    return _clamp(62.5 + (rate - 80) * 1.875)


def score_reviews(avg_rating: float, reviews_count: int) -> float:
    """Rating quality weighs 70%, review volume 30% (saturates at 100 reviews)."""
    # Negative counts are treated like an empty review history
    if reviews_count <= 0:
        return NEUTRAL_SUBSCORE

    rating_score = avg_rating / 5 * 100
    count_score = min(100.0, math.log10(reviews_count + 1) * 50)
    return _clamp(rating_score * 0.7 + count_score * 0.3)


def score_uptime(uptime_percent: float) -> float:
    """Favors near-perfect uptime; anything under 90% is punished hard."""
    if uptime_percent >= 99.9:
        return MAX_SUBSCORE
    if uptime_percent >= 99:
        return 95.0
    if uptime_percent >= 95:
        return _clamp(80 + (uptime_percent - 95) * 3)
    if uptime_percent >= 90:
        return _clamp(50 + (uptime_percent - 90) * 6)
    return _clamp(uptime_percent * 0.5)


def score_age_days(age_days: float) -> float:
    """Piecewise ramp: 0d → 20, 30d → 50, 90d → 75, 365d → 95, 730d+ → 100."""
    if math.isnan(age_days):
        return MIN_SUBSCORE
    if age_days < 7:
        return FLOOR_SUBSCORE
    if age_days < 30:
        return _clamp(20 + (age_days - 7) * 1.3)
    if age_days < 90:
        return _clamp(50 + (age_days - 30) * 0.42)
    if age_days < 365:
        return _clamp(75 + (age_days - 90) * 0.073)
    if age_days < 730:
        return _clamp(95 + (age_days - 365) * 0.014)
    return MAX_SUBSCORE


def account_age_days(created_at: datetime, now: datetime) -> float:
    """Fractional days between creation and `now`. Naive datetimes are UTC."""
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return (now - created_at).total_seconds() / SECONDS_PER_DAY


def score_age(created_at: datetime, now: datetime) -> float:
    return score_age_days(account_age_days(created_at, now))


def score_connections(count: int) -> float:
    """0 → 20, 5 → 50, 20 → 75, 50+ → 100."""
    if isinstance(count, float) and math.isnan(count):
        return MIN_SUBSCORE
    if count <= 0:
        return FLOOR_SUBSCORE
    if count < 5:
        return _clamp(20 + count * 6)
    if count < 20:
        return _clamp(50 + (count - 5) * 1.67)
    if count < 50:
        return _clamp(75 + (count - 20) * 0.83)
    return MAX_SUBSCORE

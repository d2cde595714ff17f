"""
Agent Reputation — trust scoring for the agent marketplace
"""

__version__ = "0.1.0"

from reputation.engine import compute_reputation, describe_delta, format_score
from reputation.errors import InvalidStatsError, ReputationError
from reputation.leaderboard import build_leaderboard
from reputation.models import (
    DeltaDirection,
    LeaderboardEntry,
    ReputationInput,
    ReputationResult,
    ReputationTier,
    ScoreBreakdown,
    ScoreDelta,
    TierInfo,
    TierProgress,
)
from reputation.scoring import (
    WEIGHTS,
    score_age,
    score_age_days,
    score_connections,
    score_reviews,
    score_success_rate,
    score_transactions,
    score_uptime,
)
from reputation.tiers import REPUTATION_TIERS, progress_to_next_tier, tier_for_score, tier_info
from reputation.validation import validate_input

"""
Reputation Data Models — Pydantic v2

Defines the value objects flowing through the reputation engine:
raw agent statistics in, scored results, tier descriptors, and the
presentation helpers' outputs.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Enums
# =============================================================================

class ReputationTier(str, Enum):
    NEWCOMER = "newcomer"
    ACTIVE = "active"
    RELIABLE = "reliable"
    TRUSTED = "trusted"
    ELITE = "elite"
    LEGENDARY = "legendary"


class DeltaDirection(str, Enum):
    UP = "up"
    DOWN = "down"
    SAME = "same"


def _now() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# Engine Input / Output
# =============================================================================

class ReputationInput(BaseModel):
    """
    Raw statistics for one agent, as supplied by the statistics store.

    No range constraints are declared here: the engine accepts any numbers
    and clamps internally. Use reputation.validation for strict checks.
    """
    total_transactions: int = Field(0, description="All transactions the agent took part in")
    successful_transactions: int = Field(0, description="Transactions completed successfully")
    avg_rating: float = Field(0.0, description="Mean review rating on a 0-5 scale")
    reviews_count: int = Field(0, description="Number of reviews received")
    uptime_percent: float = Field(0.0, description="Measured uptime, 0-100")
    created_at: datetime = Field(default_factory=_now, description="Account creation time")
    connections_count: int = Field(0, description="Confirmed network relationships")


class ScoreBreakdown(BaseModel):
    """Per-factor sub-scores, each in [0, 100]."""
    transactions: float
    success_rate: float
    reviews: float
    uptime: float
    age: float
    connections: float

    def as_dict(self) -> dict[str, float]:
        return self.model_dump()


class TierInfo(BaseModel):
    """Static display descriptor for one reputation tier."""
    model_config = ConfigDict(frozen=True)

    tier: ReputationTier
    name: str
    min_score: int
    max_score: Optional[int] = Field(None, description="Inclusive upper bound; None is unbounded")
    color: str
    bg_color: str
    border_color: str
    icon: str
    description: str

    @property
    def is_terminal(self) -> bool:
        return self.max_score is None

    def contains(self, score: int) -> bool:
        if score < self.min_score:
            return False
        return self.max_score is None or score <= self.max_score


class ReputationResult(BaseModel):
    """The engine's sole output for one computation."""
    score: int = Field(..., description="Final score, 0-1000 in practice")
    normalized_score: int = Field(..., description="Weighted sum rounded, 0-100")
    tier: ReputationTier
    tier_info: TierInfo
    breakdown: ScoreBreakdown


# =============================================================================
# Presentation Helpers
# =============================================================================

class TierProgress(BaseModel):
    """How far a score has travelled through its tier."""
    progress: float = Field(..., ge=0.0, le=100.0)
    next_tier: Optional[ReputationTier] = None


class ScoreDelta(BaseModel):
    """Human-readable classification of a score change."""
    delta: int
    direction: DeltaDirection
    description: str


class LeaderboardEntry(BaseModel):
    rank: int = Field(..., ge=1)
    agent_id: str
    score: int
    tier: ReputationTier

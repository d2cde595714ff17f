"""
===================================================================
  Reputation Scoring Service
===================================================================

Stateless FastAPI microservice around the reputation engine.
The statistics store posts raw agent stats here; the presentation layer
reads tiers, progress and score deltas.

Run: uvicorn services.reputation_service:app --port 8004
"""

from __future__ import annotations

import os
from datetime import datetime

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from reputation import __version__
from reputation._logger import get_logger
from reputation.engine import compute_reputation, describe_delta, format_score
from reputation.errors import InvalidStatsError
from reputation.leaderboard import DEFAULT_LEADERBOARD_SIZE, MAX_LEADERBOARD_SIZE, build_leaderboard
from reputation.models import (
    LeaderboardEntry,
    ReputationInput,
    ReputationResult,
    ReputationTier,
    ScoreDelta,
    TierInfo,
    TierProgress,
)
from reputation.tiers import REPUTATION_TIERS, progress_to_next_tier, tier_for_score, tier_info
from reputation.validation import validate_input


# =============================================================================
# Configuration
# =============================================================================

HOST = os.getenv("REPUTATION_SERVICE_HOST", "0.0.0.0")
PORT = int(os.getenv("REPUTATION_SERVICE_PORT", "8004"))
STRICT_INPUT = os.getenv("REPUTATION_STRICT_INPUT", "true").strip().lower() in ("1", "true", "yes")

logger = get_logger(__name__)


# =============================================================================
# App
# =============================================================================

app = FastAPI(
    title="Reputation Scoring Service",
    description="Reputation scores and tiers for marketplace agents",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Request / Response Models
# =============================================================================

class TierLookupResponse(BaseModel):
    score: int
    tier: ReputationTier
    tier_info: TierInfo
    formatted: str


class LeaderboardRequest(BaseModel):
    scores: dict[str, int] = Field(default_factory=dict, description="agent_id -> score")
    limit: int = Field(DEFAULT_LEADERBOARD_SIZE, ge=1, le=MAX_LEADERBOARD_SIZE)


class LeaderboardResponse(BaseModel):
    leaderboard: list[LeaderboardEntry]
    total: int


# =============================================================================
# Endpoints
# =============================================================================

@app.post("/reputation", response_model=ReputationResult)
async def score_agent(
    stats: ReputationInput,
    now: datetime | None = Query(None, description="Evaluation instant (ISO 8601); defaults to now"),
):
    """Compute score, tier and breakdown from an agent's raw statistics."""
    if STRICT_INPUT:
        try:
            validate_input(stats)
        except InvalidStatsError as e:
            logger.info("stats_rejected", problems=e.problems)
            raise HTTPException(status_code=422, detail=e.details)

    result = compute_reputation(stats, now=now)
    logger.info("reputation_computed", score=result.score, tier=result.tier.value)
    return result


@app.get("/tiers", response_model=list[TierInfo])
async def list_tiers():
    """The static tier table, lowest tier first."""
    return list(REPUTATION_TIERS)


@app.get("/tiers/{score}", response_model=TierLookupResponse)
async def classify_score(score: int):
    """Reclassify a precomputed score without the raw statistics."""
    tier = tier_for_score(score)
    return TierLookupResponse(
        score=score,
        tier=tier,
        tier_info=tier_info(tier),
        formatted=format_score(score),
    )


@app.get("/progress/{score}", response_model=TierProgress)
async def tier_progress(score: int):
    return progress_to_next_tier(score)


@app.get("/delta", response_model=ScoreDelta)
async def score_delta(
    old: int = Query(..., description="Previous score"),
    new: int = Query(..., description="Current score"),
):
    return describe_delta(old, new)


@app.post("/leaderboard", response_model=LeaderboardResponse)
async def leaderboard(request: LeaderboardRequest):
    """Rank agents by precomputed score."""
    entries = build_leaderboard(request.scores, limit=request.limit)
    return LeaderboardResponse(leaderboard=entries, total=len(request.scores))


@app.get("/health")
async def health():
    return {
        "service": "reputation-scoring",
        "status": "healthy",
        "version": __version__,
        "strict_input": STRICT_INPUT,
        "tiers": len(REPUTATION_TIERS),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=HOST, port=PORT)

"""
Reputation Leaderboard — rank agents by precomputed score.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from reputation.models import LeaderboardEntry
from reputation.tiers import tier_for_score

DEFAULT_LEADERBOARD_SIZE = 10
MAX_LEADERBOARD_SIZE = 50


def build_leaderboard(
    scores: Mapping[str, int] | Iterable[tuple[str, int]],
    limit: int = DEFAULT_LEADERBOARD_SIZE,
) -> list[LeaderboardEntry]:
    """
    Get the top agents by reputation score.

    Args:
        scores: agent_id -> score mapping, or (agent_id, score) pairs
        limit: How many entries to return (capped at MAX_LEADERBOARD_SIZE)

    Returns:
        Entries sorted by score (highest first) with 1-based ranks. Agents
        with equal scores keep their input order.
    """
    pairs = list(scores.items()) if isinstance(scores, Mapping) else list(scores)
    limit = min(limit, MAX_LEADERBOARD_SIZE)
    if limit <= 0:
        return []

    ranked = sorted(pairs, key=lambda pair: pair[1], reverse=True)[:limit]
    return [
        LeaderboardEntry(rank=i, agent_id=agent_id, score=score, tier=tier_for_score(score))
        for i, (agent_id, score) in enumerate(ranked, start=1)
    ]

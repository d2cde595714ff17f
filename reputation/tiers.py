"""
Reputation Tiers — static tier table and score classification.

Tiers are an ordered tuple of immutable records. Ranges are contiguous and
ascending; the last tier has no upper bound, so every non-negative score
lands in exactly one tier.
"""

from __future__ import annotations

from typing import Sequence

from reputation._logger import get_logger
from reputation.models import ReputationTier, TierInfo, TierProgress

logger = get_logger(__name__)


def _tier(tier: ReputationTier, name: str, min_score: int, max_score: int | None,
          rgb: tuple[int, int, int], color: str, icon: str, description: str) -> TierInfo:
    r, g, b = rgb
    return TierInfo(
        tier=tier,
        name=name,
        min_score=min_score,
        max_score=max_score,
        color=color,
        bg_color=f"rgba({r}, {g}, {b}, 0.1)",
        border_color=f"rgba({r}, {g}, {b}, 0.3)",
        icon=icon,
        description=description,
    )


REPUTATION_TIERS: tuple[TierInfo, ...] = (
    _tier(ReputationTier.NEWCOMER, "Newcomer", 0, 99, (113, 113, 122), "#71717a", "🌱", "New to the network"),
    _tier(ReputationTier.ACTIVE, "Active", 100, 299, (59, 130, 246), "#3b82f6", "⚡", "Building reputation"),
    _tier(ReputationTier.RELIABLE, "Reliable", 300, 599, (34, 197, 94), "#22c55e", "✓", "Consistent performer"),
    _tier(ReputationTier.TRUSTED, "Trusted", 600, 899, (168, 85, 247), "#a855f7", "🛡️", "Highly reliable"),
    _tier(ReputationTier.ELITE, "Elite", 900, 999, (245, 158, 11), "#f59e0b", "⭐", "Top performer"),
    _tier(ReputationTier.LEGENDARY, "Legendary", 1000, None, (239, 68, 68), "#ef4444", "👑", "Network legend"),
)

_BY_TAG: dict[ReputationTier, TierInfo] = {info.tier: info for info in REPUTATION_TIERS}


def tier_info(tier: ReputationTier | str) -> TierInfo:
    """Look up the descriptor for a tier tag."""
    return _BY_TAG[ReputationTier(tier)]


def _find(score: int, tiers: Sequence[TierInfo]) -> TierInfo:
    for info in tiers:
        if info.contains(score):
            return info
    # Highest tier when nothing matches; an empty table falls back to the built-in one
    fallback = tiers[-1] if tiers else REPUTATION_TIERS[-1]
    logger.warning("tier_table_fallback", score=score, fallback=fallback.tier.value)
    return fallback


def tier_for_score(score: int, tiers: Sequence[TierInfo] = REPUTATION_TIERS) -> ReputationTier:
    """
    Classify a score into a tier.

    Scans the table in ascending order and returns the first tier whose
    [min_score, max_score] range contains the score. Never fails: if no range
    matches, the last (highest) tier of the table is returned.
    """
    return _find(score, tiers).tier


def progress_to_next_tier(score: int, tiers: Sequence[TierInfo] = REPUTATION_TIERS) -> TierProgress:
    """
    Percentage of the current tier's range already covered, plus the next tier.

    The terminal tier always reports 100% progress and no next tier.
    """
    current = _find(score, tiers)
    if current.is_terminal:
        return TierProgress(progress=100.0, next_tier=None)

    index = next(i for i, info in enumerate(tiers) if info.tier == current.tier)
    if index == len(tiers) - 1:
        return TierProgress(progress=100.0, next_tier=None)

    next_info = tiers[index + 1]

    range_size = current.max_score - current.min_score + 1
    progress = (score - current.min_score) / range_size * 100
    return TierProgress(progress=min(100.0, max(0.0, progress)), next_tier=next_info.tier)

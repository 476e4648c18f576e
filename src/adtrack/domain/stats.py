"""Statistics over daily entries.

Every function here is pure and total: it accepts any finite sequence of
entries, including an empty one, and never returns NaN or infinity.
"""

import math
from typing import Optional, Sequence

from adtrack.domain.entities import (
    AggregatedStats,
    DailyEntry,
    DailyPoint,
    Platform,
    PlatformShare,
    PlatformStats,
)
from adtrack.domain.grouping import group_by


def cost_per_result(spend: float, purchases: float) -> float:
    """Return spend per purchase, or 0 when there are no purchases."""
    return spend / purchases if purchases > 0 else 0.0


def entry_cpr(entry: DailyEntry) -> float:
    """Return the cost per result of a single entry."""
    return cost_per_result(entry.spend, entry.purchases)


def platform_breakdown(entries: Sequence[DailyEntry]) -> list[PlatformStats]:
    """Accumulate spend and purchases per platform.

    Platforms appear in order of first occurrence in ``entries``.
    """
    results = []
    for platform, group in group_by(entries, lambda e: e.platform).items():
        spend = sum(e.spend for e in group)
        purchases = sum(e.purchases for e in group)
        results.append(
            PlatformStats(
                platform=platform,
                spend=spend,
                purchases=purchases,
                cpr=cost_per_result(spend, purchases),
            )
        )
    return results


def _best_platform(breakdown: Sequence[PlatformStats]) -> Optional[Platform]:
    best: Optional[Platform] = None
    best_cpr = math.inf
    for stats in breakdown:
        # Platforms without purchases count as infinitely expensive
        group_cpr = stats.spend / stats.purchases if stats.purchases > 0 else math.inf
        if group_cpr < best_cpr:
            best_cpr = group_cpr
            best = stats.platform
    return best


def _highest_cost_platform(breakdown: Sequence[PlatformStats]) -> Optional[Platform]:
    highest: Optional[Platform] = None
    max_spend = -math.inf
    for stats in breakdown:
        if stats.spend > max_spend:
            max_spend = stats.spend
            highest = stats.platform
    return highest


def aggregate(entries: Sequence[DailyEntry]) -> AggregatedStats:
    """Reduce entries into totals, cost per result and platform rankings.

    Ties in either ranking go to the platform encountered first. Negative
    values are summed as given; validation is the caller's job.

    Args:
        entries: Entries to aggregate

    Returns:
        AggregatedStats for the entries
    """
    if not entries:
        return AggregatedStats.empty()

    total_spend = 0.0
    total_purchases = 0.0
    for entry in entries:
        total_spend += entry.spend
        total_purchases += entry.purchases

    breakdown = platform_breakdown(entries)

    return AggregatedStats(
        total_spend=total_spend,
        total_purchases=total_purchases,
        cpr=cost_per_result(total_spend, total_purchases),
        best_platform=_best_platform(breakdown),
        highest_cost_platform=_highest_cost_platform(breakdown),
    )


def daily_series(entries: Sequence[DailyEntry]) -> list[DailyPoint]:
    """Accumulate entries per day, sorted by day.

    Each point's cost per result is rounded to 2 decimals.
    """
    points = []
    for day, group in group_by(entries, lambda e: e.date).items():
        spend = sum(e.spend for e in group)
        purchases = sum(e.purchases for e in group)
        points.append(
            DailyPoint(
                date=day,
                spend=spend,
                purchases=purchases,
                cpr=round(cost_per_result(spend, purchases), 2),
            )
        )
    return sorted(points, key=lambda p: p.date)


def platform_comparison(entries: Sequence[DailyEntry]) -> list[PlatformStats]:
    """Return stats for every platform in canonical order, zero-filled."""
    by_platform = {stats.platform: stats for stats in platform_breakdown(entries)}
    return [
        by_platform.get(platform, PlatformStats(platform, 0.0, 0.0, 0.0))
        for platform in Platform
    ]


def spend_share(entries: Sequence[DailyEntry]) -> list[PlatformShare]:
    """Split total spend across every platform in canonical order."""
    comparison = platform_comparison(entries)
    total = sum(stats.spend for stats in comparison)
    return [
        PlatformShare(
            platform=stats.platform,
            spend=stats.spend,
            share=stats.spend / total if total > 0 else 0.0,
        )
        for stats in comparison
    ]

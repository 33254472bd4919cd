from __future__ import annotations
from typing import Iterable

from ad_performance.config import TOP_N
from ad_performance.metrics import click_through_rate, cost_per_acquisition
from ad_performance.models import CampaignAggregate


def _ctr_key(campaign: CampaignAggregate) -> tuple[bool, float]:
    ctr = click_through_rate(campaign)
    # undefined CTR sorts after every defined one
    if ctr is None:
        return True, 0.0
    return False, -ctr


def top_by_ctr(campaigns: Iterable[CampaignAggregate]) -> list[CampaignAggregate]:
    """Highest click-through rate first. sorted() is stable, so ties keep input order."""
    return sorted(campaigns, key=_ctr_key)[:TOP_N]


def top_by_cpa(campaigns: Iterable[CampaignAggregate]) -> list[CampaignAggregate]:
    """Lowest cost per acquisition first; campaigns without conversions are left out."""
    converting = [c for c in campaigns if c.total_conversions > 0]
    return sorted(converting, key=cost_per_acquisition)[:TOP_N]

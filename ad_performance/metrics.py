"""Derived campaign ratios.

Both functions return ``None`` for a zero denominator so that callers pick
the policy: the CTR report prints 0, the CPA ranking drops the campaign.
"""

from __future__ import annotations

from ad_performance.models import CampaignAggregate


def click_through_rate(campaign: CampaignAggregate) -> float | None:
    if campaign.total_impressions == 0:
        return None
    return campaign.total_clicks / campaign.total_impressions


def cost_per_acquisition(campaign: CampaignAggregate) -> float | None:
    if campaign.total_conversions == 0:
        return None
    return float(campaign.total_spend) / campaign.total_conversions

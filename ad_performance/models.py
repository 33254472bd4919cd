from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class AdEvent:
    """One parsed input row."""

    campaign_id: str
    date: str
    impressions: int
    clicks: int
    spend: Decimal
    conversions: int


@dataclass
class CampaignAggregate:
    """Running totals for a single campaign."""

    campaign_id: str
    total_impressions: int = 0
    total_clicks: int = 0
    total_spend: Decimal = Decimal("0")
    total_conversions: int = 0

    @classmethod
    def from_event(cls, event: AdEvent) -> "CampaignAggregate":
        return cls(
            campaign_id=event.campaign_id,
            total_impressions=event.impressions,
            total_clicks=event.clicks,
            total_spend=event.spend,
            total_conversions=event.conversions,
        )

    def add(self, event: AdEvent) -> None:
        self.total_impressions += event.impressions
        self.total_clicks += event.clicks
        self.total_spend += event.spend
        self.total_conversions += event.conversions

    def merge(self, other: "CampaignAggregate") -> None:
        # partition-by-key: only aggregates of the same campaign can be merged
        if other.campaign_id != self.campaign_id:
            raise ValueError(
                f"cannot merge '{other.campaign_id}' into '{self.campaign_id}'"
            )
        self.total_impressions += other.total_impressions
        self.total_clicks += other.total_clicks
        self.total_spend += other.total_spend
        self.total_conversions += other.total_conversions

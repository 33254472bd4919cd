
from __future__ import annotations
import logging

from ad_performance.config import PROGRESS_EVERY
from ad_performance.models import AdEvent, CampaignAggregate

logger = logging.getLogger(__name__)


class AggregationTable:
    """campaign_id -> CampaignAggregate, filled in a single streaming pass."""

    def __init__(self, progress_every: int = PROGRESS_EVERY):
        self._campaigns: dict[str, CampaignAggregate] = {}
        self.progress_every = progress_every
        self.events_processed = 0

    def add(self, event: AdEvent) -> CampaignAggregate:
        campaign = self._campaigns.get(event.campaign_id)
        if campaign is None:
            campaign = CampaignAggregate.from_event(event)
            self._campaigns[event.campaign_id] = campaign
        else:
            campaign.add(event)

        self.events_processed += 1
        if self.progress_every and self.events_processed % self.progress_every == 0:
            logger.info("Processed %s events...", f"{self.events_processed:,}")
        return campaign

    def get(self, campaign_id: str) -> CampaignAggregate | None:
        return self._campaigns.get(campaign_id)

    def campaigns(self) -> list[CampaignAggregate]:
        return list(self._campaigns.values())

    def __len__(self) -> int:
        return len(self._campaigns)

    def __contains__(self, campaign_id: object) -> bool:
        return campaign_id in self._campaigns

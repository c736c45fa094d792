"""
Subscription allowance for the analysis endpoint.

One ``Subscription`` per session, passed to whoever needs it; no ambient
singleton beyond the one the app wires up at startup.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Optional

from .errors import QuotaExceeded, FeatureNotAvailable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TierFeatures:
    analysis_per_month: int
    advanced_analysis: bool
    priority_support: bool = False
    batch_analysis: bool = False
    api_access: bool = False
    custom_models: bool = False


TIERS = {
    "free": TierFeatures(5, advanced_analysis=False),
    "basic": TierFeatures(20, advanced_analysis=True),
    "pro": TierFeatures(100, advanced_analysis=True, priority_support=True, batch_analysis=True),
    "enterprise": TierFeatures(500, advanced_analysis=True, priority_support=True, batch_analysis=True,
                               api_access=True, custom_models=True),
}

ADVANCED_KINDS = {"comprehensive"}
BILLING_PERIOD = timedelta(days=30)


@dataclass
class Subscription:
    tier: str = "free"
    is_active: bool = True
    expires_at: Optional[datetime] = None
    remaining_analysis: int = field(default=-1)

    def __post_init__(self):
        if self.tier not in TIERS:
            logger.warning("Unknown subscription tier %r, using free", self.tier)
            self.tier = "free"
        if self.remaining_analysis < 0:
            self.remaining_analysis = self.features.analysis_per_month

    @property
    def features(self) -> TierFeatures:
        return TIERS[self.tier]

    def change_tier(self, tier: str, now: Optional[datetime] = None):
        if tier not in TIERS:
            raise ValueError(f"Unknown tier: {tier}")
        now = now or datetime.now(timezone.utc)
        self.tier = tier
        self.is_active = True
        self.expires_at = now + BILLING_PERIOD
        self.remaining_analysis = self.features.analysis_per_month

    def cancel(self):
        self.is_active = False
        self.expires_at = None

    def consume(self, analysis_kind: str) -> int:
        """Use up one analysis; returns what is left."""
        if analysis_kind in ADVANCED_KINDS and not self.features.advanced_analysis:
            raise FeatureNotAvailable(self.tier, f"{analysis_kind} analysis")
        if not self.is_active or self.remaining_analysis <= 0:
            logger.info("Analysis refused: tier=%s active=%s remaining=%d",
                        self.tier, self.is_active, self.remaining_analysis)
            raise QuotaExceeded(self.tier)
        self.remaining_analysis -= 1
        return self.remaining_analysis

    def status(self) -> dict:
        return {
            "tier": self.tier,
            "is_active": self.is_active,
            "expires_at": self.expires_at.isoformat() if self.expires_at else None,
            "analysis_per_month": self.features.analysis_per_month,
            "advanced_analysis": self.features.advanced_analysis,
            "remaining_analysis": self.remaining_analysis,
        }

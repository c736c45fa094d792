from datetime import datetime, timezone

import pytest

from mockfin.errors import QuotaExceeded, FeatureNotAvailable
from mockfin.subscription import Subscription


def test_free_tier_allowance():
    sub = Subscription(tier="free")
    assert sub.remaining_analysis == 5
    for expected in (4, 3, 2, 1, 0):
        assert sub.consume("technical") == expected
    with pytest.raises(QuotaExceeded):
        sub.consume("technical")


def test_free_tier_cannot_run_comprehensive():
    sub = Subscription(tier="free")
    with pytest.raises(FeatureNotAvailable):
        sub.consume("comprehensive")
    assert sub.remaining_analysis == 5


def test_change_tier_resets_allowance():
    sub = Subscription(tier="free")
    sub.consume("technical")
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)
    sub.change_tier("pro", now=now)
    assert sub.remaining_analysis == 100
    assert sub.expires_at == datetime(2024, 1, 31, tzinfo=timezone.utc)
    assert sub.consume("comprehensive") == 99


def test_cancelled_subscription_refuses():
    sub = Subscription(tier="basic")
    sub.cancel()
    assert sub.status()["is_active"] is False
    with pytest.raises(QuotaExceeded):
        sub.consume("technical")


def test_unknown_tier_falls_back_to_free():
    assert Subscription(tier="platinum").tier == "free"
    with pytest.raises(ValueError):
        Subscription().change_tier("platinum")


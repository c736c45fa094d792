"""
Error kinds raised at the service boundary.

The generators themselves never raise; these exist for the live upstream
(absorbed by the HTTP layer, which falls back to synthetic data) and for the
subscription quota gate (mapped to HTTP status codes).
"""
from typing import Optional


class UpstreamError(Exception):
    """Base class for failures talking to the live market-data provider."""


class SymbolNotFound(UpstreamError):
    def __init__(self, symbol: str):
        super().__init__(f"Symbol not found upstream: {symbol}")
        self.symbol = symbol


class UpstreamUnavailable(UpstreamError):
    pass


class RateLimited(UpstreamError):
    def __init__(self, retry_after: Optional[float] = None):
        super().__init__("Upstream rate limit reached")
        self.retry_after = retry_after


class QuotaExceeded(Exception):
    def __init__(self, tier: str):
        super().__init__(f"No analyses remaining for tier '{tier}'")
        self.tier = tier


class FeatureNotAvailable(Exception):
    def __init__(self, tier: str, feature: str):
        super().__init__(f"'{feature}' is not included in tier '{tier}'")
        self.tier = tier
        self.feature = feature

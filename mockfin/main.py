import asyncio
import logging
import random
from datetime import datetime, timezone
from typing import Optional, Callable, Any

from fastapi import FastAPI, HTTPException, Header
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .cache import TTLCache
from . import fmp
from .analysis import compose_analysis
from .errors import UpstreamError, QuotaExceeded, FeatureNotAvailable
from .logging import configure_logging
from .news import get_news
from .quotes import classify_symbol, synthesize_quote, market_snapshot, market_indices
from .schemas import (
    AnalysisRequest, PriceRequest, HistoryRequest, NewsRequest, MarketRequest, SubscriptionChange,
)
from .series import synthesize_series
from .subscription import Subscription

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Mock Market Data + Analysis", version="1.0.0")

# --- CORS ---
origins = [o.strip() for o in (settings.cors_origins if isinstance(settings.cors_origins, list)
                               else str(settings.cors_origins).split(','))]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Shared state ---
rng = random.Random(settings.mock_seed)
subscription = Subscription(tier=settings.subscription_tier)

# --- Caches (TTL = refresh interval) ---
price_cache  = TTLCache(settings.quote_refresh_seconds)
crypto_cache = TTLCache(settings.crypto_refresh_seconds)
news_cache   = TTLCache(settings.news_refresh_seconds)

# --- Auth-Check ---
def _auth_check(authorization: Optional[str]):
    if settings.action_key and authorization != f"Bearer {settings.action_key}":
        raise HTTPException(status_code=401, detail="Unauthorized")

# --- Fallback helpers ---
async def try_fetch(fn: Callable[[], Any], fallback: Callable[[], Any], what: str):
    """Await the live call; on upstream failure log it and return fallback()."""
    try:
        return await fn()
    except UpstreamError as e:
        logger.warning("Upstream %s failed (%s), serving synthetic data", what, e)
        return fallback()

async def simulated_latency():
    if settings.simulated_latency_ms > 0:
        await asyncio.sleep(settings.simulated_latency_ms / 1000)

async def resolve_quote(symbol: str, kind: str):
    """Live quote when FMP is configured, synthetic otherwise. Returns (quote, source)."""
    if not settings.live_upstream:
        return synthesize_quote(symbol, kind, rng), "synthetic"
    try:
        if kind == "crypto":
            # FMP only gives us the price; the rest stays synthetic
            live_price = await fmp.fetch_crypto_price(symbol)
            quote = synthesize_quote(symbol, kind, rng).model_copy(update={
                "price": live_price,
                "high_24h": live_price * 1.05,
                "low_24h": live_price * 0.95,
                "timestamp": datetime.now(timezone.utc),
            })
            return quote, "fmp"
        return await fmp.fetch_stock_quote(symbol), "fmp"
    except UpstreamError as e:
        logger.warning("Upstream quote %s failed (%s), serving synthetic data", symbol, e)
        return synthesize_quote(symbol, kind, rng), "synthetic"

# --- Endpoints ---

@app.get("/health")
async def health():
    return {"ok": True, "live_upstream": settings.live_upstream, "tier": subscription.tier}

@app.post("/price")
async def price(req: PriceRequest, authorization: str = Header(None)):
    _auth_check(authorization)
    symbol = req.symbol.strip().upper()
    kind = req.kind or classify_symbol(symbol)
    cache = crypto_cache if kind == "crypto" else price_cache
    key = f"price:{kind}:{symbol}"
    cached = cache.get(key)
    if cached:
        data, source = cached
        return {"symbol": symbol, "kind": kind, "data": data, "source": source, "cached": True}
    await simulated_latency()
    data, source = await resolve_quote(symbol, kind)
    cache.set(key, (data, source))
    return {"symbol": symbol, "kind": kind, "data": data, "source": source, "cached": False}

@app.post("/history")
async def history(req: HistoryRequest, authorization: str = Header(None)):
    _auth_check(authorization)
    symbol = req.symbol.strip().upper()
    await simulated_latency()
    data = synthesize_series(symbol, req.timeframe, rng)
    return {"symbol": symbol, "timeframe": req.timeframe, "data": data}

@app.post("/news")
async def news(req: NewsRequest, authorization: str = Header(None)):
    _auth_check(authorization)
    symbol = req.symbol.strip().upper() if req.symbol else None
    key = f"news:{symbol}:{req.limit}"
    cached = news_cache.get(key)
    if cached is not None:
        return {"symbol": symbol, "data": cached, "cached": True}
    await simulated_latency()
    data = None
    if settings.live_upstream and symbol:
        data = await try_fetch(lambda: fmp.fetch_news(symbol, req.limit), lambda: None, f"news {symbol}")
    if not data:
        data = get_news(symbol, req.limit)
    news_cache.set(key, data)
    return {"symbol": symbol, "data": data, "cached": False}

@app.post("/market")
async def market(req: MarketRequest, authorization: str = Header(None)):
    _auth_check(authorization)
    await simulated_latency()
    return {"data": market_snapshot(req.symbols, rng), "indices": market_indices()}

@app.get("/subscription")
async def subscription_status(authorization: str = Header(None)):
    _auth_check(authorization)
    return subscription.status()

@app.post("/subscription")
async def subscription_change(req: SubscriptionChange, authorization: str = Header(None)):
    _auth_check(authorization)
    try:
        subscription.change_tier(req.tier.strip().lower())
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    logger.info("Subscription changed to %s", subscription.tier)
    return subscription.status()

@app.delete("/subscription")
async def subscription_cancel(authorization: str = Header(None)):
    _auth_check(authorization)
    subscription.cancel()
    logger.info("Subscription cancelled (tier=%s)", subscription.tier)
    return subscription.status()

@app.post("/analyze")
async def analyze(req: AnalysisRequest, authorization: str = Header(None)):
    """
    Synthetic AI analysis for a ticker, sector, portfolio or the whole market.
    Costs one unit of the subscription allowance.
    """
    _auth_check(authorization)
    try:
        remaining = subscription.consume(req.analysis_kind)
    except FeatureNotAvailable as e:
        raise HTTPException(status_code=403, detail=str(e))
    except QuotaExceeded as e:
        raise HTTPException(status_code=429, detail=str(e))

    await simulated_latency()
    result = compose_analysis(req, rng)
    as_of = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M")
    return {
        "request": req,
        "result": result,
        "remaining_analysis": remaining,
        "as_of_utc": as_of,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)

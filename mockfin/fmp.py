import logging
from datetime import datetime, timezone
from typing import List, Optional

import httpx

from .config import settings
from .errors import SymbolNotFound, UpstreamUnavailable, RateLimited
from .schemas import StockQuote, NewsItem
from .quotes import company_name

BASE_URL = "https://financialmodelingprep.com/api/v3"

logger = logging.getLogger(__name__)


async def _get(path: str, params: dict):
    """
    GET against FMP with the API key attached.
    path: e.g. 'quote/AAPL' or 'stock_news'
    """
    params = dict(params or {})
    params["apikey"] = settings.fmp_api_key
    url = f"{BASE_URL}/{path.lstrip('/')}"
    try:
        async with httpx.AsyncClient(timeout=settings.upstream_timeout) as client:
            r = await client.get(url, params=params)
            r.raise_for_status()
            return r.json()
    except httpx.HTTPStatusError as e:
        status = e.response.status_code
        if status == 429:
            retry_after = e.response.headers.get("retry-after")
            raise RateLimited(float(retry_after) if retry_after and retry_after.isdigit() else None) from e
        if status == 404:
            raise SymbolNotFound(path.rsplit("/", 1)[-1]) from e
        raise UpstreamUnavailable(f"FMP answered {status} for {path}") from e
    except httpx.HTTPError as e:
        raise UpstreamUnavailable(f"FMP request failed: {e}") from e
    except ValueError as e:
        raise UpstreamUnavailable(f"FMP sent a non-JSON body for {path}") from e


def _rows(data, path: str) -> list:
    # FMP reports bad keys and plan limits as a 200 with {"Error Message": ...}
    if isinstance(data, dict) and data.get("Error Message"):
        raise UpstreamUnavailable(f"FMP error for {path}: {data['Error Message']}")
    if data is None:
        return []
    if not isinstance(data, list):
        raise UpstreamUnavailable(f"FMP sent {type(data).__name__} for {path}, expected a list")
    return [row for row in data if isinstance(row, dict)]


def _fmp_symbol(symbol: str) -> str:
    # FMP spells crypto pairs without the dash: BTC-USD -> BTCUSD
    return symbol.upper().replace("-", "")


def _parse_timestamp(value) -> datetime:
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            logger.debug("Out-of-range FMP timestamp %r", value)
    return datetime.now(timezone.utc)


# -----------------------
# Quotes
# -----------------------

async def get_price_quote(symbol: str) -> dict:
    # /quote/{symbol} answers with a one-element list
    path = f"quote/{_fmp_symbol(symbol)}"
    rows = _rows(await _get(path, params={}), path)
    if not rows:
        raise SymbolNotFound(symbol)
    row = rows[0]
    price = row.get("price")
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        raise UpstreamUnavailable(f"FMP quote for {symbol} has no usable price: {price!r}")
    return row


async def fetch_stock_quote(symbol: str) -> StockQuote:
    """Live stock quote; previous close is reconciled as price - change."""
    row = await get_price_quote(symbol)
    try:
        price = float(row["price"])
        change = float(row.get("change") or 0.0)
        previous_close = price - change
        return StockQuote(
            symbol=symbol.upper(),
            name=row.get("name") or company_name(symbol.upper()),
            price=price,
            change=change,
            change_percent=float(row.get("changesPercentage")
                                 or (change / previous_close * 100 if previous_close else 0.0)),
            volume=int(row.get("volume") or 0),
            market_cap=float(row.get("marketCap") or 0.0),
            open=float(row.get("open") or previous_close),
            previous_close=previous_close,
            timestamp=_parse_timestamp(row.get("timestamp")),
            pe_ratio=row.get("pe"),
            high_52_week=row.get("yearHigh"),
            low_52_week=row.get("yearLow"),
        )
    except (TypeError, ValueError) as e:
        # pydantic's ValidationError is a ValueError
        raise UpstreamUnavailable(f"FMP quote for {symbol} is malformed: {e}") from e


async def fetch_crypto_price(symbol: str) -> float:
    row = await get_price_quote(symbol)
    return float(row["price"])


# -----------------------
# News
# -----------------------

async def get_company_news(symbol: str, limit: int = 10):
    """
    Company News:
      - /stock_news?tickers={AAPL}&limit=10
    """
    return await _get("stock_news", params={"tickers": _fmp_symbol(symbol), "limit": limit})


async def fetch_news(symbol: str, limit: int = 10) -> List[NewsItem]:
    rows = _rows(await get_company_news(symbol, limit), "stock_news")
    items = []
    for row in rows:
        published = _parse_published(row.get("publishedDate"))
        if not isinstance(row.get("title"), str) or not row["title"] or published is None:
            continue
        try:
            items.append(NewsItem(
                title=row["title"],
                url=row.get("url") or "#",
                source=row.get("site") or "FMP",
                published_at=published,
                summary=row.get("text") or "",
            ))
        except ValueError:
            logger.debug("Skipping malformed FMP news row for %s: %r", symbol, row)
    items.sort(key=lambda n: n.published_at, reverse=True)
    return items[:limit]


def _parse_published(value: Optional[str]) -> Optional[datetime]:
    # FMP: "2024-05-02 14:31:00", US/Eastern wall time; treated as UTC here
    if not value or not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        logger.debug("Unparseable publishedDate %r", value)
        return None
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)

"""
Synthetic quotes.

Known symbols return their fixture snapshot. Anything else gets randomly
parameterized values instead of an error: a quote is always produced.
For generated quotes ``change`` and ``change_percent`` are drawn
independently, so they only approximately agree with each other.
"""
import logging
import random
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Union

from .fixtures import COMPANY_NAMES, CRYPTO_NAMES, STOCK_QUOTES, CRYPTO_QUOTES, MARKET_INDICES
from .schemas import StockQuote, CryptoQuote, MarketItem, MarketIndex

logger = logging.getLogger(__name__)

Quote = Union[StockQuote, CryptoQuote]


def classify_symbol(symbol: str) -> str:
    """'crypto' for pair symbols like BTC-USD, 'stock' otherwise."""
    return "crypto" if "-" in symbol else "stock"


def company_name(symbol: str) -> str:
    return COMPANY_NAMES.get(symbol) or f"{symbol} Stock"


def crypto_name(symbol: str) -> str:
    return CRYPTO_NAMES.get(symbol) or symbol.split("-")[0]


def base_price(symbol: str, rng: random.Random) -> float:
    """Reference price for analysis: fixture price if known, else 100-300."""
    known = STOCK_QUOTES.get(symbol) or CRYPTO_QUOTES.get(symbol)
    if known:
        return known["price"]
    return 100 + rng.random() * 200


def _daily_move(rng: random.Random, price: float):
    change = price * (rng.random() * 0.06 - 0.03)
    change_percent = rng.random() * 6 - 3
    return change, change_percent


# -----------------------
# Stocks
# -----------------------

def synthesize_stock_quote(symbol: str, rng: random.Random, now: Optional[datetime] = None) -> StockQuote:
    symbol = symbol.strip().upper()
    now = now or datetime.now(timezone.utc)
    known = STOCK_QUOTES.get(symbol)
    if known:
        return StockQuote(symbol=symbol, name=company_name(symbol), timestamp=now, **known)

    logger.debug("No stock fixture for %s, generating one", symbol)
    price = 100 + rng.random() * 200
    change, change_percent = _daily_move(rng, price)
    previous_close = price - change
    return StockQuote(
        symbol=symbol,
        name=company_name(symbol),
        price=price,
        change=change,
        change_percent=change_percent,
        volume=int(rng.random() * 50_000_000) + 1_000_000,
        market_cap=float(int(rng.random() * 500_000_000_000) + 10_000_000_000),
        pe_ratio=float(int(rng.random() * 50) + 10),
        high_52_week=price * (1 + 0.05 + rng.random() * 0.30),
        low_52_week=price * (1 - 0.10 - rng.random() * 0.30),
        open=price * (1 + rng.random() * 0.01 - 0.005),
        previous_close=previous_close,
        timestamp=now,
    )


# -----------------------
# Crypto
# -----------------------

def synthesize_crypto_quote(symbol: str, rng: random.Random, now: Optional[datetime] = None) -> CryptoQuote:
    symbol = symbol.strip().upper()
    now = now or datetime.now(timezone.utc)
    known = CRYPTO_QUOTES.get(symbol)
    if known:
        return CryptoQuote(symbol=symbol, name=crypto_name(symbol), timestamp=now, **known)

    logger.debug("No crypto fixture for %s, generating one", symbol)
    price = 100 + rng.random() * 50
    change, change_percent = _daily_move(rng, price)
    return CryptoQuote(
        symbol=symbol,
        name=crypto_name(symbol),
        price=price,
        change=change,
        change_percent=change_percent,
        volume=int(rng.random() * 5_000_000_000) + 100_000_000,
        market_cap=float(int(rng.random() * 50_000_000_000) + 1_000_000_000),
        supply=float(int(rng.random() * 1_000_000_000) + 10_000_000),
        high_24h=price * (1 + rng.random() * 0.05),
        low_24h=price * (1 - rng.random() * 0.05),
        timestamp=now,
    )


def synthesize_quote(symbol: str, kind: Optional[str], rng: random.Random,
                     now: Optional[datetime] = None) -> Quote:
    kind = kind or classify_symbol(symbol)
    if kind == "crypto":
        return synthesize_crypto_quote(symbol, rng, now)
    return synthesize_stock_quote(symbol, rng, now)


# -----------------------
# Dashboard snapshot
# -----------------------

def format_volume(volume: float) -> str:
    if volume >= 1e9:
        return f"{volume / 1e9:.1f}B"
    if volume >= 1e6:
        return f"{volume / 1e6:.1f}M"
    if volume >= 1e3:
        return f"{volume / 1e3:.1f}K"
    return str(int(volume))


def market_snapshot(symbols: Iterable[str], rng: random.Random) -> List[MarketItem]:
    items = []
    for raw in symbols:
        symbol = raw.strip().upper()
        if not symbol:
            continue
        quote = synthesize_quote(symbol, None, rng)
        if isinstance(quote, CryptoQuote):
            name = f"{quote.name} USD" if symbol in CRYPTO_QUOTES else quote.name
            previous_close = quote.price - quote.change
        else:
            name = quote.name
            previous_close = quote.previous_close
        items.append(MarketItem(
            symbol=symbol,
            name=name,
            price=quote.price,
            change=round(quote.change_percent, 2),
            volume=format_volume(quote.volume),
            previous_close=previous_close,
        ))
    return items


def market_indices() -> List[MarketIndex]:
    return [MarketIndex(**row) for row in MARKET_INDICES]

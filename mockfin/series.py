"""
Synthetic OHLCV history via a multiplicative random walk.

The walk is independent of the scenario sampler: a chart may trend down
while the analysis for the same symbol says "buy".
"""
import random
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional, Tuple

from .fixtures import SERIES_BASE_PRICES
from .quotes import classify_symbol
from .schemas import HistoricalDataPoint

# timeframe -> (bar count, bar interval)
TIMEFRAMES: Dict[str, Tuple[int, timedelta]] = {
    "1d": (78, timedelta(minutes=5)),    # 6.5h session of 5-min bars
    "5d": (39, timedelta(minutes=60)),
    "1m": (22, timedelta(days=1)),       # trading days
    "3m": (66, timedelta(days=1)),
    "1y": (52, timedelta(weeks=1)),
}
DEFAULT_TIMEFRAME = "1m"


def series_length(timeframe: str) -> int:
    return TIMEFRAMES.get(timeframe, TIMEFRAMES[DEFAULT_TIMEFRAME])[0]


def synthesize_series(symbol: str, timeframe: str, rng: random.Random,
                      now: Optional[datetime] = None) -> List[HistoricalDataPoint]:
    symbol = symbol.strip().upper()
    count, interval = TIMEFRAMES.get(timeframe, TIMEFRAMES[DEFAULT_TIMEFRAME])
    now = now or datetime.now(timezone.utc)

    crypto = classify_symbol(symbol) == "crypto"
    volatility = 0.02 if crypto else 0.01
    price = SERIES_BASE_PRICES.get(symbol, 100.0)

    points = []
    for i in range(count):
        fraction = rng.random() * volatility * 2 - volatility
        move = price * fraction
        open_ = price
        close = price + move
        high = max(open_, close) + rng.random() * abs(move)
        low = min(open_, close) - rng.random() * abs(move)

        if crypto:
            base_volume = rng.random() * 5_000_000_000 + 1_000_000_000
        else:
            base_volume = rng.random() * 50_000_000 + 5_000_000

        points.append(HistoricalDataPoint(
            date=now - (count - i) * interval,
            open=open_,
            high=high,
            low=low,
            close=close,
            volume=int(base_volume * (0.5 + rng.random())),
        ))
        price = close
    return points

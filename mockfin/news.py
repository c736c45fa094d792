from datetime import datetime, timedelta, timezone
from typing import List, Optional

from .fixtures import BASE_NEWS, SYMBOL_NEWS
from .schemas import NewsItem


def _materialize(row: dict, now: datetime) -> NewsItem:
    return NewsItem(
        title=row["title"],
        url=row.get("url", "#"),
        source=row["source"],
        published_at=now - timedelta(hours=row["age_hours"]),
        summary=row["summary"],
        sentiment=row.get("sentiment"),
    )


def get_news(symbol: Optional[str] = None, limit: int = 10, now: Optional[datetime] = None) -> List[NewsItem]:
    """
    Fixture news, newest first.
    Symbol-specific items (AAPL, TSLA, BTC-USD) are merged in front of the
    general list before sorting; unknown symbols just get the general list.
    """
    if limit <= 0:
        return []
    now = now or datetime.now(timezone.utc)
    rows = list(BASE_NEWS)
    if symbol:
        rows = SYMBOL_NEWS.get(symbol.strip().upper(), []) + rows
    items = [_materialize(row, now) for row in rows]
    # stable sort keeps supplement items ahead of base items on equal timestamps
    items.sort(key=lambda n: n.published_at, reverse=True)
    return items[:limit]

"""Synthetic market data and analysis: quotes, OHLCV history, news and AI-style reports."""
from .analysis import compose_analysis
from .news import get_news
from .quotes import synthesize_quote as get_quote
from .series import synthesize_series as get_historical_series

__all__ = ["compose_analysis", "get_quote", "get_historical_series", "get_news"]

from datetime import datetime
from pydantic import BaseModel, Field, model_validator
from typing import Optional, List, Literal

SubjectKind = Literal["ticker", "portfolio", "market", "sector"]
AnalysisKind = Literal["technical", "fundamental", "sentiment", "comprehensive"]
AnalysisTimeframe = Literal["1d", "1w", "1m", "3m", "1y"]
SeriesTimeframe = Literal["1d", "5d", "1m", "3m", "1y"]
Recommendation = Literal["buy", "sell", "hold", "watch"]
RiskLevel = Literal["low", "medium", "high"]
Signal = Literal["bullish", "bearish", "neutral"]
Comparison = Literal["above", "below", "in-line"]
Sentiment = Literal["positive", "negative", "neutral"]
QuoteKind = Literal["stock", "crypto"]

# -----------------------
# Analysis
# -----------------------

class AnalysisRequest(BaseModel):
    subject_kind: SubjectKind = "ticker"
    ticker: Optional[str] = None
    sector: Optional[str] = None
    timeframe: AnalysisTimeframe = "1m"
    analysis_kind: AnalysisKind = "comprehensive"

    @model_validator(mode="after")
    def _subject_fields(self):
        # ticker only for ticker requests, sector only for sector requests
        if self.subject_kind == "ticker":
            if not self.ticker or not self.ticker.strip():
                raise ValueError("ticker is required for ticker analysis")
            self.ticker = self.ticker.strip().upper()
        else:
            self.ticker = None
        if self.subject_kind == "sector":
            if not self.sector or not self.sector.strip():
                raise ValueError("sector is required for sector analysis")
            self.sector = self.sector.strip().lower()
        else:
            self.sector = None
        return self

class TechnicalIndicator(BaseModel):
    name: str
    value: str
    signal: Signal

class FundamentalMetric(BaseModel):
    name: str
    value: str
    comparison: Comparison

class SentimentAnalysis(BaseModel):
    overall: Sentiment
    news_score: float = Field(..., ge=0, le=10)
    social_score: float = Field(..., ge=0, le=10)
    insider_activity: str

class AnalysisResult(BaseModel):
    summary: str
    key_points: List[str]
    recommendation: Recommendation
    confidence_score: int = Field(..., ge=0, le=100)
    risk_level: RiskLevel
    price_target: Optional[float] = None
    support_levels: Optional[List[float]] = None
    resistance_levels: Optional[List[float]] = None
    technical_indicators: Optional[List[TechnicalIndicator]] = None
    fundamental_metrics: Optional[List[FundamentalMetric]] = None
    sentiment_analysis: Optional[SentimentAnalysis] = None

# -----------------------
# Quotes / Series / News
# -----------------------

class StockQuote(BaseModel):
    symbol: str
    name: str
    price: float
    change: float
    change_percent: float
    volume: int
    market_cap: float
    open: float
    previous_close: float
    timestamp: datetime
    pe_ratio: Optional[float] = None
    high_52_week: Optional[float] = None
    low_52_week: Optional[float] = None

class CryptoQuote(BaseModel):
    symbol: str
    name: str
    price: float
    change: float
    change_percent: float
    volume: int
    market_cap: float
    supply: float
    high_24h: float
    low_24h: float
    timestamp: datetime

class HistoricalDataPoint(BaseModel):
    date: datetime
    open: float
    high: float
    low: float
    close: float
    volume: int

class NewsItem(BaseModel):
    title: str
    url: str
    source: str
    published_at: datetime
    summary: str
    sentiment: Optional[Sentiment] = None

class MarketItem(BaseModel):
    symbol: str
    name: str
    price: float
    change: float  # percent
    volume: str
    previous_close: Optional[float] = None

class MarketIndex(BaseModel):
    symbol: str
    name: str
    price: float
    change: float
    change_percent: float

# -----------------------
# Request bodies
# -----------------------

class PriceRequest(BaseModel):
    symbol: str
    kind: Optional[QuoteKind] = Field(None, description="stock | crypto; guessed from the symbol if omitted")

class HistoryRequest(BaseModel):
    symbol: str
    timeframe: SeriesTimeframe = "1m"

class NewsRequest(BaseModel):
    symbol: Optional[str] = None
    limit: int = Field(10, ge=0, le=50)

class MarketRequest(BaseModel):
    symbols: List[str] = Field(
        default_factory=lambda: ["AAPL", "MSFT", "GOOGL", "AMZN", "TSLA", "BTC-USD", "ETH-USD"]
    )

class SubscriptionChange(BaseModel):
    tier: str = Field(..., description="free | basic | pro | enterprise")

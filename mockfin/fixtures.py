"""
Static fixture tables shared by the generators.

Everything here is read-only after import. News items store an age in hours
instead of a timestamp; the news module resolves them against "now".
"""

COMPANY_NAMES = {
    "AAPL": "Apple Inc.",
    "MSFT": "Microsoft Corp.",
    "GOOGL": "Alphabet Inc.",
    "AMZN": "Amazon.com Inc.",
    "TSLA": "Tesla Inc.",
    "META": "Meta Platforms Inc.",
    "NVDA": "NVIDIA Corp.",
    "JPM": "JPMorgan Chase & Co.",
    "V": "Visa Inc.",
    "WMT": "Walmart Inc.",
    "JNJ": "Johnson & Johnson",
    "PG": "Procter & Gamble Co.",
    "MA": "Mastercard Inc.",
    "UNH": "UnitedHealth Group Inc.",
    "HD": "Home Depot Inc.",
    "BAC": "Bank of America Corp.",
    "XOM": "Exxon Mobil Corp.",
    "DIS": "Walt Disney Co.",
    "NFLX": "Netflix Inc.",
    "CSCO": "Cisco Systems Inc.",
}

CRYPTO_NAMES = {
    "BTC-USD": "Bitcoin",
    "ETH-USD": "Ethereum",
    "SOL-USD": "Solana",
    "BNB-USD": "Binance Coin",
    "XRP-USD": "Ripple",
    "ADA-USD": "Cardano",
    "DOGE-USD": "Dogecoin",
    "DOT-USD": "Polkadot",
    "AVAX-USD": "Avalanche",
    "MATIC-USD": "Polygon",
}

# -----------------------
# Quote snapshots
# -----------------------

STOCK_QUOTES = {
    "AAPL": dict(price=178.72, change=2.57, change_percent=1.45, volume=52_300_000, market_cap=2.80e12,
                 pe_ratio=29.8, high_52_week=182.94, low_52_week=124.17, open=176.15, previous_close=176.15),
    "MSFT": dict(price=332.42, change=2.86, change_percent=0.87, volume=23_100_000, market_cap=2.47e12,
                 pe_ratio=35.2, high_52_week=338.56, low_52_week=213.43, open=329.56, previous_close=329.56),
    "GOOGL": dict(price=137.14, change=-0.44, change_percent=-0.32, volume=18_700_000, market_cap=1.73e12,
                  pe_ratio=26.4, high_52_week=142.38, low_52_week=83.34, open=137.58, previous_close=137.58),
    "AMZN": dict(price=131.69, change=2.75, change_percent=2.13, volume=35_200_000, market_cap=1.35e12,
                 pe_ratio=102.1, high_52_week=145.86, low_52_week=81.43, open=128.94, previous_close=128.94),
    "TSLA": dict(price=242.68, change=-4.40, change_percent=-1.78, volume=41_900_000, market_cap=7.70e11,
                 pe_ratio=78.3, high_52_week=299.29, low_52_week=101.81, open=247.08, previous_close=247.08),
    "META": dict(price=312.81, change=3.79, change_percent=1.23, volume=15_800_000, market_cap=8.03e11,
                 pe_ratio=27.5, high_52_week=326.20, low_52_week=88.09, open=309.02, previous_close=309.02),
    "NVDA": dict(price=425.03, change=11.86, change_percent=2.87, volume=32_600_000, market_cap=1.05e12,
                 pe_ratio=65.8, high_52_week=439.90, low_52_week=108.13, open=413.17, previous_close=413.17),
}

CRYPTO_QUOTES = {
    "BTC-USD": dict(price=28456.32, change=892.45, change_percent=3.21, volume=24_500_000_000,
                    market_cap=5.50e11, supply=19_318_000, high_24h=28750.15, low_24h=27572.15),
    "ETH-USD": dict(price=1642.18, change=40.67, change_percent=2.54, volume=12_100_000_000,
                    market_cap=1.97e11, supply=120_000_000, high_24h=1658.92, low_24h=1601.54),
    "SOL-USD": dict(price=32.47, change=1.58, change_percent=5.12, volume=1_800_000_000,
                    market_cap=1.30e10, supply=400_000_000, high_24h=32.89, low_24h=30.89),
    "BNB-USD": dict(price=215.63, change=3.96, change_percent=1.87, volume=954_200_000,
                    market_cap=3.30e10, supply=153_000_000, high_24h=217.45, low_24h=211.67),
    "XRP-USD": dict(price=0.5423, change=-0.0042, change_percent=-0.78, volume=1_200_000_000,
                    market_cap=2.85e10, supply=52_500_000_000, high_24h=0.5465, low_24h=0.5321),
}

# walk starting points for the chart series
SERIES_BASE_PRICES = {
    "AAPL": 175.0,
    "MSFT": 330.0,
    "GOOGL": 135.0,
    "AMZN": 130.0,
    "TSLA": 240.0,
    "META": 310.0,
    "NVDA": 420.0,
    "BTC-USD": 28000.0,
    "ETH-USD": 1600.0,
    "SOL-USD": 32.0,
    "BNB-USD": 215.0,
    "XRP-USD": 0.54,
}

MARKET_INDICES = [
    dict(symbol="SPY", name="S&P 500", price=451.34, change=3.78, change_percent=0.84),
    dict(symbol="QQQ", name="Nasdaq 100", price=378.21, change=5.62, change_percent=1.51),
    dict(symbol="DIA", name="Dow Jones", price=347.89, change=1.23, change_percent=0.35),
    dict(symbol="IWM", name="Russell 2000", price=196.42, change=-0.87, change_percent=-0.44),
    dict(symbol="VIX", name="Volatility", price=17.32, change=-0.54, change_percent=-3.02),
]

# -----------------------
# News
# -----------------------

BASE_NEWS = [
    dict(title="Fed Signals Potential Rate Cuts as Inflation Cools", source="Financial Times", age_hours=2,
         summary="The Federal Reserve has indicated it may begin cutting interest rates in the coming months "
                 "as inflation shows signs of returning to the 2% target.",
         sentiment="positive"),
    dict(title="Global Markets Rally on Strong Economic Data", source="Wall Street Journal", age_hours=5,
         summary="Stock markets worldwide surged today following better-than-expected economic indicators "
                 "from the US, Europe, and China.",
         sentiment="positive"),
    dict(title="Treasury Yields Fall as Investors Seek Safety", source="Bloomberg", age_hours=8,
         summary="U.S. Treasury yields declined sharply as investors moved to safe-haven assets amid growing "
                 "concerns about global economic growth.",
         sentiment="negative"),
    dict(title="Oil Prices Surge on Supply Concerns", source="Reuters", age_hours=12,
         summary="Crude oil prices jumped more than 3% today after reports of production disruptions in key "
                 "oil-producing regions.",
         sentiment="neutral"),
    dict(title="Retail Sales Beat Expectations, Consumer Spending Remains Strong", source="CNBC", age_hours=24,
         summary="U.S. retail sales rose more than expected last month, indicating that consumer spending "
                 "remains resilient despite economic headwinds.",
         sentiment="positive"),
    dict(title="Tech Sector Leads Market Gains as AI Investments Accelerate", source="TechCrunch", age_hours=36,
         summary="Technology stocks outperformed the broader market today as companies continue to increase "
                 "investments in artificial intelligence capabilities.",
         sentiment="positive"),
    dict(title="Housing Market Shows Signs of Cooling as Mortgage Rates Rise", source="MarketWatch", age_hours=48,
         summary="The U.S. housing market is showing signs of slowing down as mortgage rates climb to their "
                 "highest levels in over a decade.",
         sentiment="negative"),
    dict(title="Cryptocurrency Market Volatility Increases as Regulatory Scrutiny Intensifies", source="CoinDesk",
         age_hours=60,
         summary="Digital asset markets experienced heightened volatility this week as regulators worldwide "
                 "signal tougher oversight of the cryptocurrency industry.",
         sentiment="negative"),
    dict(title="Manufacturing Activity Expands for Third Consecutive Month", source="The Economist", age_hours=72,
         summary="The manufacturing sector continued its expansion for the third straight month, according to "
                 "the latest PMI data, suggesting a resilient industrial economy.",
         sentiment="positive"),
    dict(title="Corporate Earnings Season Begins with Mixed Results", source="Barron's", age_hours=96,
         summary="The quarterly earnings season kicked off with mixed results as companies navigate challenging "
                 "macroeconomic conditions and persistent inflation.",
         sentiment="neutral"),
]

SYMBOL_NEWS = {
    "AAPL": [
        dict(title="Apple Unveils Next-Generation iPhone with Advanced AI Features", source="TechCrunch",
             age_hours=3,
             summary="Apple has announced its latest iPhone model featuring enhanced AI capabilities and improved "
                     "battery life, setting new standards for the smartphone industry.",
             sentiment="positive"),
        dict(title="Apple's Services Revenue Reaches All-Time High", source="CNBC", age_hours=18,
             summary="Apple reported record-breaking services revenue in its latest quarterly results, "
                     "highlighting the company's successful transition beyond hardware sales.",
             sentiment="positive"),
        dict(title="Apple Faces Antitrust Scrutiny Over App Store Policies", source="Wall Street Journal",
             age_hours=30,
             summary="Regulators are intensifying their investigation into Apple's App Store practices, "
                     "potentially threatening a key revenue stream for the tech giant.",
             sentiment="negative"),
    ],
    "TSLA": [
        dict(title="Tesla Delivers Record Number of Vehicles in Latest Quarter", source="Reuters", age_hours=4,
             summary="Tesla has reported record-breaking vehicle deliveries for the quarter, exceeding analyst "
                     "expectations and demonstrating strong demand for electric vehicles.",
             sentiment="positive"),
        dict(title="Tesla Expands Gigafactory Capacity to Meet Growing Demand", source="Bloomberg", age_hours=22,
             summary="Tesla announced plans to significantly expand production capacity at its Gigafactories "
                     "worldwide to address the increasing demand for its electric vehicles.",
             sentiment="positive"),
        dict(title="Tesla Faces Increased Competition in EV Market", source="Financial Times", age_hours=40,
             summary="Tesla's market share in the electric vehicle sector is under pressure as traditional "
                     "automakers and new entrants ramp up their EV offerings.",
             sentiment="negative"),
    ],
    "BTC-USD": [
        dict(title="Bitcoin Surges Past $30,000 as Institutional Adoption Grows", source="CoinDesk", age_hours=6,
             summary="Bitcoin has broken through the $30,000 barrier as more institutional investors add the "
                     "cryptocurrency to their portfolios, signaling growing mainstream acceptance.",
             sentiment="positive"),
        dict(title="Major Bank Launches Bitcoin Custody Services for Institutional Clients", source="Bloomberg",
             age_hours=26,
             summary="A leading global bank has announced the launch of Bitcoin custody services for its "
                     "institutional clients, marking another milestone in cryptocurrency adoption.",
             sentiment="positive"),
        dict(title="Bitcoin Mining Difficulty Reaches All-Time High", source="CryptoNews", age_hours=38,
             summary="The difficulty of mining Bitcoin has reached a new record high, potentially impacting "
                     "profitability for miners as competition intensifies.",
             sentiment="neutral"),
    ],
}

# -----------------------
# Analysis bonus points
# -----------------------

TICKER_INSIGHTS = {
    "AAPL": "Recent product launches have been well-received by consumers and critics.",
    "TSLA": "Production capacity expansion and demand in key markets remain critical factors.",
    "BTC-USD": "Regulatory developments and institutional adoption continue to drive price action.",
}

SECTOR_INSIGHTS = {
    "technology": "AI and cloud computing remain key growth drivers for the sector.",
    "healthcare": "Innovation in treatments and aging demographics support long-term growth.",
    "energy": "Transition to renewable energy is reshaping competitive dynamics.",
}

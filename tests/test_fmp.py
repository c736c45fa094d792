import asyncio
from datetime import datetime, timezone

import httpx
import pytest

from mockfin import fmp
from mockfin.errors import SymbolNotFound, UpstreamUnavailable, RateLimited


def _fake_get(payload, calls=None):
    async def fake(path, params):
        if calls is not None:
            calls.append((path, params))
        return payload
    return fake


def test_stock_quote_mapping(monkeypatch):
    calls = []
    monkeypatch.setattr(fmp, "_get", _fake_get([{
        "symbol": "AAPL", "name": "Apple Inc.", "price": 180.0, "change": 2.5,
        "changesPercentage": 1.41, "volume": 1000, "marketCap": 2.8e12, "open": 178.0,
        "pe": 29.1, "yearHigh": 199.6, "yearLow": 124.2, "timestamp": 1710518400,
    }], calls))
    quote = asyncio.run(fmp.fetch_stock_quote("aapl"))
    assert calls[0][0] == "quote/AAPL"
    assert quote.symbol == "AAPL"
    assert quote.previous_close == 177.5
    assert quote.change_percent == 1.41
    assert quote.high_52_week == 199.6
    assert quote.timestamp == datetime(2024, 3, 15, 16, 0, tzinfo=timezone.utc)


def test_empty_quote_payload_is_not_found(monkeypatch):
    monkeypatch.setattr(fmp, "_get", _fake_get([]))
    with pytest.raises(SymbolNotFound):
        asyncio.run(fmp.fetch_stock_quote("NOPE"))


def test_crypto_symbol_drops_dash(monkeypatch):
    calls = []
    monkeypatch.setattr(fmp, "_get", _fake_get([{"price": 28000.5}], calls))
    assert asyncio.run(fmp.fetch_crypto_price("BTC-USD")) == 28000.5
    assert calls[0][0] == "quote/BTCUSD"


def test_news_mapping_skips_bad_rows(monkeypatch):
    monkeypatch.setattr(fmp, "_get", _fake_get([
        {"title": "Older", "site": "Reuters", "url": "https://x", "text": "a",
         "publishedDate": "2024-03-14 09:00:00"},
        {"title": "Newer", "publishedDate": "2024-03-15 09:00:00"},
        {"title": "Broken", "publishedDate": "yesterday"},
        {"publishedDate": "2024-03-15 10:00:00"},
    ]))
    items = asyncio.run(fmp.fetch_news("AAPL", 10))
    assert [i.title for i in items] == ["Newer", "Older"]
    assert items[0].source == "FMP"
    assert items[0].url == "#"
    assert items[1].source == "Reuters"
    assert items[1].published_at.tzinfo is not None


def _transport_get(handler):
    transport = httpx.MockTransport(handler)
    real_client = httpx.AsyncClient

    def client_factory(*args, **kwargs):
        kwargs["transport"] = transport
        return real_client(*args, **kwargs)
    return client_factory


@pytest.mark.parametrize("status,error", [
    (429, RateLimited),
    (404, SymbolNotFound),
    (500, UpstreamUnavailable),
])
def test_http_errors_are_mapped(monkeypatch, status, error):
    monkeypatch.setattr(fmp.httpx, "AsyncClient",
                        _transport_get(lambda request: httpx.Response(status, headers={"retry-after": "7"})))
    with pytest.raises(error) as exc:
        asyncio.run(fmp._get("quote/AAPL", {}))
    if error is RateLimited:
        assert exc.value.retry_after == 7.0


def test_transport_failure_is_unavailable(monkeypatch):
    def handler(request):
        raise httpx.ConnectError("boom", request=request)
    monkeypatch.setattr(fmp.httpx, "AsyncClient", _transport_get(handler))
    with pytest.raises(UpstreamUnavailable):
        asyncio.run(fmp._get("quote/AAPL", {}))


@pytest.mark.parametrize("payload", [
    {"Error Message": "Invalid API KEY. Please retry or visit our documentation."},
    [{"symbol": "AAPL", "price": None}],
    [{"symbol": "AAPL"}],
    "not a list",
])
def test_malformed_quote_payload_is_unavailable(monkeypatch, payload):
    monkeypatch.setattr(fmp, "_get", _fake_get(payload))
    with pytest.raises(UpstreamUnavailable):
        asyncio.run(fmp.fetch_stock_quote("AAPL"))
    with pytest.raises(UpstreamUnavailable):
        asyncio.run(fmp.fetch_crypto_price("BTC-USD"))


def test_malformed_quote_fields_are_unavailable(monkeypatch):
    monkeypatch.setattr(fmp, "_get", _fake_get([{"price": 180.0, "change": "n/a"}]))
    with pytest.raises(UpstreamUnavailable):
        asyncio.run(fmp.fetch_stock_quote("AAPL"))


def test_news_error_payload_is_unavailable(monkeypatch):
    monkeypatch.setattr(fmp, "_get", _fake_get({"Error Message": "Limit Reach"}))
    with pytest.raises(UpstreamUnavailable):
        asyncio.run(fmp.fetch_news("AAPL", 5))


def test_news_skips_rows_of_the_wrong_type(monkeypatch):
    monkeypatch.setattr(fmp, "_get", _fake_get([
        "junk",
        {"title": 42, "publishedDate": "2024-03-15 09:00:00"},
        {"title": "Dated by number", "publishedDate": 1710518400},
        {"title": "Kept", "publishedDate": "2024-03-15 09:00:00"},
    ]))
    items = asyncio.run(fmp.fetch_news("AAPL", 5))
    assert [i.title for i in items] == ["Kept"]


def test_non_json_body_is_unavailable(monkeypatch):
    monkeypatch.setattr(fmp.httpx, "AsyncClient",
                        _transport_get(lambda request: httpx.Response(200, text="<html>maintenance</html>")))
    with pytest.raises(UpstreamUnavailable):
        asyncio.run(fmp._get("quote/AAPL", {}))

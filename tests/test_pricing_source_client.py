import asyncio
import json

import httpx
import pytest

from pricing_api.integrations.clients.mocks.pricing_source import MockPricingSourceClient
from pricing_api.integrations.clients.real_http.pricing_source import RealPricingSourceClient
from pricing_api.integrations.policy.response_wrappers import PricingSourceError, normalize_pricing_response

BASE_URL = "https://pricing.example.test/ords/shop"


def _client(handler):
    return RealPricingSourceClient(base_url=BASE_URL + "/", transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_fetch_pricing_returns_decoded_body_and_sends_headers():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["accept"] = request.headers.get("Accept")
        seen["user_agent"] = request.headers.get("User-Agent")
        return httpx.Response(200, json={"items": [{"PER_PRODUCT_MONTHLY": 79}]})

    data = await _client(handler).fetch_pricing(timeout_seconds=10)

    assert data == {"items": [{"PER_PRODUCT_MONTHLY": 79}]}
    assert seen["url"] == f"{BASE_URL}/pricing"
    assert seen["accept"] == "application/json"
    assert seen["user_agent"] == "WooCommerce-Pricing/1.0"


@pytest.mark.asyncio
async def test_fetch_pricing_non_2xx_raises():
    def handler(request):
        return httpx.Response(503, json={"message": "down"})

    with pytest.raises(PricingSourceError) as exc_info:
        await _client(handler).fetch_pricing(timeout_seconds=5)

    assert "HTTP 503" in str(exc_info.value)
    assert exc_info.value.payload == {"status_code": 503}


@pytest.mark.asyncio
async def test_fetch_pricing_timeout_raises():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(PricingSourceError, match="timed out after 5s"):
        await _client(handler).fetch_pricing(timeout_seconds=5)


@pytest.mark.asyncio
async def test_fetch_pricing_total_time_is_bounded_for_trickling_body():
    async def trickle():
        yield b"{"
        for _ in range(20):
            await asyncio.sleep(0.02)
            yield b" "
        yield b"}"

    def handler(request):
        return httpx.Response(200, content=trickle())

    with pytest.raises(PricingSourceError, match="timed out after 0.1s"):
        await _client(handler).fetch_pricing(timeout_seconds=0.1)


@pytest.mark.asyncio
async def test_fetch_pricing_stalled_transport_times_out():
    async def handler(request):
        await asyncio.sleep(1)
        return httpx.Response(200, json={})

    with pytest.raises(PricingSourceError, match="timed out"):
        await _client(handler).fetch_pricing(timeout_seconds=0.05)


@pytest.mark.asyncio
async def test_fetch_pricing_network_error_raises():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(PricingSourceError, match="request failed"):
        await _client(handler).fetch_pricing(timeout_seconds=10)


@pytest.mark.asyncio
async def test_fetch_pricing_invalid_json_raises():
    def handler(request):
        return httpx.Response(200, content=b"<html>maintenance</html>")

    with pytest.raises(PricingSourceError, match="invalid JSON"):
        await _client(handler).fetch_pricing(timeout_seconds=10)


@pytest.mark.asyncio
async def test_fetch_pricing_scalar_json_raises():
    def handler(request):
        return httpx.Response(200, content=json.dumps("ok").encode())

    with pytest.raises(PricingSourceError, match="Unexpected pricing payload"):
        await _client(handler).fetch_pricing(timeout_seconds=10)


@pytest.mark.asyncio
async def test_mock_client_returns_ords_envelope():
    client = MockPricingSourceClient()
    data = await client.fetch_pricing(timeout_seconds=10)

    assert client.calls == 1
    assert data["items"][0]["PER_PRODUCT_MONTHLY"] == 99
    pricing = normalize_pricing_response(data)
    assert pricing.per_product_yearly == 891
    assert pricing.promo_active is False


@pytest.mark.asyncio
async def test_mock_client_custom_record_is_not_shared():
    client = MockPricingSourceClient(record={"promo_active": "Y"})
    first = await client.fetch_pricing(timeout_seconds=1)
    first["items"][0]["promo_active"] = "N"
    second = await client.fetch_pricing(timeout_seconds=1)
    assert second["items"][0]["promo_active"] == "Y"

"""
Real pricing source HTTP client.

Purpose:
- Fetches the current pricing record from the upstream Oracle APEX (ORDS)
  REST endpoint
- Hands back the decoded JSON untouched; shaping happens in
  integrations/policy/response_wrappers.py

Important:
- Keep this client as the ONLY place where upstream pricing HTTP calls are made.
- Exactly one attempt per call, bounded in total by the timeout. Every
  failure surfaces as PricingSourceError.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

import httpx

from pricing_api.integrations.policy.response_wrappers import PricingSourceError, ensure_pricing_payload
from pricing_api.utils.config_loader import ORACLE_BASE_URL

logger = logging.getLogger(__name__)


class RealPricingSourceClient:
    def __init__(
        self,
        base_url: str = ORACLE_BASE_URL,
        pricing_path: str = "/pricing",
        user_agent: str = "WooCommerce-Pricing/1.0",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.pricing_path = pricing_path
        self.user_agent = user_agent
        self.transport = transport

    @property
    def pricing_url(self) -> str:
        return f"{self.base_url}{self.pricing_path}"

    async def fetch_pricing(self, timeout_seconds: float) -> Any:
        # httpx timeouts apply per phase; wait_for bounds the whole request
        try:
            data = await asyncio.wait_for(self._get_json(timeout_seconds), timeout=timeout_seconds)
        except asyncio.TimeoutError as exc:
            raise PricingSourceError(f"Pricing source timed out after {timeout_seconds:g}s") from exc

        logger.debug("[pricing] Upstream response received: %s", data)
        return ensure_pricing_payload(data)

    async def _get_json(self, timeout_seconds: float) -> Any:
        headers: Dict[str, str] = {
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }

        try:
            async with httpx.AsyncClient(timeout=timeout_seconds, transport=self.transport) as client:
                response = await client.get(self.pricing_url, headers=headers)
                response.raise_for_status()
                return response.json()
        except httpx.TimeoutException as exc:
            raise PricingSourceError(f"Pricing source timed out after {timeout_seconds:g}s") from exc
        except httpx.HTTPStatusError as exc:
            raise PricingSourceError(
                f"Pricing source returned HTTP {exc.response.status_code}",
                payload={"status_code": exc.response.status_code},
            ) from exc
        except httpx.HTTPError as exc:
            raise PricingSourceError(f"Pricing source request failed: {exc}") from exc
        except ValueError as exc:
            raise PricingSourceError(f"Pricing source returned invalid JSON: {exc}") from exc

"""Fallback pricing.

This module provides the static pricing served when the upstream pricing
source cannot be reached, and the degraded-success payload built around it.
"""
from typing import Any, Dict

import logging

from pricing_api.integrations.contracts.pricing import CanonicalPricing

logger = logging.getLogger(__name__)


FALLBACK_PRICING = CanonicalPricing(
    per_product_monthly=99,
    per_product_yearly=891,
    bulk_update_monthly=349,
    bulk_update_yearly=3141,
    discount_percentage=25,
    promo_text="",
    promo_active=False,
)


class FallbackHandler:
    """Builds fallback pricing responses and logs each trigger."""

    def __init__(self, pricing: CanonicalPricing = FALLBACK_PRICING):
        self.pricing = pricing

    def fallback(self) -> CanonicalPricing:
        return self.pricing

    def generate_fallback(self, error: Exception) -> Dict[str, Any]:
        logger.warning("[pricing] Serving fallback pricing: %s", error)
        return {
            "success": True,
            "pricing": self.pricing.to_display(),
            "cached": True,
            "fallback": True,
            "error": str(error),
        }

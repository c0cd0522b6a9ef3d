"""
Integrations layer.
This package contains all code used to communicate with the upstream
pricing source (Oracle APEX / ORDS REST endpoint).

Key rule:
- Endpoints MUST NOT call the upstream directly.
- Endpoints call a pricing source client (under integrations/clients).
- The MOCK client is used for offline development; the REAL_HTTP client otherwise.

Switching implementations:
- The selection of mock vs real clients happens in ONE place
  (pricing_api/api/endpoints/pricing.py:get_pricing_source).
"""

from .contracts.pricing import BillingType, CanonicalPricing, PlanType
from .policy.response_wrappers import PricingSourceError, normalize_pricing_response

__all__ = [
    "BillingType", "CanonicalPricing", "PlanType",
    "PricingSourceError", "normalize_pricing_response",
]

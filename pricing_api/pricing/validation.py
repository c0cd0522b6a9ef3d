"""
Payment amount validation against the current canonical pricing.
"""

from __future__ import annotations

import logging
from typing import Union

from pricing_api.integrations.contracts.pricing import BillingType, CanonicalPricing, PlanType

logger = logging.getLogger(__name__)

# Allow 1 cent difference for rounding on either side
AMOUNT_TOLERANCE = 0.01

_PER_PRODUCT_PLANS = {PlanType.PER_PRODUCT.value, PlanType.PER_PRODUCT_YEARLY.value}
_BULK_UPDATE_PLANS = {PlanType.BULK_UPDATE.value, PlanType.BULK_UPDATE_YEARLY.value}


def _value(identifier: Union[str, PlanType, BillingType, None]) -> str:
    return getattr(identifier, "value", identifier) or ""


def expected_amount(plan_type, billing_type, pricing: CanonicalPricing) -> float:
    """
    Resolve the price a client should pay for a plan/billing combination.

    A ``*_yearly`` plan is yearly regardless of ``billing_type``. Unknown plans
    resolve to 0, meaning "no known price".
    """
    plan = _value(plan_type)
    yearly = _value(billing_type) == BillingType.YEARLY.value

    if plan in _PER_PRODUCT_PLANS:
        if yearly or plan == PlanType.PER_PRODUCT_YEARLY.value:
            return pricing.per_product_yearly
        return pricing.per_product_monthly

    if plan in _BULK_UPDATE_PLANS:
        if yearly or plan == PlanType.BULK_UPDATE_YEARLY.value:
            return pricing.bulk_update_yearly
        return pricing.bulk_update_monthly

    logger.warning("Unknown plan_type %r; expected amount defaults to 0", plan)
    return 0


def is_valid_amount(plan_type, billing_type, amount: float, pricing: CanonicalPricing) -> bool:
    expected = expected_amount(plan_type, billing_type, pricing)
    return abs(amount - expected) <= AMOUNT_TOLERANCE

"""
Pricing contract: canonical pricing model, display shape and plan identifiers.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class PlanType(str, Enum):
    PER_PRODUCT = "per_product"
    PER_PRODUCT_YEARLY = "per_product_yearly"
    BULK_UPDATE = "bulk_update"
    BULK_UPDATE_YEARLY = "bulk_update_yearly"


class BillingType(str, Enum):
    MONTHLY = "monthly"
    YEARLY = "yearly"


# Display keys used by the storefront for each product line
MONTHLY_KEY = "1 month"
YEARLY_KEY = "12 months"


# ---------------------------------------------------------------------------
# Canonical model
# ---------------------------------------------------------------------------

class CanonicalPricing(BaseModel):
    """Normalized pricing used for every computation and response."""

    model_config = ConfigDict(frozen=True)

    per_product_monthly: float
    per_product_yearly: float
    bulk_update_monthly: float
    bulk_update_yearly: float
    discount_percentage: int
    promo_text: str = ""
    promo_active: bool = False

    def to_display(self) -> Dict[str, Any]:
        return {
            "per_product": {
                MONTHLY_KEY: self.per_product_monthly,
                YEARLY_KEY: self.per_product_yearly,
            },
            "bulk_update": {
                MONTHLY_KEY: self.bulk_update_monthly,
                YEARLY_KEY: self.bulk_update_yearly,
            },
            "discount_percentage": self.discount_percentage,
            "promo_text": self.promo_text,
            "promo_active": self.promo_active,
        }

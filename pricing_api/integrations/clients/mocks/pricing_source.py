"""
Mock pricing source client.

Returns an ORDS-style collection envelope shaped like the live APEX
endpoint, with uppercase column names. Does NOT make any network calls.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, Optional

MOCK_PRICING_RECORD: Dict[str, Any] = {
    "PER_PRODUCT_MONTHLY": 99,
    "BULK_UPDATE_MONTHLY": 349,
    "DISCOUNT_PERCENTAGE": 25,
    "PROMO_TEXT": "",
    "PROMO_ACTIVE": "N",
}


class MockPricingSourceClient:
    def __init__(self, record: Optional[Dict[str, Any]] = None) -> None:
        self.record = dict(record) if record is not None else dict(MOCK_PRICING_RECORD)
        self.calls = 0

    async def fetch_pricing(self, timeout_seconds: float) -> Dict[str, Any]:
        self.calls += 1
        return {
            "items": [copy.deepcopy(self.record)],
            "hasMore": False,
            "limit": 25,
            "offset": 0,
            "count": 1,
        }

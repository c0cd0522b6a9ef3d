from __future__ import annotations

import logging
import math
from typing import Any, Callable, Dict, Optional, Tuple

from pricing_api.integrations.contracts.pricing import CanonicalPricing
from pricing_api.pricing.calculator import yearly_price

logger = logging.getLogger(__name__)


class PricingSourceError(ValueError):
    def __init__(self, message: str, *, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.payload = payload or {}


# Candidate keys per field, tried in order (lowercase wins over uppercase)
PER_PRODUCT_MONTHLY_KEYS: Tuple[str, ...] = ("per_product_monthly", "PER_PRODUCT_MONTHLY")
BULK_UPDATE_MONTHLY_KEYS: Tuple[str, ...] = ("bulk_update_monthly", "BULK_UPDATE_MONTHLY")
DISCOUNT_PERCENTAGE_KEYS: Tuple[str, ...] = ("discount_percentage", "DISCOUNT_PERCENTAGE")
PROMO_TEXT_KEYS: Tuple[str, ...] = ("promo_text", "PROMO_TEXT")
PROMO_ACTIVE_KEYS: Tuple[str, ...] = ("promo_active", "PROMO_ACTIVE")

DEFAULT_PER_PRODUCT_MONTHLY = 99.0
DEFAULT_BULK_UPDATE_MONTHLY = 349.0
DEFAULT_DISCOUNT_PERCENTAGE = 25
DEFAULT_PROMO_TEXT = ""
DEFAULT_PROMO_ACTIVE = False

# Raw promo flag values that mean "active"; anything else is inactive
_PROMO_ACTIVE_STRINGS = {"Y", "true"}


def normalize_pricing_response(raw: Any) -> CanonicalPricing:
    """
    Map an upstream pricing record (flat, ORDS ``items`` envelope or bare list)
    onto ``CanonicalPricing``.

    Never raises: every missing or unparseable field degrades to its default
    independently of the others. A candidate key whose value cannot be parsed
    counts as absent, so the next candidate key is tried before the default.
    Numbers that would make a yearly price overflow are unparseable.
    """
    data = _unwrap_record(raw)

    discount_percentage = _first_parseable(
        data,
        DISCOUNT_PERCENTAGE_KEYS,
        _parse_discount,
        DEFAULT_DISCOUNT_PERCENTAGE,
        "discount_percentage",
    )
    per_product_monthly = _first_parseable(
        data,
        PER_PRODUCT_MONTHLY_KEYS,
        lambda value: _parse_monthly(value, discount_percentage),
        DEFAULT_PER_PRODUCT_MONTHLY,
        "per_product_monthly",
    )
    bulk_update_monthly = _first_parseable(
        data,
        BULK_UPDATE_MONTHLY_KEYS,
        lambda value: _parse_monthly(value, discount_percentage),
        DEFAULT_BULK_UPDATE_MONTHLY,
        "bulk_update_monthly",
    )
    promo_text = _first_non_empty(data, *PROMO_TEXT_KEYS, default=DEFAULT_PROMO_TEXT)
    promo_active = _is_promo_active(_first_non_empty(data, *PROMO_ACTIVE_KEYS))

    return CanonicalPricing(
        per_product_monthly=per_product_monthly,
        per_product_yearly=yearly_price(per_product_monthly, discount_percentage),
        bulk_update_monthly=bulk_update_monthly,
        bulk_update_yearly=yearly_price(bulk_update_monthly, discount_percentage),
        discount_percentage=discount_percentage,
        promo_text=str(promo_text),
        promo_active=promo_active,
    )


def ensure_pricing_payload(data: Any) -> Any:
    """Reject decoded upstream bodies that cannot hold a pricing record."""
    if isinstance(data, (dict, list)):
        return data
    raise PricingSourceError(
        f"Unexpected pricing payload type '{type(data).__name__}'.",
        payload={"body": data},
    )


def _unwrap_record(raw: Any) -> Dict[str, Any]:
    record = raw
    if isinstance(raw, dict):
        items = raw.get("items")
        if isinstance(items, list) and items:
            record = items[0]
    elif isinstance(raw, list):
        record = raw[0] if raw else {}

    if not isinstance(record, dict):
        logger.warning("Pricing record is %s, not an object; using defaults", type(record).__name__)
        return {}
    return record


def _is_present(value: Any) -> bool:
    if value is None:
        return False
    return not (isinstance(value, str) and not value.strip())


def _first_non_empty(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        value = data.get(key)
        if _is_present(value):
            return value
    return default


def _first_parseable(
    data: Dict[str, Any],
    keys: Tuple[str, ...],
    parse: Callable[[Any], Optional[Any]],
    default: Any,
    label: str,
) -> Any:
    for key in keys:
        value = data.get(key)
        if not _is_present(value):
            continue
        parsed = parse(value)
        if parsed is not None:
            return parsed
        logger.warning("Invalid %s %r under %s; trying next key", label, value, key)
    return default


def _parse_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(number):
        return None
    return number


def _parse_discount(value: Any) -> Optional[int]:
    number = _parse_float(value)
    if number is None:
        return None
    discount = int(number)
    # must leave both default monthly prices with a finite yearly price
    for monthly in (DEFAULT_PER_PRODUCT_MONTHLY, DEFAULT_BULK_UPDATE_MONTHLY):
        if not math.isfinite(yearly_price(monthly, discount)):
            return None
    return discount


def _parse_monthly(value: Any, discount_percentage: int) -> Optional[float]:
    number = _parse_float(value)
    if number is None or not math.isfinite(yearly_price(number, discount_percentage)):
        return None
    return number


def _is_promo_active(value: Any) -> bool:
    if value is True:
        return True
    return isinstance(value, str) and value in _PROMO_ACTIVE_STRINGS

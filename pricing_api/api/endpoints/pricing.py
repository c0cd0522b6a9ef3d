import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from pricing_api.error_handler import ErrorHandler, utc_timestamp
from pricing_api.fallback_handler import FallbackHandler
from pricing_api.integrations.clients.mocks.pricing_source import MockPricingSourceClient
from pricing_api.integrations.clients.real_http.pricing_source import RealPricingSourceClient
from pricing_api.integrations.policy.response_wrappers import PricingSourceError, normalize_pricing_response
from pricing_api.pricing.validation import expected_amount, is_valid_amount
from pricing_api.utils.config_loader import ServiceConfig

logger = logging.getLogger(__name__)

api = APIRouter()
pricing_api = api

fallback_handler = FallbackHandler()
error_handler = ErrorHandler()

MISSING_FIELDS_MESSAGE = "Missing required fields: plan_type, billing_type, amount"


class ValidatePricingRequest(BaseModel):
    plan_type: Optional[str] = Field(default=None, description="per_product, per_product_yearly, bulk_update or bulk_update_yearly")
    billing_type: Optional[str] = Field(default=None, description="monthly or yearly")
    amount: Optional[float] = Field(default=None, allow_inf_nan=False, description="Amount the client intends to charge")


def get_service_config(request: Request) -> ServiceConfig:
    return request.app.state.config


def get_pricing_source(cfg: ServiceConfig = Depends(get_service_config)):
    if cfg.integrations_mode == "mock":
        return MockPricingSourceClient()
    return RealPricingSourceClient(
        base_url=cfg.upstream.base_url,
        pricing_path=cfg.upstream.pricing_path,
        user_agent=cfg.upstream.user_agent,
    )


@api.get("/pricing", tags=["Pricing"])
async def get_pricing(
    source=Depends(get_pricing_source),
    cfg: ServiceConfig = Depends(get_service_config),
):
    """Current pricing; falls back to static pricing when the upstream fails."""
    try:
        logger.info("[pricing] Fetching pricing data from upstream...")
        raw = await source.fetch_pricing(cfg.upstream.pricing_timeout_seconds)
    except PricingSourceError as e:
        logger.error("[pricing] Error fetching pricing: %s", e)
        return {**fallback_handler.generate_fallback(e), "timestamp": utc_timestamp()}

    pricing = normalize_pricing_response(raw)
    return {
        "success": True,
        "pricing": pricing.to_display(),
        "cached": False,
        "timestamp": utc_timestamp(),
    }


@api.post("/validate-pricing", tags=["Pricing"])
async def validate_pricing(
    payload: Optional[ValidatePricingRequest] = None,
    source=Depends(get_pricing_source),
    cfg: ServiceConfig = Depends(get_service_config),
):
    """Check a client payment amount against the current upstream price."""
    payload = payload or ValidatePricingRequest()
    logger.info(
        "[validate] Validating pricing: plan_type=%s billing_type=%s amount=%s",
        payload.plan_type,
        payload.billing_type,
        payload.amount,
    )

    # zero and empty values count as missing
    if not payload.plan_type or not payload.billing_type or not payload.amount:
        return JSONResponse(status_code=400, content=error_handler.bad_request(MISSING_FIELDS_MESSAGE))

    try:
        raw = await source.fetch_pricing(cfg.upstream.validation_timeout_seconds)
    except PricingSourceError as e:
        logger.error("[validate] Error validating pricing: %s", e)
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "Failed to validate pricing", "details": str(e)},
        )

    pricing = normalize_pricing_response(raw)
    return {
        "success": True,
        "valid": is_valid_amount(payload.plan_type, payload.billing_type, payload.amount, pricing),
        "expected_amount": expected_amount(payload.plan_type, payload.billing_type, pricing),
        "provided_amount": payload.amount,
        "timestamp": utc_timestamp(),
    }

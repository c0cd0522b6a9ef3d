"""Error payload helpers for the pricing API."""
from datetime import datetime, timezone
from typing import Any, Dict
import logging

logger = logging.getLogger(__name__)

AVAILABLE_ENDPOINTS = [
    "GET /",
    "GET /pricing",
    "POST /validate-pricing",
]


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


class ErrorHandler:
    def handle_exception(self, exc: Exception, context: Dict[str, Any] = None) -> Dict[str, Any]:
        logger.error("[error] Unhandled exception: %s (context=%s)", exc, context or {}, exc_info=exc)
        return {
            "success": False,
            "error": "Internal server error",
            "timestamp": utc_timestamp(),
        }

    def not_found(self) -> Dict[str, Any]:
        return {
            "success": False,
            "error": "Endpoint not found",
            "available_endpoints": list(AVAILABLE_ENDPOINTS),
        }

    def bad_request(self, message: str, details: Any = None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"success": False, "error": message}
        if details is not None:
            payload["details"] = details
        return payload

"""
FastAPI application - Main entry point
"""

from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pricing_api.api.endpoints.pricing import pricing_api
from pricing_api.api.middleware import SECURITY_HEADERS, SecurityHeadersMiddleware
from pricing_api.error_handler import AVAILABLE_ENDPOINTS, ErrorHandler, utc_timestamp
from pricing_api.utils.config_loader import load_service_config

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Load service configuration once per process
service_config = load_service_config()
error_handler = ErrorHandler()

# Initialize FastAPI app
app = FastAPI(
    title=service_config.service_name,
    description="Pricing proxy in front of the Oracle APEX pricing source",
    version=service_config.version,
)
app.state.config = service_config

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)
app.add_middleware(SecurityHeadersMiddleware)

app.include_router(pricing_api)


# ============================================================================
# ERROR HANDLERS
# ============================================================================
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # unknown path or unsupported method on a known path
    if exc.status_code in (404, 405):
        return JSONResponse(status_code=404, content=error_handler.not_found())
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info("[validate] Rejected request body on %s: %s", request.url.path, exc.errors())
    details = [{"loc": list(err.get("loc", ())), "msg": err.get("msg", "")} for err in exc.errors()]
    return JSONResponse(status_code=400, content=error_handler.bad_request("Invalid request body", details))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    payload = error_handler.handle_exception(exc, context={"path": request.url.path, "method": request.method})
    # raised errors skip the middleware stack, so attach its headers here
    return JSONResponse(status_code=500, content=payload, headers=dict(SECURITY_HEADERS))


# ============================================================================
# ENDPOINTS
# ============================================================================
@app.get("/", tags=["Health"])
async def root():
    """Health check endpoint."""
    return {
        "service": service_config.service_name,
        "version": service_config.version,
        "status": "running",
        "timestamp": utc_timestamp(),
    }


# ============================================================================
# STARTUP/SHUTDOWN EVENTS
# ============================================================================
@app.on_event("startup")
async def startup_event():
    """Log the effective configuration on startup"""
    cfg = app.state.config
    logger.info("Starting %s on port %s...", cfg.service_name, cfg.server.port)
    logger.info("Upstream pricing URL: %s%s (mode=%s)", cfg.upstream.base_url, cfg.upstream.pricing_path, cfg.integrations_mode)
    logger.info("Available endpoints: %s", ", ".join(AVAILABLE_ENDPOINTS))


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info("Shutting down %s...", app.state.config.service_name)

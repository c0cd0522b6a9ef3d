"""
Configuration loader for the pricing API
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "service_config.yml"

ORACLE_BASE_URL = "https://apexers.nl/ords/pwz/prod_enhancer"


class ServerConfig(BaseModel):
    """HTTP listener configuration"""

    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)


class UpstreamConfig(BaseModel):
    """Upstream pricing source configuration"""

    base_url: str = ORACLE_BASE_URL
    pricing_path: str = "/pricing"
    user_agent: str = "WooCommerce-Pricing/1.0"
    pricing_timeout_seconds: float = Field(default=10.0, gt=0)
    validation_timeout_seconds: float = Field(default=5.0, gt=0)


class ServiceConfig(BaseModel):
    """Complete service configuration"""

    service_name: str = "WooCommerce Pricing API"
    version: str = "1.0.0"
    integrations_mode: Literal["real", "mock"] = "real"
    server: ServerConfig = Field(default_factory=ServerConfig)
    upstream: UpstreamConfig = Field(default_factory=UpstreamConfig)


def load_service_config(config_path: Optional[Path] = None) -> ServiceConfig:
    """
    Load and validate service configuration from YAML, then apply environment
    overrides (PORT, PRICING_UPSTREAM_URL, INTEGRATIONS_MODE).

    Args:
        config_path: Path to config file. Defaults to $PRICING_CONFIG_PATH,
            then config/service_config.yml

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        ValidationError: If config or overrides don't match schema
    """
    data: dict = {}
    if config_path is None and os.getenv("PRICING_CONFIG_PATH"):
        config_path = Path(os.environ["PRICING_CONFIG_PATH"])
    if config_path is not None and not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    path = config_path or DEFAULT_CONFIG_PATH
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    else:
        logger.info("No config file at %s; using built-in defaults", path)

    _apply_env_overrides(data)

    try:
        cfg = ServiceConfig(**data)
        logger.info("Loaded service config (port=%s, upstream=%s)", cfg.server.port, cfg.upstream.base_url)
        return cfg
    except ValidationError as e:
        logger.error("Service config validation failed: %s", e)
        raise


def _apply_env_overrides(data: dict) -> None:
    port = os.getenv("PORT", "").strip()
    if port:
        data.setdefault("server", {})["port"] = port

    upstream_url = os.getenv("PRICING_UPSTREAM_URL", "").strip()
    if upstream_url:
        data.setdefault("upstream", {})["base_url"] = upstream_url.rstrip("/")

    mode = os.getenv("INTEGRATIONS_MODE", "").strip().lower()
    if mode in {"real", "live"}:
        data["integrations_mode"] = "real"
    elif mode in {"mock", "test"}:
        data["integrations_mode"] = "mock"

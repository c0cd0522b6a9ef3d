#!/usr/bin/env python3
"""
Run the pricing API with uvicorn.

Port resolution: --port, then PORT env, then config/service_config.yml (3000).
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

# Add repo root to path so `pricing_api.*` imports work when running from scripts/
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

load_dotenv()

import uvicorn

from pricing_api.utils.config_loader import load_service_config


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def main() -> int:
    parser = argparse.ArgumentParser(description="Run the WooCommerce pricing API")
    parser.add_argument("--config", type=Path, default=None, help="Path to service_config.yml")
    parser.add_argument("--host", default=None, help="Override host from config")
    parser.add_argument("--port", type=int, default=None, help="Override port from config / PORT env")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log upstream payloads (DEBUG)")
    args = parser.parse_args()

    setup_logging(args.verbose)
    if args.config is not None:
        # the app module loads its own config on import
        os.environ["PRICING_CONFIG_PATH"] = str(args.config)
    cfg = load_service_config(args.config)
    host = args.host or cfg.server.host
    port = args.port or cfg.server.port

    logging.getLogger(__name__).info("Pricing API listening on %s:%s (upstream %s)", host, port, cfg.upstream.base_url)
    uvicorn.run(
        "pricing_api.api.main:app",
        host=host,
        port=port,
        log_level="debug" if args.verbose else "info",
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

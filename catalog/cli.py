#!/usr/bin/env python3
"""
Run the catalog gateway.

    catalog-api --api-port 8000 --racing-db ./racing.db --sports-db ./sports.db
"""
from __future__ import annotations

import argparse
import logging
import sys

import uvicorn

from .config import load_config
from .logs import configure_logging

logger = logging.getLogger("catalog.cli")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="catalog-api", description="Racing and sports catalog API server")
    p.add_argument("--config", dest="config_path", default=None, help="path to config.yaml")
    p.add_argument("--api-host", default=None, help="API listen host (default localhost)")
    p.add_argument("--api-port", type=int, default=None, help="API listen port (default 8000)")
    p.add_argument("--racing-db", dest="racing_db_path", default=None, help="racing SQLite database file")
    p.add_argument("--sports-db", dest="sports_db_path", default=None, help="sports SQLite database file")
    p.add_argument("--log-db", dest="log_db_path", default=None, help="operation log SQLite database file")
    p.add_argument("--seed-count", type=int, default=None, help="rows seeded per catalog (default 100)")
    p.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    return p


def main(argv: list[str] | None = None) -> int:
    args = vars(build_parser().parse_args(argv))
    config_path = args.pop("config_path")
    try:
        cfg = load_config(config_path, **args)
    except (TypeError, ValueError) as e:
        print(f"invalid configuration: {e}", file=sys.stderr)
        return 2

    configure_logging(cfg.log_level)
    from .api import create_app

    logger.info("API server listening on: %s:%d", cfg.api_host, cfg.api_port)
    try:
        uvicorn.run(create_app(cfg), host=cfg.api_host, port=cfg.api_port, log_level=cfg.log_level.lower())
    except Exception as e:
        logger.error("failed running api server: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

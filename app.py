#!/usr/bin/env python3
"""
Main entry point for the shrtn URL shortener.

Concurrency: one async task per request (FastAPI + asyncpg connection pool).
Set WORKERS > 1 for multi-process scaling across CPU cores (each worker has
its own pool).

Usage:
    python app.py

Environment variables:
    STORE_URL - Mapping store URL (questdb://... or memory://)
    STORE_CREATE_TABLES - Set to '1' to enable table creation
    STORE_TIMEOUT_SECONDS - Bound on each store call
    URL_POLICY - 'strict' (default) or 'lenient'
    UNIQUE_CODES - Set to 'true' to regenerate colliding short codes
    PORT - Port to listen on
    WORKERS - Number of uvicorn worker processes (default 1)
    LOG_LEVEL - Logging level
"""

import logging
import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import Config, load_config
from shrtn.database import create_store
from shrtn.service import ShortenerService
from shrtn.shortcode import ShortCodeGenerator
from shrtn.common.logging_config import setup_logging
from web_app import create_app


def build_service(config: Config, logger: logging.Logger) -> ShortenerService:
    """Wire the store, generator and service from configuration."""
    store = create_store(
        config.store_url,
        partition_key=config.partition_key,
        timeout_seconds=config.store_timeout_seconds,
        pool_max_size=config.store_pool_max_size,
        logger=logger,
    )
    generator = ShortCodeGenerator(default_length=config.short_code_length)
    return ShortenerService(
        store=store,
        short_code_generator=generator,
        logger=logger,
        url_policy=config.url_policy,
        url_max_length=config.url_max_length,
        unique_codes=config.unique_codes,
        max_collision_retries=config.max_collision_retries,
        recent_limit=config.recent_limit,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info("Starting shrtn...")
    logger.info(f"Connecting to mapping store at {config.store_url}")
    service = build_service(config, logger)
    app.state.service = service
    logger.info(f"Service started (url_policy={config.url_policy}, unique_codes={config.unique_codes})")

    yield

    logger.info("Shutting down shrtn...")
    await service.close()
    logger.info("Service stopped")


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("Shrtn URL Shortener")
    logger.info(f"Configuration: {config.model_dump()}")

    # Service is built by the lifespan hook, inside the server's event loop
    app = create_app(config=config, lifespan=lifespan)
    app.state.logger = logger

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        workers=config.workers,
        log_level=config.log_level.lower(),
        access_log=True,
    )

    server = uvicorn.Server(uvicorn_config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

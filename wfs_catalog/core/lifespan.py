"""
FastAPI application lifespan management.

Handles startup and shutdown:
  - Logging setup
  - Capabilities cache reset
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from wfs_catalog.core.logging import setup_logging, get_logger
from wfs_catalog.domain.capabilities import WebFeatureServiceCapabilities

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Manage application lifecycle.

    Startup:
      1. Configure logging

    Shutdown:
      1. Drop cached capabilities documents
    """
    # ── Startup ──────────────────────────────────────────────
    setup_logging()
    logger.info("Starting WFS catalog service...")

    yield

    # ── Shutdown ─────────────────────────────────────────────
    logger.info("Shutting down WFS catalog service...")
    WebFeatureServiceCapabilities.clear_cache()
    logger.info("Shutdown complete")

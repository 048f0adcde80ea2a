"""FastAPI application factory"""

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel

import src.domain  # noqa: F401  registers every table on SQLModel.metadata
from src.api.error import ClientError, client_error_handler, validation_error_handler
from src.api.routes import (
    parties,
    invoices,
    items,
    payments,
    recharges,
    resellers,
    wallet,
    reconciliation,
    audit,
)

logger = logging.getLogger(__name__)


def create_app(config) -> FastAPI:
    """
    Create and configure the FastAPI application

    Args:
        config: ApplicationConfig-like object

    Returns:
        Configured FastAPI app
    """
    logging.basicConfig(
        level=getattr(logging, str(config.LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        if config.AUTO_CREATE_TABLES:
            from src.depends import engine

            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
            logger.info("Database tables ensured")
        yield

    app = FastAPI(
        title="ISP Billing Service",
        description="Balances, invoices, payments, customer recharges and reseller transfers",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=config.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if config.ENABLE_LOGGING_MIDDLEWARE:
        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            start = time.time()
            response = await call_next(request)
            elapsed_ms = int((time.time() - start) * 1000)
            logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms}ms)")
            return response

    app.add_exception_handler(ClientError, client_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    routers = (parties, invoices, items, payments, recharges, resellers, wallet, reconciliation, audit)
    for module in routers:
        app.include_router(module.router, prefix=config.API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok"}

    return app

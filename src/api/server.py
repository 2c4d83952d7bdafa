# src/api/server.py

"""HTTP API exposing the priced catalog and the current gold price."""

import asyncio
import contextlib
import logging
from collections.abc import AsyncIterator
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware

from src.config.settings import Settings
from src.filters.criteria_parser import parse_filter_params
from src.services.catalog_service import CatalogService
from src.services.gold_price import GoldPriceHolder, GoldPriceRefresher

logger = logging.getLogger("ring_catalog.api")


def create_app(
    service: CatalogService | None = None,
    refresher: GoldPriceRefresher | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    The service and refresher share one :class:`GoldPriceHolder`.  The
    lifespan handler refreshes once at startup and then keeps a
    background task refreshing on ``GOLD_PRICE_REFRESH_INTERVAL``.
    """
    if service is None:
        holder = refresher.holder if refresher else GoldPriceHolder()
        service = CatalogService(price_holder=holder)
    if refresher is None:
        refresher = GoldPriceRefresher(service.price_holder)

    @contextlib.asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        refresher.refresh()
        task = asyncio.create_task(
            refresher.run_periodically(Settings.GOLD_PRICE_REFRESH_INTERVAL)
        )
        try:
            yield
        finally:
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task
            logger.info("Gold price refresh task stopped")

    app = FastAPI(
        title=Settings.APP_NAME,
        version=Settings.APP_VERSION,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=Settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.catalog_service = service
    app.state.gold_price_refresher = refresher

    @app.get("/")
    def root() -> dict[str, Any]:
        return {
            "message": Settings.APP_NAME,
            "status": "running",
            "version": Settings.APP_VERSION,
            "endpoints": {
                "products": "/api/products",
                "goldPrice": "/api/gold-price",
            },
            "frontend": Settings.FRONTEND_URL,
        }

    @app.get("/api/products")
    def list_products(request: Request) -> JSONResponse:
        """Priced catalog, optionally filtered by price/popularity bounds."""
        try:
            criteria = parse_filter_params(request.query_params)
            result = service.list_products(criteria)
            # Rendering rejects NaN, so it must stay inside the guard
            return JSONResponse(content=result.to_payload())
        except Exception as exc:
            logger.error("Error fetching products", exc_info=True)
            return JSONResponse(
                status_code=500,
                content={
                    "success": False,
                    "message": "Error fetching products",
                    "error": str(exc),
                },
            )

    @app.get("/api/gold-price")
    def gold_price() -> dict[str, Any]:
        return service.gold_price_quote().to_payload()

    return app


def run_server(host: str = Settings.HOST, port: int = Settings.PORT) -> None:
    """Serve the API with uvicorn until interrupted."""
    import uvicorn

    logger.info("Server running on port %d", port)
    logger.info("  GET /api/products - Get all products")
    logger.info("  GET /api/gold-price - Get current gold price")
    logger.info(
        "  Filter params: minPrice, maxPrice, minPopularity, maxPopularity"
    )
    uvicorn.run(create_app(), host=host, port=port, log_config=None)

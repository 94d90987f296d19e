# store/api/__init__.py
import asyncio
from contextlib import asynccontextmanager, suppress

from fastapi import FastAPI

from store.api.routers import carts, health, orders, products
from store.repos.cart_repo import SessionCartRepo
from store.repos.catalog_repo import CatalogRepo
from store.repos.order_repo import OrderRepo
from store.tasks.expire import run_expiry_loop
from store.utils.settings import ORDER_ID_START
from store.utils.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    sweeper = asyncio.create_task(run_expiry_loop(app.state.sessions, app.state.orders))
    logger.info("Cart expiry loop started")
    try:
        yield
    finally:
        sweeper.cancel()
        with suppress(asyncio.CancelledError):
            await sweeper


def create_app() -> FastAPI:
    app = FastAPI(
        title="Online Store",
        version="1.0.0",
        lifespan=lifespan,
    )

    #caly stan sklepu w pamieci, ginie przy restarcie
    catalog = CatalogRepo()
    catalog.initialize()
    if ORDER_ID_START < catalog.max_id():
        raise ValueError(
            f"ORDER_ID_START={ORDER_ID_START} musi byc >= najwiekszemu id produktu ({catalog.max_id()})"
        )
    app.state.catalog = catalog
    app.state.sessions = SessionCartRepo()
    app.state.orders = OrderRepo()

    # Include routers
    app.include_router(health.router)
    app.include_router(products.router)
    app.include_router(carts.router)
    app.include_router(orders.router)

    return app

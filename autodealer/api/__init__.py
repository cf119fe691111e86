# autodealer/api/__init__.py
from contextlib import asynccontextmanager

from fastapi import FastAPI

from autodealer.api.routers import brands, car_models, cars, customers, parts, purchases
from autodealer.api.routers.health import router as health_router
from autodealer.data.database import init_db
from autodealer.utils.settings import AUTO_CREATE_TABLES
from autodealer.utils.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if AUTO_CREATE_TABLES:
        logger.info("AUTO_CREATE_TABLES set, creating tables from models")
        init_db()
    else:
        logger.info("Skipping table creation, run `alembic upgrade head` to apply migrations")
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="AutoDealer API",
        version="1.0.0",
        lifespan=lifespan,
    )

    @app.get("/")
    def root():
        return {"message": "AutoDealer API is working!"}

    # Include routers
    app.include_router(health_router)
    app.include_router(brands.router)
    app.include_router(car_models.router)
    app.include_router(cars.router)
    app.include_router(customers.router)
    app.include_router(parts.router)
    app.include_router(purchases.router)

    return app

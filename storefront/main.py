# storefront/main.py
from fastapi import FastAPI
import uvicorn

from storefront.data.database import Base, SessionLocal, engine
from storefront.data.seed import seed_products
from storefront.api.routers import carts, health, users
from storefront.utils.settings import SEED_PRODUCTS
from storefront.utils.logging import get_logger

# all models must be imported before create_all
import storefront.data.models  # noqa: F401

logger = get_logger(__name__)


def init_db():
    logger.info(f"Initializing database, models registered: {list(Base.metadata.tables.keys())}")
    try:
        Base.metadata.create_all(bind=engine)
    except Exception as e:
        logger.error(f"Failed to create tables: {e}")
        raise
    logger.info("Database tables created")

    if SEED_PRODUCTS:
        db = SessionLocal()
        try:
            seed_products(db)
        finally:
            db.close()


def create_app() -> FastAPI:
    init_db()

    app = FastAPI(
        title="Storefront Service",
        version="1.0.0",
    )

    # Include routers
    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(carts.router)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)

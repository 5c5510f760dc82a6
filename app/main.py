# app/main.py
from contextlib import asynccontextmanager
import logging

from fastapi.middleware.cors import CORSMiddleware
from fastapi import FastAPI

from app.core.config import Settings, get_settings
from app.core.errors import register_exception_handlers
from app.core.logging_config import configure_logging
from app.database import create_db_and_tables, create_db_engine

# Import models so SQLModel metadata is populated before create_all()
from app.models import product as _product_models  # noqa: F401
from app.models import user as _user_models  # noqa: F401
from app.models import cart as _cart_models  # noqa: F401
from app.models import order as _order_models  # noqa: F401


# Routers
from app.routers.products import router as products_router
from app.routers.users import router as users_router
from app.routers.wishlist import router as wishlist_router
from app.routers.cart import router as cart_router
from app.routers.orders import router as orders_router

logger = logging.getLogger("uvicorn")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    The database engine is owned by the app: opened in the lifespan
    startup, exposed to requests via `app.state.engine` (see
    app.database.get_session), disposed on shutdown.
    """
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan handler.

        Startup:
          - Create the engine, verify DB connectivity and create tables.
            A failure here is fatal.

        Shutdown:
          - Dispose the engine's connection pool.
        """
        logger.info("🔄 Startup: Connecting to database...")
        engine = create_db_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
        try:
            create_db_and_tables(engine)
            logger.info("✅ Startup: DB connection OK, tables verified.")
        except Exception as e:
            logger.error(f"❌ Startup: DB connection FAILED: {e}")
            engine.dispose()
            raise
        app.state.engine = engine
        yield
        engine.dispose()
        logger.info("Shutdown: DB engine disposed.")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="0.1.0",
        lifespan=lifespan,
    )

    # --- CORS configuration ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(products_router, prefix=settings.API_PREFIX)
    app.include_router(users_router, prefix=settings.API_PREFIX)
    app.include_router(wishlist_router, prefix=settings.API_PREFIX)
    app.include_router(cart_router, prefix=settings.API_PREFIX)
    app.include_router(orders_router, prefix=settings.API_PREFIX)

    @app.get("/")
    def root():
        """Health check endpoint."""
        return {"message": "E-Commerce API Running"}

    return app


app = create_app()

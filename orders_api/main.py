# orders_api/main.py
import logging
import time
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from . import __version__, config
from .database import init_models, make_engine, make_session_maker
from .errors import register_exception_handlers
from .orders import router as orders_router
from .schemas import Health

logger = logging.getLogger("orders_api")


def configure_logging(level: str = config.LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(database_url: str | None = None, echo: bool | None = None) -> FastAPI:
    app = FastAPI(
        title="Orders API",
        description="CRUD for orders with filtered, paginated listing",
        version=__version__,
    )

    # one engine per app; requests get their session through get_session
    engine = make_engine(database_url, echo)
    app.state.engine = engine
    app.state.session_maker = make_session_maker(engine)

    # ✅ CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method, request.url.path, response.status_code, elapsed_ms,
        )
        return response

    register_exception_handlers(app)

    # ✅ Routers
    app.include_router(orders_router)

    @app.get("/health", response_model=Health)
    async def health():
        return Health(status="OK", timestamp=datetime.now(timezone.utc).isoformat())

    @app.on_event("startup")
    async def on_startup():
        # Create tables (development). In production use migrations (alembic).
        await init_models(engine)
        logger.info("Orders table initialized")

    @app.on_event("shutdown")
    async def on_shutdown():
        await engine.dispose()

    return app


configure_logging()
app = create_app()


if __name__ == "__main__":
    uvicorn.run("orders_api.main:app", host=config.HOST, port=config.PORT)

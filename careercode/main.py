# ========================================
# careercode/main.py - APPLICATION FACTORY
# ========================================

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from motor.motor_asyncio import AsyncIOMotorClient

from careercode.config import DEFAULT_JWT_SECRET, Settings, load_settings
from careercode.database import close_mongo_connection, connect_to_mongo
from careercode.routes.application import router as application_router
from careercode.routes.job import router as job_router
from careercode.routes.session import router as session_router
from careercode.utils.errors import AppError, app_error_handler
from careercode.utils.security import TokenService

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )


def create_app(settings: Optional[Settings] = None, client: Optional[AsyncIOMotorClient] = None) -> FastAPI:
    """Build the API.

    When `client` is given it is used as-is and left open on shutdown;
    otherwise a client is connected on startup and closed on shutdown.
    """
    settings = settings or load_settings()

    if settings.jwt_secret == DEFAULT_JWT_SECRET:
        logger.warning("ACCESS_JWT_SECRET is not set; using the development default")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = client is None
        mongo = await connect_to_mongo(settings) if owned else client
        app.state.db = mongo[settings.database_name]
        try:
            yield
        finally:
            if owned:
                await close_mongo_connection(mongo)

    app = FastAPI(
        title="Career Code Job Portal API",
        description="Job postings and applications with cookie-based sessions",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.tokens = TokenService(settings.jwt_secret, settings.token_expire_hours)

    # ===========================
    # MIDDLEWARE
    # ===========================
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.debug(f"{request.method} {request.url.path}")
        return await call_next(request)

    app.add_exception_handler(AppError, app_error_handler)

    # ===========================
    # REGISTER ROUTERS
    # ===========================
    app.include_router(session_router)
    app.include_router(job_router, tags=["Jobs"])
    app.include_router(application_router)

    # ===========================
    # ROOT ENDPOINTS
    # ===========================
    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "Career Code Job Portal Website Server Started"

    @app.get("/health")
    async def health_check(request: Request):
        """Ping the store through the shared client."""
        await request.app.state.db.command("ping")
        return {"status": "healthy", "database": "connected"}

    return app


def run() -> None:
    import uvicorn

    settings = load_settings()
    configure_logging(settings.log_level)
    logger.info(f"Server Started at PORT: {settings.port}")
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()

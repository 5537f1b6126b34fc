from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from docket import __version__
from docket.api import cases, hearings, judges, lawyers, users
from docket.api.deps import build_context
from docket.api.errors import register_exception_handlers
from docket.config import settings
from docket.utils.logging import setup_logging
from docket.utils.redis import close_redis

setup_logging("docket", level=settings.LOG_LEVEL, json_format=settings.LOG_JSON)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"[backend] Docket Desk starting ({settings.STORE_BACKEND} store)...")
    if getattr(app.state, "context", None) is None:
        app.state.context = build_context(settings)
    if settings.STORE_BACKEND.lower() == "sql":
        from docket.database import init_db
        await init_db()
        logger.info("[backend] Database initialized")
    yield
    # Shutdown
    logger.info("[backend] Docket Desk shutting down...")
    await app.state.context.store.close()
    if settings.STORE_BACKEND.lower() == "sql":
        from docket.database import engine
        await engine.dispose()
    elif settings.STORE_BACKEND.lower() == "redis":
        await close_redis()

app = FastAPI(
    title="Docket Desk API",
    description="Court administration: users, cases and hearings",
    version=__version__,
    lifespan=lifespan,
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

@app.get("/")
async def root():
    return {"message": f"Docket Desk API v{__version__}"}

@app.get("/health")
async def health():
    return {"status": "ok"}

# Include routers
app.include_router(users.router)
app.include_router(cases.router)
app.include_router(judges.router)
app.include_router(lawyers.router)
app.include_router(hearings.router)

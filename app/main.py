from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.database import close_db
from app.errors import register_exception_handlers
from app.logging import configure_logging
from app.api import team_profiles


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    configure_logging()
    yield
    # Shutdown
    await close_db()


app = FastAPI(
    title="Team Profiles API",
    description="Team profile management for the team-management application",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[
        "Location",
        f"X-{settings.APP_NAME}-alert",
        f"X-{settings.APP_NAME}-error",
        f"X-{settings.APP_NAME}-params",
    ],
)

register_exception_handlers(app)

# Include routers
app.include_router(team_profiles.router, prefix=settings.API_PREFIX)


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {"status": "ok", "message": "Team Profiles API"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}

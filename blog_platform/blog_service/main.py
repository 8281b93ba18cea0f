"""
Blog Service - users, posts and comments over a relational store
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging
import sys

from .config import DEFAULT_JWT_SECRET, settings
from .db import init_db, reset_db
from .routes import comments, health, posts, users

# Configure logging
logging.basicConfig(
    stream=sys.stdout,
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Prepare the database on startup"""
    if settings.is_production and settings.JWT_SECRET_KEY == DEFAULT_JWT_SECRET:
        logger.warning("JWT_SECRET_KEY is the built-in default; set it before serving real traffic")

    if settings.RESET_DB_ON_STARTUP:
        reset_db()
    else:
        init_db()
    yield


app = FastAPI(
    title=settings.APP_NAME,
    description="Users, posts and comments with cookie-based JWT authentication",
    version="1.0.0",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(users.router)
app.include_router(posts.router)
app.include_router(comments.router)
app.include_router(health.router)


@app.get("/")
def root():
    """Root endpoint"""
    return {
        "service": settings.APP_NAME,
        "version": "1.0.0",
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)

"""
FastAPI Main Application

Entry point for running the statusbot API server.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from statusbot import __version__
from statusbot.orchestration.api import message
from statusbot.session import validate_redis_connection

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    validate_redis_connection()
    yield


app = FastAPI(
    title="Statusbot API",
    description="Conversational project status assistant",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(message.router, prefix="/api", tags=["messages"])


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    from statusbot.app import settings

    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)

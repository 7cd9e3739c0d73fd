"""FastAPI application: formats GitHub events into chat messages."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from ghmsg.logging_config import configure_logging
from ghmsg.routers import info, render


@asynccontextmanager
async def lifespan(_app: FastAPI):
    configure_logging()
    yield


app = FastAPI(title="GitHub → chat message formatter", lifespan=lifespan)

app.include_router(info.router)
app.include_router(render.router)

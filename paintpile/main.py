"""Paintpile color engine — FastAPI application entry point."""
from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routers import color_match, paint_sets
from .services.catalog import Paint, load_catalog

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s — %(message)s",
)
logger = logging.getLogger(__name__)

CORS_ORIGINS = os.environ.get(
    "PAINTPILE_CORS_ORIGINS",
    "http://localhost:3000,http://127.0.0.1:3000",
).split(",")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Warm the catalog cache so the first request doesn't pay for the load
    paints = load_catalog()
    logger.info(f"Paint catalog ready: {len(paints)} paints")
    yield


app = FastAPI(
    title="Paintpile Color Engine",
    description="Paint color matching and paint-set resolution",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in CORS_ORIGINS if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(color_match.router)
app.include_router(paint_sets.router)


@app.get("/health")
async def health(catalog: list[Paint] = Depends(load_catalog)) -> dict:
    return {"status": "ok", "catalog_size": len(catalog)}


@app.get("/")
async def root() -> dict:
    return {"message": "Paintpile Color Engine API", "docs": "/docs"}

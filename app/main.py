"""
Mock Items Service - Application Entry Point

A stand-in for the remote collection service the shopping list talks to.
It keeps items in memory and resets on restart.

Run locally on the port the app expects by default:

    uvicorn app.main:app --port 4000
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.controllers import items_router

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Shopster Items API (mock)",
    description="In-memory items collection for development and tests.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Allows a browser frontend on another port to call the mock
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(items_router)   # /items endpoints


# ============================================
# Health Check Endpoints
# ============================================

@app.get("/health", tags=["health"])
def health_check():
    """Liveness check."""
    return {
        "status": "healthy",
        "service": "Shopster Items API (mock)",
    }

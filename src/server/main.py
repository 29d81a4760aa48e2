"""FastAPI application for htmltoc."""

from __future__ import annotations

from fastapi import FastAPI

from htmltoc.utils.logging_config import configure_logging
from server.routers import router

configure_logging()

app = FastAPI(title="htmltoc", description="Heading anchors and tables of contents for HTML")
app.include_router(router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}

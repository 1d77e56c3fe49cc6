"""FastAPI application."""

from __future__ import annotations

from fastapi import FastAPI

from server.routers import render, theme

app = FastAPI(title="markview", version="0.1.0")
app.include_router(render.router)
app.include_router(theme.router)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}

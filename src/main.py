from __future__ import annotations

import logging
import os

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.adapters.api.controllers.routes import router as routes_router
from src.adapters.api.controllers.sequencing import router as sequencing_router
from src.domain.exceptions import EmptyRoute, RouteNotFound

app = FastAPI(title="CleanRoute")
app.include_router(sequencing_router)
app.include_router(routes_router)


@app.exception_handler(RouteNotFound)
async def route_not_found_handler(request: Request, exc: RouteNotFound) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc) or "Route not found"})


@app.exception_handler(EmptyRoute)
async def empty_route_handler(request: Request, exc: EmptyRoute) -> JSONResponse:
    return JSONResponse(status_code=409, content={"detail": str(exc)})


@app.exception_handler(httpx.HTTPError)
async def backend_error_handler(request: Request, exc: httpx.HTTPError) -> JSONResponse:
    logging.getLogger("uvicorn.error").warning(
        "Backend call failed: %s", exc, extra={"path": str(request.url.path)}
    )
    return JSONResponse(status_code=502, content={"detail": "Route backend unavailable"})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Ensure API errors are JSON so the map frontend can display them."""

    logging.getLogger("uvicorn.error").exception(
        "Unhandled exception", extra={"path": str(request.url.path)}
    )

    reveal = (os.getenv("CLEANROUTE_REVEAL_ERRORS") or "").strip().lower() in {
        "1",
        "true",
        "yes",
        "on",
    }

    if reveal or isinstance(exc, (RuntimeError, ValueError)):
        detail = str(exc) or exc.__class__.__name__
    else:
        detail = "Internal Server Error"

    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}

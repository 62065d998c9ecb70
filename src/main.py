from __future__ import annotations

import logging
import os

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.adapters.api.controllers.journey import router as journey_router
from src.adapters.api.controllers.map_view import router as map_view_router

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again."

diagnostics_logger = logging.getLogger("mapmyjourney.diagnostics")

app = FastAPI(title="MapMyJourney")
app.include_router(journey_router)
app.include_router(map_view_router)


def _reveal_errors() -> bool:
    raw = (os.getenv("MAPMYJOURNEY_REVEAL_ERRORS") or "").strip().lower()
    return raw in {"1", "true", "yes", "on"}


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Answer with the journey error shape so the map front end shows a message.

    The cause goes to the diagnostics log; it reaches the client only when
    MAPMYJOURNEY_REVEAL_ERRORS is set.
    """

    cause = f"{type(exc).__name__}: {exc}"
    diagnostics_logger.error(
        "api stage failed: %s",
        cause,
        exc_info=exc,
        extra={"stage": "api", "cause": cause, "path": request.url.path},
    )

    content: dict[str, str] = {"status": "error", "error": UNEXPECTED_ERROR_MESSAGE}
    if _reveal_errors():
        content["detail"] = cause
    return JSONResponse(status_code=500, content=content)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}

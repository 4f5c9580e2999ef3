import logging
import time
from datetime import datetime, UTC

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from geoapi.api import pois_router, zones_router
from geoapi.config import settings
from geoapi.exceptions import InvalidCursor, MalformedGeometry, StoreUnavailable

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

_started = time.monotonic()

app = FastAPI(title="Geo API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


app.include_router(pois_router, prefix="/api")
app.include_router(zones_router, prefix="/api")


@app.exception_handler(InvalidCursor)
async def invalid_cursor_handler(request: Request, exc: InvalidCursor):
    return JSONResponse(status_code=400, content={"detail": "Invalid cursor"})


@app.exception_handler(StoreUnavailable)
async def store_unavailable_handler(request: Request, exc: StoreUnavailable):
    logger.warning(f"{request.url.path}: store unavailable: {exc}")
    return JSONResponse(status_code=503, content={"detail": "Spatial store unavailable"})


@app.exception_handler(MalformedGeometry)
async def malformed_geometry_handler(request: Request, exc: MalformedGeometry):
    logger.error(f"{request.url.path}: malformed geometry in store: {exc}")
    return JSONResponse(status_code=500, content={"detail": "Corrupt geometry data"})


@app.get("/health")
async def health():
    return {
        "status": "ok",
        "timestamp": datetime.now(UTC).isoformat(),
        "uptime": time.monotonic() - _started,
    }


def run():
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()

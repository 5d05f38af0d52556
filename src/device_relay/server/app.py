"""FastAPI app factory.

Endpoints are intentionally thin wrappers over the in-memory stores.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from device_relay import __version__
from device_relay.config import RelaySettings
from device_relay.server.api_router import router as api_router
from device_relay.store import RelayError, RelayState

logger = logging.getLogger(__name__)


def create_app(
    settings: RelaySettings | None = None, relay: RelayState | None = None
) -> FastAPI:
    settings = settings or RelaySettings()

    app = FastAPI(
        title="Device Relay",
        version=__version__,
        description="Relay API for device status messages and queued trigger commands.",
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    # Expose settings and the shared stores to request handlers.
    app.state.settings = settings
    app.state.relay = relay or RelayState()

    origins = settings.parsed_cors_origins()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Browsers reject credentials with a wildcard origin.
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RelayError)
    async def relay_error(_request: Request, exc: RelayError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": exc.message},
        )

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Only field locations are logged; inputs may carry secrets.
        locations = [".".join(str(p) for p in err.get("loc", ())) for err in exc.errors()]
        logger.warning(
            "Rejected malformed request",
            extra={"path": request.url.path, "fields": locations},
        )
        return JSONResponse(
            status_code=400,
            content={"success": False, "error": "Invalid request body"},
        )

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(api_router, prefix="/api")
    return app

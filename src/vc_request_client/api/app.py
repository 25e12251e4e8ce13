"""FastAPI application hosting the request client"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from vc_request_client.api.dependencies import get_container
from vc_request_client.api.routes import callback, issuer, verifier

LOGGER = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan context manager.

    Resolves configuration at startup so a bad environment fails fast.
    """
    container = get_container()
    config = container.get_config()
    LOGGER.info("Request client ready, callbacks at %s", config.callback_url)

    yield

    LOGGER.info("Shutting down request client")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="Verifiable Credential Request Client",
        description="""
        Builds issuance and presentation requests for a verifiable credential
        request service and tracks their flows through its callbacks.

        ## Endpoints

        - `POST /api/issuer/issuance-request` - Build issuance request, open flow
        - `POST /api/verifier/presentation-request` - Build presentation request, open flow
        - `POST /api/callback` - Callback endpoint for the request service
        - `GET /api/status/{state}` - Flow status
        """,
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(issuer.router)
    app.include_router(verifier.router)
    app.include_router(callback.router)

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint"""
        return JSONResponse(content={"status": "healthy", "service": "vc-request-client"})

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")

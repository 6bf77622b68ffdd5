"""FastAPI application factory for the batch status service."""

from fastapi import FastAPI

from splinter_backend.adapters import BackendClientPort
from splinter_backend.config import SplinterSettings

from .routers import api_create_batch_status_router


def create_api_application(settings: SplinterSettings, backend_client: BackendClientPort) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.
        backend_client: Backend client serving batch status reads.

    Returns:
        FastAPI: Framework application instance.
    """
    application = FastAPI(title="Splinter Backend Client")

    @application.get("/", tags=["foundation"])
    def foundation_index() -> dict[str, str]:
        """Return a minimal service identification payload.

        Returns:
            dict[str, str]: Service name, readiness and environment label.
        """

        return {
            "service": "splinter-backend-client",
            "status": "ready",
            "environment": settings.environment_name,
        }

    application.include_router(api_create_batch_status_router(backend_client=backend_client))

    return application

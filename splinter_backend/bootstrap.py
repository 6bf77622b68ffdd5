"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from splinter_backend.adapters import SplinterBackendClient
from splinter_backend.api import create_api_application
from splinter_backend.config import SplinterSettings, config_load_settings


def bootstrap_create_backend_client(settings: SplinterSettings) -> SplinterBackendClient:
    """Build the Splinter backend client from validated settings.

    Args:
        settings: Validated runtime settings.

    Returns:
        SplinterBackendClient: Configured backend client.
    """

    return SplinterBackendClient(
        node_url=settings.splinter_node_url,
        authorization=settings.splinter_authorization,
        request_timeout_seconds=settings.splinter_request_timeout_seconds,
    )


def bootstrap_create_application(settings: SplinterSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-loaded settings. Loaded from environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    return create_api_application(
        settings=resolved_settings,
        backend_client=bootstrap_create_backend_client(resolved_settings),
    )

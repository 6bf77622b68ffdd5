"""API router package for endpoint composition."""

from .batch_status import api_create_batch_status_router

__all__ = ["api_create_batch_status_router"]

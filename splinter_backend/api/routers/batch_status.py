"""Batch status router composition for polling submitted batches."""

from __future__ import annotations

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from splinter_backend.adapters import BackendClientPort, BadRequestError, InternalError
from splinter_backend.domain import BatchStatuses


def api_create_batch_status_router(backend_client: BackendClientPort) -> APIRouter:
    """Create router exposing the batch status endpoint that submission links point to.

    Args:
        backend_client: Backend client used to query the ledger node.

    Returns:
        APIRouter: Router exposing `/batch_statuses`.

    Raises:
        ValueError: Raised when backend_client is None.
    """

    if backend_client is None:
        raise ValueError("backend_client must not be None")

    router = APIRouter(tags=["batches"])

    @router.get("/batch_statuses")
    async def api_batch_status_list(
        batch_ids: str | None = Query(default=None, alias="id"),
        service_id: str | None = Query(default=None),
        wait: int | None = Query(default=None, ge=0),
    ) -> JSONResponse:
        """Return normalized statuses for a comma-separated list of batch ids.

        Args:
            batch_ids: Comma-separated batch header signatures.
            service_id: Compound `<circuit_id>::<service_id>` identifier.
            wait: Optional server-side wait in seconds.

        Returns:
            JSONResponse: Status list, or error envelope on failure.
        """

        parsed_batch_ids = [batch_id for batch_id in (batch_ids or "").split(",") if batch_id]
        if not parsed_batch_ids:
            payload = {
                "status": "error",
                "code": "MISSING_BATCH_IDS",
                "message": "at least one batch id must be provided in `id`",
            }
            return JSONResponse(content=payload, status_code=status.HTTP_400_BAD_REQUEST)

        try:
            batch_statuses = await backend_client.batch_status(
                BatchStatuses(service_id=service_id, batch_ids=parsed_batch_ids, wait=wait)
            )
        except BadRequestError as error:
            payload = {"status": "error", "code": "BAD_REQUEST", "message": error.message}
            return JSONResponse(content=payload, status_code=status.HTTP_400_BAD_REQUEST)
        except InternalError as error:
            payload = {"status": "error", "code": "INTERNAL_ERROR", "message": error.message}
            return JSONResponse(content=payload, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return JSONResponse(
            content=[batch_status.domain_to_payload() for batch_status in batch_statuses],
            status_code=status.HTTP_200_OK,
        )

    return router

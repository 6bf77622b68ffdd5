"""Typed interfaces for backend client responsibilities."""

from typing import Protocol

from splinter_backend.domain import BatchStatus, BatchStatusLink, BatchStatuses, SubmitBatches


class BackendClientPort(Protocol):
    """Port definition for submitting batches to and polling a ledger backend."""

    async def submit_batches(self, msg: SubmitBatches) -> BatchStatusLink:
        """Submit one batch list to the backend service.

        Args:
            msg: Submission request.

        Returns:
            BatchStatusLink: Link the caller follows to poll submitted batch statuses.

        Raises:
            BadRequestError: Raised when the request is invalid.
            InternalError: Raised when the backend could not be reached.
        """

    async def batch_status(self, msg: BatchStatuses) -> list[BatchStatus]:
        """Read statuses of previously submitted batches.

        Args:
            msg: Status query.

        Returns:
            list[BatchStatus]: Normalized statuses in backend response order.

        Raises:
            BadRequestError: Raised when the query is invalid.
            InternalError: Raised when the backend could not be reached or replied unreadably.
        """

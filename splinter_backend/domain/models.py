"""Typed backend-agnostic contracts for batch submission and status polling.

These values are request-scoped and immutable. Backend adapters consume the
request contracts and return the result contracts regardless of which
ledger node they talk to.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence


class BatchMessage(Protocol):
    """Structural view of one signed batch inside a batch list."""

    header_signature: str


class BatchListMessage(Protocol):
    """Structural view of an opaque, binary-serializable batch list.

    A protobuf `BatchList` message satisfies this protocol as-is.
    """

    @property
    def batches(self) -> Sequence[BatchMessage]:
        """Return batches in submission order."""

    def SerializeToString(self) -> bytes:  # pylint: disable=invalid-name
        """Return the binary wire form of the batch list."""


@dataclass(frozen=True)
class SubmitBatches:
    """Request to submit a batch list to a backend service.

    Attributes:
        service_id: Compound `<circuit_id>::<service_id>` identifier. Optional at
            construction, required when submitting.
        batch_list: Batch list to serialize and send.
        response_url: URL the caller follows to poll status of the submitted batches.
    """

    service_id: str | None
    batch_list: BatchListMessage
    response_url: str


@dataclass(frozen=True)
class BatchStatuses:
    """Request to read the status of previously submitted batches.

    Attributes:
        service_id: Compound `<circuit_id>::<service_id>` identifier. Optional at
            construction, required when querying.
        batch_ids: Batch header signatures in the order results should be reported.
        wait: Optional server-side wait in seconds.
    """

    service_id: str | None
    batch_ids: Sequence[str]
    wait: int | None = None


@dataclass(frozen=True)
class BatchStatusLink:
    """Caller-followable link for polling the batches just submitted."""

    link: str


@dataclass(frozen=True)
class InvalidTransaction:
    """Transaction-level failure reported inside a batch status.

    Attributes:
        id: Transaction header signature.
        message: Error message reported by the node.
        extended_data: Base64-encoded error data reported by the node.
    """

    id: str
    message: str
    extended_data: str


@dataclass(frozen=True)
class BatchStatus:
    """Backend-agnostic status of one batch.

    Attributes:
        id: Batch header signature.
        status: Status label reported by the node, for example `COMMITTED` or `INVALID`.
        invalid_transactions: Transactions reported with both an error message and error data.
    """

    id: str
    status: str
    invalid_transactions: tuple[InvalidTransaction, ...] = ()

    def domain_to_payload(self) -> dict[str, object]:
        """Render the status as a JSON-compatible mapping.

        Returns:
            dict[str, object]: Serializable status payload.
        """

        return {
            "id": self.id,
            "status": self.status,
            "invalid_transactions": [
                {
                    "id": invalid_transaction.id,
                    "message": invalid_transaction.message,
                    "extended_data": invalid_transaction.extended_data,
                }
                for invalid_transaction in self.invalid_transactions
            ],
        }

"""Scabbard batch-status wire models and normalization into domain statuses."""

from __future__ import annotations

import base64
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictInt, TypeAdapter

from splinter_backend.domain import BatchStatus, InvalidTransaction


class ScabbardTransactionMessage(BaseModel):
    """Per-transaction entry of a scabbard batch status.

    Attributes:
        transaction_id: Transaction header signature.
        error_message: Optional error message.
        error_data: Optional error payload as a list of byte values.
    """

    model_config = ConfigDict(frozen=True)

    transaction_id: str
    error_message: str | None = None
    error_data: list[Annotated[StrictInt, Field(ge=0, le=255)]] | None = None


class ScabbardStatus(BaseModel):
    """Status block of a scabbard batch status."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status_type: str = Field(alias="statusType")
    message: list[ScabbardTransactionMessage]


class ScabbardBatchStatus(BaseModel):
    """One entry of the scabbard `batch_statuses` response array."""

    model_config = ConfigDict(frozen=True)

    id: str
    status: ScabbardStatus

    def wire_to_domain(self) -> BatchStatus:
        """Normalize the wire status into a backend-agnostic batch status.

        Only entries carrying both an error message and error data are kept as
        invalid transactions; entries with just one of the two are dropped.

        Returns:
            BatchStatus: Normalized batch status.
        """

        invalid_transactions = tuple(
            InvalidTransaction(
                id=message.transaction_id,
                message=message.error_message,
                extended_data=base64.b64encode(bytes(message.error_data)).decode("ascii"),
            )
            for message in self.status.message
            if message.error_message is not None and message.error_data is not None
        )
        return BatchStatus(
            id=self.id,
            status=self.status.status_type,
            invalid_transactions=invalid_transactions,
        )


_BATCH_STATUS_LIST_ADAPTER: TypeAdapter[list[ScabbardBatchStatus]] = TypeAdapter(list[ScabbardBatchStatus])


def wire_parse_batch_statuses(payload: bytes) -> list[ScabbardBatchStatus]:
    """Parse a `batch_statuses` response body.

    Args:
        payload: Raw JSON response body.

    Returns:
        list[ScabbardBatchStatus]: Parsed wire statuses in response order.

    Raises:
        pydantic.ValidationError: Raised when the body is not valid JSON or does not match the wire shape.
    """

    return _BATCH_STATUS_LIST_ADAPTER.validate_json(payload)

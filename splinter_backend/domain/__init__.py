"""Domain models used across application layer boundaries."""

from .models import (
    BatchListMessage,
    BatchMessage,
    BatchStatus,
    BatchStatusLink,
    BatchStatuses,
    InvalidTransaction,
    SubmitBatches,
)

__all__ = [
    "BatchListMessage",
    "BatchMessage",
    "BatchStatus",
    "BatchStatusLink",
    "BatchStatuses",
    "InvalidTransaction",
    "SubmitBatches",
]

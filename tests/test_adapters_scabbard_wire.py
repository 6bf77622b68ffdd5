"""Regression tests for scabbard batch-status parsing and normalization."""

from __future__ import annotations

import base64
import json

import pytest
from pydantic import ValidationError

from splinter_backend.adapters.scabbard_wire import wire_parse_batch_statuses
from splinter_backend.domain import BatchStatus, InvalidTransaction


def _encode(payload: object) -> bytes:
    return json.dumps(payload).encode("utf-8")


def test_adapters_scabbard_wire_keeps_only_entries_with_message_and_data() -> None:
    """Drop transaction entries unless both error message and error data are present.

    Returns:
        None: Assertions validate the invalid-transaction filter.

    Raises:
        AssertionError: Raised when partial entries are kept or complete ones dropped.
    """

    payload = _encode(
        [
            {
                "id": "b1",
                "status": {
                    "statusType": "INVALID",
                    "message": [
                        {"transaction_id": "t1", "error_message": "bad", "error_data": [1, 2, 3]},
                        {"transaction_id": "t2", "error_message": None, "error_data": None},
                        {"transaction_id": "t3", "error_message": "only message"},
                        {"transaction_id": "t4", "error_data": [9]},
                    ],
                },
            }
        ]
    )

    statuses = [wire_status.wire_to_domain() for wire_status in wire_parse_batch_statuses(payload)]

    assert statuses == [
        BatchStatus(
            id="b1",
            status="INVALID",
            invalid_transactions=(
                InvalidTransaction(
                    id="t1",
                    message="bad",
                    extended_data=base64.b64encode(bytes([1, 2, 3])).decode("ascii"),
                ),
            ),
        )
    ]
    assert statuses[0].invalid_transactions[0].extended_data == "AQID"


def test_adapters_scabbard_wire_preserves_response_order() -> None:
    """Return normalized statuses in the order the node reported them.

    Returns:
        None: Assertions validate ordering.

    Raises:
        AssertionError: Raised when ordering changes.
    """

    payload = _encode(
        [
            {"id": "b2", "status": {"statusType": "COMMITTED", "message": []}},
            {"id": "b1", "status": {"statusType": "PENDING", "message": []}},
            {"id": "b3", "status": {"statusType": "UNKNOWN", "message": []}},
        ]
    )

    statuses = [wire_status.wire_to_domain() for wire_status in wire_parse_batch_statuses(payload)]

    assert [status.id for status in statuses] == ["b2", "b1", "b3"]
    assert [status.status for status in statuses] == ["COMMITTED", "PENDING", "UNKNOWN"]
    assert all(status.invalid_transactions == () for status in statuses)


def test_adapters_scabbard_wire_empty_error_data_counts_as_present() -> None:
    """Keep an entry whose error data is an empty byte list."""

    payload = _encode(
        [
            {
                "id": "b1",
                "status": {
                    "statusType": "INVALID",
                    "message": [{"transaction_id": "t1", "error_message": "bad", "error_data": []}],
                },
            }
        ]
    )

    (status,) = [wire_status.wire_to_domain() for wire_status in wire_parse_batch_statuses(payload)]

    assert status.invalid_transactions == (InvalidTransaction(id="t1", message="bad", extended_data=""),)


@pytest.mark.parametrize(
    "payload",
    [
        b"not json",
        b'{"id": "b1"}',
        b'[{"id": "b1", "status": {"message": []}}]',
        b'[{"id": "b1", "status": {"statusType": "INVALID", "message": '
        b'[{"transaction_id": "t1", "error_message": "bad", "error_data": [256]}]}}]',
        b'[{"id": "b1", "status": {"statusType": "INVALID", "message": '
        b'[{"transaction_id": "t1", "error_message": "bad", "error_data": [true]}]}}]',
        b'[{"id": "b1", "status": {"statusType": "INVALID", "message": '
        b'[{"transaction_id": "t1", "error_message": "bad", "error_data": [2.0]}]}}]',
    ],
)
def test_adapters_scabbard_wire_rejects_malformed_payloads(payload: bytes) -> None:
    """Raise validation errors for bodies that do not match the wire shape.

    Args:
        payload: Malformed response body.

    Returns:
        None: Assertions validate parse failure behavior.

    Raises:
        AssertionError: Raised when malformed bodies are accepted.
    """

    with pytest.raises(ValidationError):
        wire_parse_batch_statuses(payload)

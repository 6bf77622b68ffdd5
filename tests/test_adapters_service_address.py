"""Regression tests for compound service id resolution."""

from __future__ import annotations

import pytest

from splinter_backend.adapters import BadRequestError, ServiceAddress, adapter_parse_service_address


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("circuit1::svc1", ServiceAddress(circuit_id="circuit1", service_id="svc1")),
        ("AbCdE-01234::gsAA", ServiceAddress(circuit_id="AbCdE-01234", service_id="gsAA")),
        (" c :: s ", ServiceAddress(circuit_id=" c ", service_id=" s ")),
    ],
)
def test_adapters_service_address_splits_circuit_and_service(value: str, expected: ServiceAddress) -> None:
    """Split well-formed identifiers into verbatim circuit and service segments.

    Args:
        value: Compound service identifier.
        expected: Expected parsed address.

    Returns:
        None: Assertions validate parsing behavior.

    Raises:
        AssertionError: Raised when segments are altered or misplaced.
    """

    assert adapter_parse_service_address(value) == expected


def test_adapters_service_address_ignores_segments_after_second() -> None:
    """Ignore any delimiter-separated segments beyond the service segment.

    Returns:
        None: Assertions validate truncation behavior.

    Raises:
        AssertionError: Raised when trailing segments leak into the address.
    """

    address = adapter_parse_service_address("circuit::service::extra::more")

    assert address.circuit_id == "circuit"
    assert address.service_id == "service"


def test_adapters_service_address_empty_string_is_rejected() -> None:
    """Reject an empty identifier with the empty-parameter message.

    Returns:
        None: Assertions validate rejection behavior.

    Raises:
        AssertionError: Raised when empty input is accepted.
    """

    with pytest.raises(BadRequestError, match="Empty service_id parameter provided"):
        adapter_parse_service_address("")


@pytest.mark.parametrize("value", ["onlyonepart", "circuit::", "circuit:svc"])
def test_adapters_service_address_missing_service_segment_is_rejected(value: str) -> None:
    """Reject identifiers without a non-empty second segment.

    Args:
        value: Malformed compound identifier.

    Returns:
        None: Assertions validate rejection behavior.

    Raises:
        AssertionError: Raised when malformed input is accepted.
    """

    with pytest.raises(BadRequestError, match="<circuit_id>::<service_id>"):
        adapter_parse_service_address(value)


def test_adapters_service_address_empty_circuit_segment_is_rejected() -> None:
    """Reject identifiers whose circuit segment is empty."""

    with pytest.raises(BadRequestError):
        adapter_parse_service_address("::svc")


def test_adapters_service_address_error_is_value_error() -> None:
    """Keep bad-request failures catchable as ValueError."""

    with pytest.raises(ValueError):
        adapter_parse_service_address("no-delimiter")

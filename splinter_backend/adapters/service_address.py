"""Service identifier resolution into circuit/service addressing coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .errors import BadRequestError

SERVICE_ID_DELIMITER: Final[str] = "::"


@dataclass(frozen=True)
class ServiceAddress:
    """Routable scabbard address derived from a compound service identifier.

    Attributes:
        circuit_id: Circuit the service runs on.
        service_id: Service identifier within the circuit.
    """

    circuit_id: str
    service_id: str


def adapter_parse_service_address(value: str) -> ServiceAddress:
    """Split a `<circuit_id>::<service_id>` string into its two segments.

    Segments are used verbatim. Anything after a second delimiter is ignored.

    Args:
        value: Compound service identifier.

    Returns:
        ServiceAddress: Parsed circuit and service identifiers.

    Raises:
        BadRequestError: Raised when either segment is missing or empty.
    """

    parts = value.split(SERVICE_ID_DELIMITER)
    circuit_id = parts[0]
    if not circuit_id:
        raise BadRequestError("Empty service_id parameter provided")

    service_id = parts[1] if len(parts) > 1 else ""
    if not service_id:
        raise BadRequestError("Must provide a fully-qualified service_id: <circuit_id>::<service_id>")

    return ServiceAddress(circuit_id=circuit_id, service_id=service_id)

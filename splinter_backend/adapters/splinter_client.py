"""Splinter scabbard backend client for batch submission and status polling."""

from __future__ import annotations

import logging
from typing import Final, Sequence
from urllib.parse import urlsplit, urlunsplit

import httpx
from pydantic import ValidationError

from splinter_backend.domain import BatchStatus, BatchStatusLink, BatchStatuses, SubmitBatches

from .errors import BadRequestError, InternalError
from .interfaces import BackendClientPort
from .scabbard_wire import wire_parse_batch_statuses
from .service_address import ServiceAddress, adapter_parse_service_address

logger = logging.getLogger(__name__)


def splinter_build_batches_url(node_url: str, address: ServiceAddress) -> str:
    """Build the scabbard batch submission URL.

    Args:
        node_url: Splinter node REST base URL without trailing slash.
        address: Resolved circuit/service address.

    Returns:
        str: `{node_url}/scabbard/{circuit_id}/{service_id}/batches`.
    """

    return f"{node_url}/scabbard/{address.circuit_id}/{address.service_id}/batches"


def splinter_build_batch_statuses_url(
    node_url: str,
    address: ServiceAddress,
    batch_ids: Sequence[str],
    wait: int | None = None,
) -> str:
    """Build the scabbard batch status URL with its query string.

    Args:
        node_url: Splinter node REST base URL without trailing slash.
        address: Resolved circuit/service address.
        batch_ids: Batch ids to query, in order.
        wait: Optional server-side wait in seconds.

    Returns:
        str: `{node_url}/scabbard/{circuit_id}/{service_id}/batch_statuses?[wait={wait}&]ids={ids}`.
    """

    url = f"{node_url}/scabbard/{address.circuit_id}/{address.service_id}/batch_statuses?"
    if wait is not None:
        url += f"wait={wait}&"
    return url + f"ids={','.join(batch_ids)}"


def splinter_build_status_link(response_url: str, header_signatures: Sequence[str]) -> str:
    """Replace the query of the response URL with the submitted batch ids.

    Args:
        response_url: Caller-provided status URL.
        header_signatures: Submitted batch header signatures, in order.

    Returns:
        str: Response URL whose query is exactly `id={sig1,sig2,...}`.
    """

    url_parts = urlsplit(response_url)
    return urlunsplit(url_parts._replace(query=f"id={','.join(header_signatures)}"))


class SplinterBackendClient(BackendClientPort):
    """Backend client targeting the scabbard REST API of a Splinter node.

    Instances hold configuration only and are safe to share across concurrent
    tasks. Every call performs exactly one HTTP attempt.
    """

    _PROTOCOL_VERSION: Final[str] = "1"

    def __init__(
        self,
        node_url: str,
        authorization: str,
        http_client: httpx.AsyncClient | None = None,
        request_timeout_seconds: float | None = None,
    ):
        """Initialize Splinter backend client.

        Args:
            node_url: Base URL of the Splinter node REST API.
            authorization: Value sent verbatim as the `Authorization` header.
            http_client: Optional shared async HTTP client. When omitted, each call
                opens and closes its own client.
            request_timeout_seconds: Optional timeout for per-call clients. No timeout when None.

        Raises:
            ValueError: Raised when required config values are invalid.
        """

        normalized_node_url = node_url.strip()
        if not normalized_node_url:
            raise ValueError("node_url must not be blank")
        if not authorization.strip():
            raise ValueError("authorization must not be blank")
        if request_timeout_seconds is not None and request_timeout_seconds <= 0:
            raise ValueError("request_timeout_seconds must be > 0")

        self._node_url = normalized_node_url.rstrip("/")
        self._authorization = authorization
        self._http_client = http_client
        self._request_timeout_seconds = request_timeout_seconds

    @property
    def node_url(self) -> str:
        """Return the normalized node base URL."""

        return self._node_url

    async def submit_batches(self, msg: SubmitBatches) -> BatchStatusLink:
        """Submit one batch list to the scabbard service addressed by `msg.service_id`.

        The returned link is derived from the request only. The HTTP status code
        of the node's reply is not inspected.

        Args:
            msg: Submission request.

        Returns:
            BatchStatusLink: Response URL carrying the submitted batch ids.

        Raises:
            BadRequestError: Raised when the service id or response url is malformed, or the
                batch list cannot be serialized.
            InternalError: Raised when the HTTP transport fails or the request URL is unusable.
        """

        address = self._adapter_resolve_service(msg.service_id)
        url = splinter_build_batches_url(self._node_url, address)

        try:
            batch_list_bytes = msg.batch_list.SerializeToString()
        except Exception as error:  # pylint: disable=broad-exception-caught
            raise BadRequestError(f"Malformed batch list: {error}") from error

        try:
            link = splinter_build_status_link(
                msg.response_url,
                [batch.header_signature for batch in msg.batch_list.batches],
            )
        except ValueError as error:
            raise BadRequestError(f"Malformed response url: {error}") from error

        logger.debug("Submitting batch list to %s (%d bytes)", url, len(batch_list_bytes))
        try:
            response = await self._adapter_send(
                "POST",
                url,
                headers={
                    "GridProtocolVersion": self._PROTOCOL_VERSION,
                    "Content-Type": "octet-stream",
                    "Authorization": self._authorization,
                },
                content=batch_list_bytes,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as error:
            logger.warning("Batch submission to %s failed: %s", url, error)
            raise InternalError(f"Unable to submit batch: {error}") from error

        logger.debug("Batch submission to %s answered with HTTP %d", url, response.status_code)
        return BatchStatusLink(link=link)

    async def batch_status(self, msg: BatchStatuses) -> list[BatchStatus]:
        """Read statuses of batches previously submitted to `msg.service_id`.

        Args:
            msg: Status query.

        Returns:
            list[BatchStatus]: Normalized statuses in node response order.

        Raises:
            BadRequestError: Raised when the service id is missing or malformed.
            InternalError: Raised when the HTTP transport fails, the request URL is unusable,
                or the body cannot be parsed.
        """

        address = self._adapter_resolve_service(msg.service_id)
        url = splinter_build_batch_statuses_url(self._node_url, address, msg.batch_ids, msg.wait)

        logger.debug("Requesting batch statuses from %s", url)
        try:
            response = await self._adapter_send(
                "GET",
                url,
                headers={
                    "GridProtocolVersion": self._PROTOCOL_VERSION,
                    "Authorization": self._authorization,
                },
            )
        except (httpx.HTTPError, httpx.InvalidURL) as error:
            logger.warning("Batch status request to %s failed: %s", url, error)
            raise InternalError(f"Unable to retrieve batch statuses: {error}") from error

        try:
            wire_statuses = wire_parse_batch_statuses(response.content)
        except ValidationError as error:
            logger.warning(
                "Batch status response from %s (HTTP %d) could not be parsed",
                url,
                response.status_code,
            )
            raise InternalError(f"Unable to retrieve batch statuses: {error}") from error

        return [wire_status.wire_to_domain() for wire_status in wire_statuses]

    def _adapter_resolve_service(self, service_id: str | None) -> ServiceAddress:
        """Require a service id and resolve it into a scabbard address.

        Args:
            service_id: Optional compound service identifier.

        Returns:
            ServiceAddress: Resolved address.

        Raises:
            BadRequestError: Raised when the service id is missing or malformed.
        """

        if service_id is None:
            raise BadRequestError("A service id must be provided")
        return adapter_parse_service_address(service_id)

    async def _adapter_send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        content: bytes | None = None,
    ) -> httpx.Response:
        """Execute one HTTP request on the shared or a per-call client.

        Args:
            method: HTTP method.
            url: Fully built request URL.
            headers: Request headers.
            content: Optional request body.

        Returns:
            httpx.Response: Fully read HTTP response.

        Raises:
            httpx.HTTPError: Raised for transport failures.
            httpx.InvalidURL: Raised when the built URL cannot be parsed.
        """

        if self._http_client is not None:
            return await self._http_client.request(method, url, headers=headers, content=content)

        async with httpx.AsyncClient(timeout=self._request_timeout_seconds) as client:
            return await client.request(method, url, headers=headers, content=content)

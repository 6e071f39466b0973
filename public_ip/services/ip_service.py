"""
public_ip/services/ip_service.py

Responsibility: Fetches the current public IPv4 address of the host machine
from a plain-text echo service.
Does NOT: retry, cache results, configure timeouts, or handle IPv6.
"""

from __future__ import annotations

import logging

import httpx

from public_ip.exceptions import HttpStatusError, TransportError
from public_ip.public_address import IPv4Address, PublicAddress

logger = logging.getLogger(__name__)

# NOTE: api.ipify.org returns the caller's public IPv4 as plain text.
_IP_PROVIDER_URL = "https://api.ipify.org"


class IpService:
    """
    Resolves the host machine's current public IPv4 address.

    Uses an injected httpx.AsyncClient so the service is fully testable
    without real network calls (use respx.mock in tests).

    Collaborators:
        - httpx.AsyncClient: injected; must be kept alive externally
    """

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        """
        Initialises the service with an HTTP client.

        Args:
            http_client: An open httpx.AsyncClient. The service never
                         closes it.
        """
        self._client = http_client

    async def resolve_default(self) -> PublicAddress:
        """
        Resolves the public address using the well-known default provider.

        Returns:
            The resolved PublicAddress.

        Raises:
            ResolutionError: See resolve().
        """
        return await self.resolve(_IP_PROVIDER_URL)

    async def resolve(self, endpoint: str) -> PublicAddress:
        """
        Asks a single echo service for the caller's public IPv4 address.

        The endpoint must answer GET with a 2xx status and a body holding
        nothing but the address in dotted-decimal form. The body is parsed
        as-is, without stripping whitespace.

        Args:
            endpoint: Full HTTP(S) URL of the echo service.

        Returns:
            An IPv4Address holding the body text verbatim.

        Raises:
            TransportError: If the request fails before a response arrives,
                            or the body is not valid UTF-8.
            HttpStatusError: If the provider returns a non-2xx status.
            ParseError: If the body is not a valid IPv4 address.
        """
        logger.debug("GET %s", endpoint)
        try:
            _check_endpoint(endpoint)
            response = await self._client.get(endpoint)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise HttpStatusError(
                endpoint, exc.response.status_code, exc.response.reason_phrase
            ) from exc
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise TransportError(endpoint, str(exc)) from exc

        try:
            text = response.content.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise TransportError(endpoint, f"response body is not UTF-8: {exc}") from exc

        address = IPv4Address(text)
        logger.info("Current public IP: %s", address)
        return address


def _check_endpoint(endpoint: str) -> None:
    """
    Rejects URLs that httpx parses but the socket layer cannot connect to.

    Raises:
        httpx.InvalidURL: If the port is outside 0-65535.
    """
    port = httpx.URL(endpoint).port
    if port is not None and not 0 <= port <= 65535:
        raise httpx.InvalidURL(f"Invalid port: {port}")


async def get_public_ip_address() -> PublicAddress:
    """
    Resolves the public IP address for this machine via api.ipify.org.

    Opens and closes its own HTTP client for the single call.
    """
    async with httpx.AsyncClient(follow_redirects=True) as client:
        return await IpService(client).resolve_default()


async def get_public_ip_address_with_override(endpoint: str) -> PublicAddress:
    """
    Resolves the public IP address using a different echo service.

    The service must simply return the IPv4 address as text with a 200 OK.
    """
    async with httpx.AsyncClient(follow_redirects=True) as client:
        return await IpService(client).resolve(endpoint)

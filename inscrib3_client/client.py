"""
Inscrib3 HTTP Client - Async client for the Inscrib3 drops API
"""

import logging
from typing import Any, Literal, Optional

import httpx

from .auth import authorization_header
from .drops import DropsAPI

logger = logging.getLogger("inscrib3.client")

DEFAULT_API_URL = "https://api.inscrib3.com"

Network = Literal["mainnet", "testnet", "testnet4", "signet"]
Chain = Literal["bitcoin", "fractal"]

NETWORKS: tuple[str, ...] = ("mainnet", "testnet", "testnet4", "signet")
CHAINS: tuple[str, ...] = ("bitcoin", "fractal")


class Inscrib3Client:
    """
    Async client for the Inscrib3 drops API.

    Every call is a single authenticated HTTP round trip. The wallet
    credentials (address, signed message, signature) are passed on each
    call and combined with the network and chain fixed here.

    Usage:
        async with Inscrib3Client(network="testnet") as client:
            drops = await client.drops.all(address, message, signature)
    """

    def __init__(
        self,
        network: Network = "mainnet",
        chain: Chain = "bitcoin",
        base_url: str = DEFAULT_API_URL,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize Inscrib3 client.

        Args:
            network: Bitcoin network the session is signed for
            chain: "bitcoin" or "fractal"
            base_url: API root (e.g., "https://api.inscrib3.com")
            timeout: HTTP request timeout in seconds, None for no timeout
            transport: Optional httpx transport (custom or mock)
        """
        if network not in NETWORKS:
            raise ValueError(f"Unknown network {network!r}, expected one of {', '.join(NETWORKS)}")
        if chain not in CHAINS:
            raise ValueError(f"Unknown chain {chain!r}, expected one of {', '.join(CHAINS)}")

        self.network = network
        self.chain = chain
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

        self._client: Optional[httpx.AsyncClient] = None
        self.drops = DropsAPI(self)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client"""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                transport=self.transport
            )
        return self._client

    async def close(self):
        """Close HTTP client"""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "Inscrib3Client":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _headers(self, address: str, message: str, signature: str) -> dict[str, str]:
        return {
            "Authorization": authorization_header(
                address, message, self.network, self.chain, signature
            )
        }

    async def request(
        self,
        method: str,
        path: str,
        address: str,
        message: str,
        signature: str,
        json_data: Optional[dict] = None,
        data: Optional[dict] = None,
        files: Optional[Any] = None,
        content: Optional[bytes] = None,
        content_type: Optional[str] = None
    ) -> Any:
        """
        Make an authenticated API request.

        Args:
            method: HTTP method
            path: Endpoint path, starting with "/"
            address: Wallet address
            message: Signed challenge message
            signature: Signature of message
            json_data: JSON body
            data: Multipart form fields (sent together with files)
            files: Multipart file parts
            content: Pre-encoded body, sent with content_type

        Returns:
            Decoded JSON response body

        Raises:
            httpx.HTTPStatusError: on a non-2xx response. The backend's error
                body is not returned; read it from `exc.response.json()`.
            httpx.TransportError: when the request could not be sent
        """
        client = await self._get_client()

        url = f"{self.base_url}{path}"
        headers = self._headers(address, message, signature)
        if json_data is not None:
            headers["Content-Type"] = "application/json"
        elif content_type is not None:
            headers["Content-Type"] = content_type

        logger.debug(f"Request: {method} {url}")

        response = await client.request(
            method,
            url,
            headers=headers,
            json=json_data,
            data=data,
            files=files,
            content=content
        )

        logger.debug(f"Response: {response.status_code} for {method} {url}")

        response.raise_for_status()

        return response.json()


def sdk(
    network: Network = "mainnet",
    chain: Chain = "bitcoin",
    api: str = DEFAULT_API_URL
) -> Inscrib3Client:
    """Create a client; `sdk("testnet").drops.read(...)`"""
    return Inscrib3Client(network=network, chain=chain, base_url=api)

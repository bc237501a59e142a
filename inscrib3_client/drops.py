"""
Drops and drop uploads endpoints
"""

import os
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any, Union

from .models import BroadcastResult, Drop, DropId, MintResult, Supply, UploadList

if TYPE_CHECKING:
    from .client import Inscrib3Client

# Anything httpx accepts as a multipart file, or a path to read from disk
FileInput = Union[Path, bytes, IO[bytes], tuple]


def _file_part(file: FileInput) -> Any:
    if isinstance(file, Path):
        return (file.name, file.read_bytes())
    return file


def _empty_multipart() -> tuple[bytes, str]:
    """Body and Content-Type of a multipart form with no parts"""
    # httpx only encodes multipart when files is non-empty
    boundary = os.urandom(16).hex()
    return (
        f"--{boundary}--\r\n".encode("ascii"),
        f"multipart/form-data; boundary={boundary}"
    )


class UploadsAPI:
    """Files attached to a drop (/drops/{id}/uploads)"""

    def __init__(self, client: "Inscrib3Client"):
        self._client = client

    async def all(
        self,
        id: str,
        address: str,
        message: str,
        signature: str
    ) -> UploadList:
        """List the file names uploaded to a drop"""
        return await self._client.request(
            "GET", f"/drops/{id}/uploads", address, message, signature
        )

    async def update(
        self,
        id: str,
        files: list[FileInput],
        address: str,
        message: str,
        signature: str
    ) -> Supply:
        """
        Upload files to a drop.

        Each file is sent as its own "files" multipart part. An empty list
        still sends a (terminating-boundary only) multipart body.

        Returns:
            The drop's new supply
        """
        if not files:
            content, content_type = _empty_multipart()
            return await self._client.request(
                "POST",
                f"/drops/{id}/uploads",
                address,
                message,
                signature,
                content=content,
                content_type=content_type
            )

        return await self._client.request(
            "POST",
            f"/drops/{id}/uploads",
            address,
            message,
            signature,
            files=[("files", _file_part(file)) for file in files]
        )

    async def remove(
        self,
        id: str,
        files: list[str],
        address: str,
        message: str,
        signature: str
    ) -> Supply:
        """Remove uploaded files from a drop by name"""
        return await self._client.request(
            "DELETE",
            f"/drops/{id}/uploads",
            address,
            message,
            signature,
            json_data={"files": files}
        )


class DropsAPI:
    """
    Drop management (/drops).

    All methods take the session credentials last, after the
    endpoint-specific arguments.
    """

    def __init__(self, client: "Inscrib3Client"):
        self._client = client
        self.uploads = UploadsAPI(client)

    async def create(
        self,
        name: str,
        symbol: str,
        description: str,
        icon: FileInput,
        price: Union[str, int],
        recipient_address: str,
        recipient_public_key: str,
        address: str,
        message: str,
        signature: str
    ) -> DropId:
        """
        Create a new drop.

        Args:
            name: Drop name
            symbol: Ticker symbol
            description: Free-form description
            icon: Icon image (path, bytes, file object or httpx file tuple)
            price: Mint price, sent as a string
            recipient_address: Address receiving mint payments
            recipient_public_key: Public key of recipient_address
            address: Wallet address
            message: Signed challenge message
            signature: Signature of message

        Returns:
            {"id": ...} of the created drop
        """
        return await self._client.request(
            "POST",
            "/drops",
            address,
            message,
            signature,
            data={
                "name": name,
                "symbol": symbol,
                "description": description,
                "price": str(price),
                "recipientAddress": recipient_address,
                "recipientPublicKey": recipient_public_key,
            },
            files={"icon": _file_part(icon)}
        )

    async def all(
        self,
        address: str,
        message: str,
        signature: str
    ) -> list[Drop]:
        """List drops visible to the wallet"""
        return await self._client.request("GET", "/drops", address, message, signature)

    async def read(
        self,
        id: str,
        address: str,
        message: str,
        signature: str
    ) -> Drop:
        return await self._client.request("GET", f"/drops/{id}", address, message, signature)

    async def remove(
        self,
        id: str,
        address: str,
        message: str,
        signature: str
    ) -> DropId:
        return await self._client.request("DELETE", f"/drops/{id}", address, message, signature)

    async def mint(
        self,
        id: str,
        payment_address: str,
        payment_public_key: str,
        recipient_address: str,
        recipient_public_key: str,
        address: str,
        message: str,
        signature: str
    ) -> MintResult:
        """
        Request unsigned mint PSBTs for a drop.

        The payment pair funds the mint, the recipient pair receives the
        minted token. The returned PSBTs must be signed by the caller's
        wallet and passed to broadcast_mint.
        """
        return await self._client.request(
            "POST",
            f"/drops/{id}/mint",
            address,
            message,
            signature,
            json_data={
                "paymentAddress": payment_address,
                "paymentPublicKey": payment_public_key,
                "recipientAddress": recipient_address,
                "recipientPublicKey": recipient_public_key,
            }
        )

    async def broadcast_mint(
        self,
        id: str,
        signed_psbt: list[str],
        address: str,
        message: str,
        signature: str
    ) -> BroadcastResult:
        """Broadcast signed mint PSBTs, returns the transaction id"""
        return await self._client.request(
            "POST",
            f"/drops/{id}/mint/broadcast",
            address,
            message,
            signature,
            json_data={"signedPsbt": signed_psbt}
        )

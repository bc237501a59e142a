"""
Response shapes returned by the Inscrib3 drops API.

These describe the decoded JSON exactly as the backend sends it; the client
does not validate or convert any field.
"""

from typing import TypedDict


class DropId(TypedDict):
    id: str


class Drop(TypedDict, total=False):
    """A drop as listed by GET /drops or read by GET /drops/{id}"""
    id: str
    name: str
    symbol: str
    description: str
    icon: str
    price: str
    recipientAddress: str
    recipientPublicKey: str
    supply: str
    minting: str
    minted: str


class MintResult(TypedDict):
    """Unsigned PSBTs to be signed by the payer's wallet"""
    psbt: list[str]


class BroadcastResult(TypedDict):
    txid: str


class UploadList(TypedDict):
    files: list[str]


class Supply(TypedDict):
    supply: str

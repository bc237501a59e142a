"""
Authorization header construction for Inscrib3 requests
"""

import base64
from typing import NamedTuple


class Credentials(NamedTuple):
    """Wallet address, signed challenge message and its signature"""
    address: str
    message: str
    signature: str


def encode_session(
    address: str,
    message: str,
    network: str,
    chain: str,
    signature: str
) -> str:
    """
    Encode a session for the Authorization header.

    The fields are joined with ':' in the order the backend expects
    (address, message, network, chain, signature), UTF-8 encoded and
    base64-encoded.

    Returns:
        Base64 string without the scheme prefix
    """
    raw = f"{address}:{message}:{network}:{chain}:{signature}"
    return base64.b64encode(raw.encode("utf-8")).decode()


def authorization_header(
    address: str,
    message: str,
    network: str,
    chain: str,
    signature: str
) -> str:
    """Full Authorization header value ("Basic <b64>")"""
    return f"Basic {encode_session(address, message, network, chain, signature)}"


def decode_session(value: str) -> tuple[str, ...]:
    """
    Split an Authorization value back into its five fields.

    Accepts the value with or without the "Basic " prefix. The message is
    allowed to contain ':' itself, so address is taken from the left and
    network, chain and signature from the right.
    """
    if value.startswith("Basic "):
        value = value[len("Basic "):]
    raw = base64.b64decode(value).decode("utf-8")
    address, rest = raw.split(":", 1)
    message, network, chain, signature = rest.rsplit(":", 3)
    return (address, message, network, chain, signature)

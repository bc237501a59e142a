"""
Inscrib3 Client SDK - Async client for the Inscrib3 drops API
"""

from .auth import Credentials, authorization_header, decode_session
from .client import CHAINS, DEFAULT_API_URL, NETWORKS, Inscrib3Client, sdk
from .models import BroadcastResult, Drop, DropId, MintResult, Supply, UploadList

__version__ = "1.0.0"
__all__ = [
    "Inscrib3Client",
    "sdk",
    "Credentials",
    "authorization_header",
    "decode_session",
    "DEFAULT_API_URL",
    "NETWORKS",
    "CHAINS",
    "Drop",
    "DropId",
    "MintResult",
    "BroadcastResult",
    "UploadList",
    "Supply",
]

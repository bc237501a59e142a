"""
Tests for authorization header encoding.
"""

import base64

import pytest

from inscrib3_client import Credentials, authorization_header, decode_session
from inscrib3_client.auth import encode_session


class TestAuthorizationHeader:
    """Tests for authorization_header."""

    def test_basic_scheme(self):
        """Test the value uses the Basic scheme."""
        value = authorization_header("addr", "msg", "mainnet", "bitcoin", "sig")
        assert value.startswith("Basic ")

    def test_field_order(self):
        """Test fields are joined in address:message:network:chain:signature order."""
        value = authorization_header("addr", "msg", "testnet4", "fractal", "sig")
        raw = base64.b64decode(value[len("Basic "):]).decode()
        assert raw == "addr:msg:testnet4:fractal:sig"

    @pytest.mark.parametrize("network", ["mainnet", "testnet", "testnet4", "signet"])
    @pytest.mark.parametrize("chain", ["bitcoin", "fractal"])
    def test_all_configurations(self, network, chain):
        """Test every network/chain pair decodes to the joined string."""
        value = encode_session("bc1qxyz", "hello", network, chain, "c2ln")
        assert base64.b64decode(value).decode() == f"bc1qxyz:hello:{network}:{chain}:c2ln"

    def test_unicode_message(self):
        """Test non-ASCII messages are UTF-8 encoded."""
        value = encode_session("addr", "héllo ✓", "mainnet", "bitcoin", "sig")
        assert base64.b64decode(value) == "addr:héllo ✓:mainnet:bitcoin:sig".encode("utf-8")

    def test_message_with_colons(self):
        """Test colons inside the message are kept literally."""
        value = authorization_header("addr", "a:b:c", "signet", "bitcoin", "sig")
        assert decode_session(value) == ("addr", "a:b:c", "signet", "bitcoin", "sig")


class TestDecodeSession:
    """Tests for decode_session."""

    def test_without_prefix(self):
        """Test decoding a bare base64 value."""
        value = encode_session("addr", "msg", "mainnet", "bitcoin", "sig")
        assert decode_session(value) == ("addr", "msg", "mainnet", "bitcoin", "sig")

    def test_with_prefix(self):
        """Test decoding a full header value."""
        value = authorization_header("addr", "msg", "testnet", "fractal", "sig")
        assert decode_session(value) == ("addr", "msg", "testnet", "fractal", "sig")


class TestCredentials:
    """Tests for the Credentials tuple."""

    def test_unpacks_in_call_order(self):
        """Test unpacking yields address, message, signature."""
        creds = Credentials("addr", "msg", "sig")
        address, message, signature = creds
        assert (address, message, signature) == ("addr", "msg", "sig")

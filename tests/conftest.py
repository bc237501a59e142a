"""
Shared fixtures for client tests.
"""

import httpx
import pytest

from inscrib3_client import Credentials, Inscrib3Client


ADDRESS = "bc1qar0srrr7xfkvy5l643lydnw9re59gtzzwf5mdq"
MESSAGE = "Sign in to Inscrib3: nonce 42"
SIGNATURE = "H9L5yLFjti0QTHhPyFrZCT1V/MMnBtXKmoiKDZ78NDBjERki6ZTQZdSMCtkgoNmp17By9ItJr8o7ChX0XxY91nk="


class Recorder:
    """MockTransport handler that records requests and replies with a canned response."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.body = {}
        self.error = None

    def reply(self, body, status_code=200):
        self.body = body
        self.status_code = status_code

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def creds():
    return Credentials(ADDRESS, MESSAGE, SIGNATURE)


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def make_client(recorder):
    """Factory for clients wired to the recorder."""
    def _make(**kwargs):
        return Inscrib3Client(transport=httpx.MockTransport(recorder), **kwargs)
    return _make

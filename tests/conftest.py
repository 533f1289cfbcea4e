"""
Conftest
"""

import json
from typing import Callable, List
from urllib.parse import parse_qs

import httpx
import pytest

from deepl_client import DeepLClient

TEST_AUTH_KEY = "test-auth-key"
TEST_BASE_URL = "https://deepl.test/v2"


class FakeDeepL:
    """
    In-process DeepL endpoint built on httpx.MockTransport.

    Records every request it receives; answers with `status` and `body`.
    When `body` is None the translations are produced by echoing each
    submitted text back in upper case.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.status = 200
        self.body = None
        self.detected = "EN"

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.status != 200 or self.body is not None:
            content = self.body if isinstance(self.body, (str, bytes)) else json.dumps(self.body or {})
            return httpx.Response(self.status, content=content)

        texts = self.form(request).get("text", [])
        return httpx.Response(
            200,
            json={
                "translations": [
                    {"text": t.upper(), "detected_source_language": self.detected}
                    for t in texts
                ]
            },
        )

    @staticmethod
    def form(request: httpx.Request) -> dict:
        return parse_qs(request.content.decode(), keep_blank_values=True)

    @property
    def last_form(self) -> dict:
        return self.form(self.requests[-1])


@pytest.fixture
def fake_deepl() -> FakeDeepL:
    return FakeDeepL()


@pytest.fixture
def client(fake_deepl: FakeDeepL) -> DeepLClient:
    return DeepLClient(
        TEST_AUTH_KEY,
        TEST_BASE_URL,
        transport=httpx.MockTransport(fake_deepl.handler),
    )


@pytest.fixture
def make_client() -> Callable[[Callable], DeepLClient]:
    """Client factory for tests that need a custom request handler"""

    def _make(handler) -> DeepLClient:
        return DeepLClient(TEST_AUTH_KEY, TEST_BASE_URL, transport=httpx.MockTransport(handler))

    return _make

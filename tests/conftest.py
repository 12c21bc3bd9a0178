"""
Shared fixtures for tosspayments tests.
"""
from typing import Callable, List, Optional

import httpx
import pytest

from tosspayments.authorization import TossPaymentsAuthentication
from tosspayments.requester.httpx_requester import HttpxRequester

TEST_ENDPOINT = "https://api.tosspayments.com/v1/inform"
TEST_PATH = "/api/test"
TEST_BODY = '{"message":"Hello, World!"}'
TEST_SECRET_KEY = "test_sk_zXLkKEypNArWmo50nX3lmeaxYG5R"


class StubServer:
    """Records requests and answers them with a configurable response."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.status = 200
        self.body = TEST_BODY
        self.error: Optional[Exception] = None

    def reply(self, status: int, body: str = TEST_BODY) -> None:
        self.status = status
        self.body = body

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status, text=self.body)


@pytest.fixture
def authorization():
    """Valid credential for testing."""
    return TossPaymentsAuthentication(TEST_SECRET_KEY)


@pytest.fixture
def stub_server():
    return StubServer()


@pytest.fixture
def make_requester(authorization):
    """Factory for requesters over a MockTransport; closes them after the test."""
    created: List[HttpxRequester] = []

    def _make(handler: Callable, **kwargs) -> HttpxRequester:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        requester = HttpxRequester(TEST_ENDPOINT, authorization, httpx_client=client, **kwargs)
        created.append(requester)
        return requester

    yield _make

    for requester in created:
        requester.close()


@pytest.fixture
def requester(make_requester, stub_server):
    """HttpxRequester answering from stub_server."""
    return make_requester(stub_server.handler)

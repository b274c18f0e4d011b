import httpx
import pytest

from gitfile.fetcher import HTTPFetcher


class RecordingHandler:
    """MockTransport handler that records requests and replies with a fixed response."""

    def __init__(self, status_code=200, body="test", headers=None, exc=None):
        self.status_code = status_code
        self.body = body
        self.headers = headers or {}
        self.exc = exc
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc(request)
        return httpx.Response(self.status_code, headers=self.headers, text=self.body)


@pytest.fixture
def handler():
    return RecordingHandler()


@pytest.fixture
def make_fetcher():
    def _make(handler):
        return HTTPFetcher(transport=httpx.MockTransport(handler))
    return _make


@pytest.fixture
def fetcher(handler, make_fetcher):
    return make_fetcher(handler)

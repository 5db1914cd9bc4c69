"""Shared fixtures: a client wired to an in-process httpx MockTransport."""

import httpx
import pytest

from twcai.client import Client
from twcai.config import ClientConfig
from twcai.transport import HttpxTransport

BASE_URL = "https://agent.example.com"
TOKEN = "secret-token"


def build_client(handler, timeout: float = 5.0) -> Client:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    config = ClientConfig(token=TOKEN, base_url=BASE_URL, timeout=timeout)
    return Client(config, transport=HttpxTransport(client=http))


class Recorder:
    """Answers every request with one canned response and remembers the requests."""

    def __init__(self, status: int = 200, json=None, text: str | None = None, headers=None) -> None:
        self.status = status
        self.json = json
        self.text = text
        self.headers = headers or {}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status, text=self.text, headers=self.headers)
        if self.json is None:
            return httpx.Response(self.status, headers=self.headers)
        return httpx.Response(self.status, json=self.json, headers=self.headers)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def make_client():
    return build_client

"""Pytest fixtures: a BillplzClient wired to an httpx.MockTransport."""

import json

import httpx
import pytest

from billplz import BillplzClient


class Recorder:
    """Answers every request with one canned response and keeps what was sent."""

    def __init__(self, status_code=200, body=None, text=None):
        self.status_code = status_code
        self.body = body
        self.text = text
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def mock_api():
    """mock_api(status_code, body=..., text=...) -> (client, recorder)"""

    def _make(status_code=200, body=None, text=None):
        recorder = Recorder(status_code, body=body, text=text)
        client = BillplzClient.with_base_url(
            "http://billplz.test", "test-key", transport=httpx.MockTransport(recorder)
        )
        return client, recorder

    return _make

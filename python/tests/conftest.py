"""
Shared pytest fixtures for zibal-sdk tests.

This module provides sample gateway payloads, a valid merchant
configuration and a stub gateway built on httpx.MockTransport that
records every request it receives.
"""

import json
from typing import Callable, Union

import httpx
import pytest

from zibal_sdk import config as config_module
from zibal_sdk.config import LogLevel, ZibalConfig


class StubGateway:
    """
    Fake Zibal gateway.

    The responder receives the httpx.Request and returns either an
    httpx.Response or a dict sent back as a 200 JSON body. Raising from
    the responder simulates a transport failure.
    """

    def __init__(self, responder: Callable[[httpx.Request], Union[httpx.Response, dict]]):
        self.responder = responder
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        result = self.responder(request)
        if isinstance(result, httpx.Response):
            return result
        return httpx.Response(200, json=result)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Start every test without a process-wide configuration or ZIBAL_* env."""
    monkeypatch.setattr(config_module, "_current", None)
    for name in ("ZIBAL_MERCHANT", "ZIBAL_CALLBACK_URL", "ZIBAL_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def valid_config():
    """Valid merchant configuration with logging disabled."""
    return ZibalConfig.create(
        merchant="zibal",
        callback_url="https://shop.example.com/callback",
        log_level=LogLevel.NONE,
    )


@pytest.fixture
def sample_request_response():
    """Gateway answer to a successful payment request."""
    return {"result": 1, "message": "ok", "trackId": 4242}


@pytest.fixture
def sample_verify_response():
    """Gateway answer to a successful verification."""
    return {
        "result": 100,
        "message": "confirmed",
        "status": 100,
        "amount": 1500,
        "paidAt": "2018-03-25T23:43:01.053000",
    }


@pytest.fixture
def stub_gateway():
    """Factory building a StubGateway around a responder."""
    return StubGateway

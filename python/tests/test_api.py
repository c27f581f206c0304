"""
Tests for zibal_sdk.api module.

Tests the module level shortcuts that work on the process-wide
configuration.
"""

import pytest

from zibal_sdk import api
from zibal_sdk.client import ZibalClient
from zibal_sdk.config import LogLevel
from zibal_sdk.errors import InvalidConfigError
from zibal_sdk.status import Status, StatusKind


@pytest.fixture
def gateway(monkeypatch, stub_gateway, sample_request_response, sample_verify_response):
    """Route the shortcuts' clients to a stub gateway."""
    def answer(request):
        if request.url.path == "/verify":
            return sample_verify_response
        return sample_request_response

    stub = stub_gateway(answer)
    monkeypatch.setattr(api, "ZibalClient", lambda: ZibalClient(transport=stub.transport))
    return stub


class TestShortcuts:
    """Tests for request_payment, verify_payment and start_url."""

    async def test_request_before_initialize(self, gateway):
        """Test that calls before initialize() fail with zero network calls."""
        result = await api.request_payment(1500)

        assert isinstance(result.error, InvalidConfigError)
        assert gateway.call_count == 0

    async def test_request_and_verify(self, gateway):
        """Test the full flow through the shortcuts."""
        api.initialize("zibal", "https://shop.example.com/callback", LogLevel.NONE)

        requested = await api.request_payment(1500, order_id="A-17")
        assert requested.ok
        assert requested.body.result_status == Status.paid(verified=True)

        verified = await api.verify_payment(requested.body.track_id)
        assert verified.ok
        assert verified.body.status == Status.of(StatusKind.CONFIRMED)
        assert gateway.call_count == 2
        assert gateway.last_json() == {"merchant": "zibal", "trackId": 4242}

    def test_start_url(self):
        assert api.start_url(4242) == "https://gateway.zibal.ir/start/4242"

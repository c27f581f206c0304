"""
Location: python/zibal_sdk/api.py

Summary:
    Module level shortcuts operating on the process-wide configuration.
    Each call opens a short-lived ZibalClient, so nothing needs closing.

Example:
    from zibal_sdk import api

    api.initialize("zibal", "https://shop.example.com/callback")
    result = await api.request_payment(1500)
    if result.ok:
        print(api.start_url(result.body.track_id))
"""

from typing import Optional

import httpx

from .client import DEFAULT_BASE_URL, ZibalClient
from .config import initialize
from .result import Result
from .transport import build_url
from .types import RequestResponse, VerifyResponse


async def request_payment(
    amount: int,
    mobile: Optional[str] = None,
    description: Optional[str] = None,
    order_id: Optional[str] = None,
) -> Result[RequestResponse]:
    async with ZibalClient() as client:
        return await client.request_payment(amount, mobile, description, order_id)


async def verify_payment(track_id: int) -> Result[VerifyResponse]:
    async with ZibalClient() as client:
        return await client.verify_payment(track_id)


def start_url(track_id: int) -> Optional[httpx.URL]:
    return build_url(DEFAULT_BASE_URL, f"start/{track_id}")


__all__ = ["initialize", "request_payment", "verify_payment", "start_url"]

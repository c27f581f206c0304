#!/usr/bin/env python3
"""
Request a payment against the Zibal gateway and verify it.
Run with: python scripts/playground.py [amount]

Uses the "zibal" test merchant unless ZIBAL_MERCHANT / ZIBAL_CALLBACK_URL
are set.
"""
import asyncio
import logging
import os
import sys

import structlog

from zibal_sdk import InvalidConfigError, LogLevel, ZibalClient, ZibalConfig


async def main(amount: int) -> int:
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.INFO))

    try:
        config = ZibalConfig.create(
            merchant=os.environ.get("ZIBAL_MERCHANT", "zibal"),
            callback_url=os.environ.get("ZIBAL_CALLBACK_URL", "https://alireza.app"),
            log_level=LogLevel.VERBOSE,
        )
    except InvalidConfigError as exc:
        print(f"Configuration error: {exc}")
        return 1

    async with ZibalClient(config) as client:
        requested = await client.request_payment(amount)
        print("=" * 20, "Request", "=" * 20)
        print(requested.response)
        print(requested.error)
        print(requested.body)
        if not requested.ok:
            return 1
        print(requested.body.result_status)

        track_id = requested.body.track_id
        if track_id is None:
            return 1
        print("Start URL:", client.start_url(track_id))

        verified = await client.verify_payment(track_id)
        print("=" * 20, "Verify", "=" * 20)
        print(verified.response)
        print(verified.error)
        print(verified.body)
        if verified.ok:
            print(verified.body.result_status)
        return 0 if verified.ok else 1


if __name__ == "__main__":
    amount = int(sys.argv[1]) if len(sys.argv) > 1 else 1500
    sys.exit(asyncio.run(main(amount)))

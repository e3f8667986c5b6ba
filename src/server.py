"""Protean Engine runner for the storefront domain.

In production (``PROTEAN_ENV=production``) events are processed
asynchronously: the Engine publishes stored events to Redis Streams and
invokes the order notification handlers from there.

Usage:
    python src/server.py
    python src/server.py --test-mode   # process pending messages, then exit
"""

import argparse
import asyncio

from protean.server.engine import Engine

from storefront.domain import storefront
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


async def run(test_mode=False):
    storefront.init()
    engine = Engine(storefront, test_mode=test_mode)
    logger.info("engine_starting", domain=storefront.name, test_mode=test_mode)
    await engine.run()


def main():
    parser = argparse.ArgumentParser(description="Storefront Engine runner")
    parser.add_argument(
        "--test-mode",
        action="store_true",
        help="Process pending messages and exit",
    )
    args = parser.parse_args()

    asyncio.run(run(test_mode=args.test_mode))


if __name__ == "__main__":
    main()

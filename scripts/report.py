#!/usr/bin/env python3
"""
Fetch a Braincast report from a running deployment.

Reads /api/btc-price and a scalp endpoint concurrently, normalizes the
directive payload and prints the result as JSON.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

from app.clients import BraincastClient
from app.config import get_settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


async def run(base_url: str, signal_path: str, timeout: float) -> None:
    settings = get_settings()
    client = BraincastClient(
        signal_path=signal_path,
        defaults=settings.fallback_defaults(),
        base_url=base_url,
        timeout=timeout,
    )
    try:
        report = await client.fetch_report()
    finally:
        await client.close()

    directive = report.directive
    logger.info(
        f"{directive.direction.name} @ {directive.entry_price} -> target {directive.target_price}, "
        f"stop {directive.stop_price}, {directive.leverage}x"
    )
    print(report.model_dump_json(indent=2))


def main():
    parser = argparse.ArgumentParser(
        description="Fetch and normalize a Braincast report",
    )
    parser.add_argument(
        "--url",
        default="http://localhost:8000",
        help="Base URL of the deployment (default: http://localhost:8000)",
    )
    parser.add_argument(
        "--signal-path",
        default="/api/scalp",
        help="Directive endpoint path (default: /api/scalp)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=15.0,
        help="Request timeout in seconds (default: 15)",
    )
    args = parser.parse_args()

    asyncio.run(run(args.url, args.signal_path, args.timeout))


if __name__ == "__main__":
    main()

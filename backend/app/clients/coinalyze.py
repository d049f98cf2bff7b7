"""Coinalyze technical-analysis page scraper.

The page lists, for each timeframe in increasing order (5m, 15m, 1h, 2h,
4h, 6h, 1d), how many indicators point up, down or sideways, rendered
as text like ``Up: 6 Down: 5 Neutral: 1``.
"""

import logging
import re

from app.clients.http import HttpSourceClient

logger = logging.getLogger(__name__)

_COUNTS_RE = re.compile(r"Up:\s*(\d+)\s*Down:\s*(\d+)\s*Neutral:\s*(\d+)")


def parse_indicator_counts(html: str) -> list[tuple[int, int, int]]:
    """Extract ``(up, down, neutral)`` triples in document order."""
    return [
        (int(up), int(down), int(neutral))
        for up, down, neutral in _COUNTS_RE.findall(html)
    ]


class CoinalyzeClient(HttpSourceClient):
    """Indicator-count source backed by the Coinalyze TA page."""

    BASE_URL = "https://coinalyze.net/bitcoin/technical-analysis/"

    async def get_indicator_counts(self) -> list[tuple[int, int, int]]:
        """
        Fetch the TA page and extract per-timeframe counts.

        Returns:
            Triples ordered by increasing timeframe; may be shorter than
            the canonical timeframe list if the page layout changed

        Raises:
            httpx.HTTPError: On transport failure or non-2xx status
        """
        response = await self._get()
        counts = parse_indicator_counts(response.text)
        if not counts:
            logger.warning(f"No indicator counts found on {self.base_url}")
        else:
            logger.debug(f"Parsed {len(counts)} timeframe counts from {self.base_url}")
        return counts

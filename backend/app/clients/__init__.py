"""Data-source clients."""

from app.clients.http import HttpSourceClient, SourceError
from app.clients.coinalyze import CoinalyzeClient, parse_indicator_counts
from app.clients.coingecko import CoinGeckoClient
from app.clients.braincast_api import BraincastClient

__all__ = [
    "HttpSourceClient",
    "SourceError",
    "CoinalyzeClient",
    "parse_indicator_counts",
    "CoinGeckoClient",
    "BraincastClient",
]

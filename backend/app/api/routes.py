"""REST API routes."""

import logging
from typing import Literal

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.config import get_settings
from app.services import SignalService, create_signal_service
from core.models import Directive, PriceTicker

logger = logging.getLogger(__name__)

router = APIRouter()

Variant = Literal["scalp", "consensus"]

_service: SignalService | None = None


# Response models
class DirectiveResponse(BaseModel):
    """Directive as served to clients."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    signal: str
    entry_price: int
    target_price: int
    stop_price: int
    leverage: int

    @classmethod
    def from_directive(cls, directive: Directive) -> "DirectiveResponse":
        return cls(
            signal=directive.direction.name,
            entry_price=directive.entry_price,
            target_price=directive.target_price,
            stop_price=directive.stop_price,
            leverage=directive.leverage,
        )


class TickerResponse(BaseModel):
    """Spot price response."""

    price: int
    change24h: float

    @classmethod
    def from_ticker(cls, ticker: PriceTicker) -> "TickerResponse":
        return cls(price=ticker.price, change24h=ticker.change24h)


class ReportResponse(BaseModel):
    """Ticker and directive for one report."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    ticker: TickerResponse
    directive: DirectiveResponse
    target_percent: float


def get_signal_service() -> SignalService:
    """Process-wide signal service, created on first use."""
    global _service
    if _service is None:
        _service = create_signal_service(get_settings())
        logger.info(f"Signal service ready, variants: {', '.join(_service.variants)}")
    return _service


async def close_signal_service() -> None:
    global _service
    if _service is not None:
        await _service.close()
        _service = None


async def _directive(service: SignalService, variant: Variant) -> DirectiveResponse:
    directive = await service.get_directive(variant)
    return DirectiveResponse.from_directive(directive)


@router.get("/scalp", response_model=DirectiveResponse)
@router.get("/better-scalp", response_model=DirectiveResponse, include_in_schema=False)
async def get_scalp(service: SignalService = Depends(get_signal_service)):
    """Directive with direction from the lowest timeframes."""
    return await _directive(service, "scalp")


@router.get("/consensus", response_model=DirectiveResponse)
@router.get("/coinalyze-scalp", response_model=DirectiveResponse, include_in_schema=False)
async def get_consensus(service: SignalService = Depends(get_signal_service)):
    """Directive with direction from every timeframe."""
    return await _directive(service, "consensus")


@router.get("/btc-price", response_model=TickerResponse)
async def get_btc_price(service: SignalService = Depends(get_signal_service)):
    """Spot price and 24h change."""
    ticker = await service.get_ticker()
    return TickerResponse.from_ticker(ticker)


@router.get("/report", response_model=ReportResponse)
async def get_report(
    variant: Variant = Query("scalp", description="Engine variant"),
    service: SignalService = Depends(get_signal_service),
):
    """Ticker and directive fetched concurrently."""
    report = await service.get_report(variant)
    return ReportResponse(
        ticker=TickerResponse.from_ticker(report.ticker),
        directive=DirectiveResponse.from_directive(report.directive),
        target_percent=round(report.directive.target_percent, 1),
    )

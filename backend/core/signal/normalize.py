"""Normalization of directive payloads from upstream deployments.

Older and newer deployments of the scalp endpoint disagree on field
names. Each known payload shape is a model in a tagged union; the tag is
derived from which keys are present, and every shape maps to the
canonical Directive explicitly.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Tag,
    TypeAdapter,
    ValidationError,
)
from pydantic.alias_generators import to_camel

from core.models.config import FallbackDefaults
from core.models.signal import Direction, Directive
from core.signal.rounding import round_half_up

logger = logging.getLogger(__name__)

DirectionName = Literal["LONG", "SHORT"]
_LEGACY_KEYS = ("technicalData", "exitPrice", "stopLoss")


class _Payload(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True, allow_inf_nan=False
    )

    entry_price: float | None = None
    target_price: float | None = None
    stop_price: float | None = None
    leverage: int | None = None


class SignalPayload(_Payload):
    """``{signal, entryPrice, targetPrice, stopPrice, leverage}``."""

    signal: DirectionName

    @property
    def direction_name(self) -> str:
        return self.signal


class DirectionPayload(_Payload):
    """Same as SignalPayload with ``direction`` instead of ``signal``."""

    direction: DirectionName

    @property
    def direction_name(self) -> str:
        return self.direction


class TechnicalData(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True, allow_inf_nan=False
    )

    entry_price: float | None = None


class LegacyPayload(_Payload):
    """``technicalData.entryPrice`` / ``exitPrice`` / ``stopLoss`` layout."""

    signal: DirectionName | None = None
    direction: DirectionName | None = None
    technical_data: TechnicalData | None = None
    exit_price: float | None = None
    stop_loss: float | None = None

    @property
    def direction_name(self) -> str | None:
        return self.signal or self.direction


def payload_shape(payload: Any) -> str | None:
    """Tag a raw payload with the name of the shape it follows."""
    if not isinstance(payload, dict):
        return None
    if any(key in payload for key in _LEGACY_KEYS):
        return "legacy"
    if payload.get("signal"):
        return "signal"
    if payload.get("direction"):
        return "direction"
    return None


DirectivePayload = Annotated[
    Union[
        Annotated[SignalPayload, Tag("signal")],
        Annotated[DirectionPayload, Tag("direction")],
        Annotated[LegacyPayload, Tag("legacy")],
    ],
    Discriminator(payload_shape),
]

_adapter: TypeAdapter[DirectivePayload] = TypeAdapter(DirectivePayload)


def _price(value: float | None, default: int) -> int:
    return default if value is None else round_half_up(value)


def to_directive(
    payload: SignalPayload | DirectionPayload | LegacyPayload,
    defaults: FallbackDefaults,
) -> Directive:
    """Map a parsed payload onto a Directive, filling gaps from defaults."""
    if isinstance(payload, LegacyPayload):
        if payload.direction_name is None:
            return defaults.directive()
        entry = payload.entry_price
        if entry is None and payload.technical_data is not None:
            entry = payload.technical_data.entry_price
        target = payload.target_price if payload.target_price is not None else payload.exit_price
        stop = payload.stop_price if payload.stop_price is not None else payload.stop_loss
    else:
        entry = payload.entry_price
        target = payload.target_price
        stop = payload.stop_price

    return Directive(
        direction=Direction[payload.direction_name],
        entry_price=_price(entry, defaults.entry_price),
        target_price=_price(target, defaults.target_price),
        stop_price=_price(stop, defaults.stop_price),
        leverage=payload.leverage if payload.leverage is not None else defaults.leverage,
    )


def normalize_directive(payload: Any, defaults: FallbackDefaults | None = None) -> Directive:
    """Convert an upstream directive payload to a Directive. Never raises.

    Unrecognized or invalid payloads yield the static fallback directive.
    """
    defaults = defaults or FallbackDefaults()
    try:
        parsed = _adapter.validate_python(payload)
        return to_directive(parsed, defaults)
    except (ValidationError, ValueError) as e:
        logger.warning(f"Unrecognized directive payload, using fallback: {e}")
        return defaults.directive()

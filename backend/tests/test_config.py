"""Tests for window selectors, fallback defaults and settings."""

import pytest
from pydantic import ValidationError

from app.config import Settings
from core.models import (
    ENGINE_VARIANTS,
    TIMEFRAMES,
    Direction,
    FallbackDefaults,
    WindowSelector,
)


class TestWindowSelector:
    """Tests for WindowSelector parsing and slicing."""

    @pytest.mark.parametrize(
        "text, anchor, size",
        [
            ("leading:3", "leading", 3),
            ("trailing:2", "trailing", 2),
            ("all", "all", 7),
            (" ALL ", "all", 7),
            ("Leading:5", "leading", 5),
        ],
    )
    def test_parse(self, text, anchor, size):
        window = WindowSelector.parse(text)
        assert window.anchor == anchor
        assert window.size == size

    @pytest.mark.parametrize("text", ["middle:3", "leading", "leading:x", "trailing:-1", ""])
    def test_parse_invalid(self, text):
        with pytest.raises(ValueError):
            WindowSelector.parse(text)

    def test_zero_size_rejected(self):
        with pytest.raises(ValidationError):
            WindowSelector.parse("leading:0")

    def test_str_round_trip(self):
        for text in ("leading:3", "trailing:4", "all"):
            assert str(WindowSelector.parse(text)) == text

    def test_select(self):
        assert WindowSelector.leading(2).select(TIMEFRAMES) == ["5m", "15m"]
        assert WindowSelector.trailing(3).select(TIMEFRAMES) == ["4h", "6h", "1d"]
        assert WindowSelector.full().select(TIMEFRAMES) == list(TIMEFRAMES)


class TestFallbackDefaults:
    """Tests for FallbackDefaults."""

    def test_static_directive(self):
        directive = FallbackDefaults().directive()

        assert directive.direction == Direction.LONG
        assert directive.entry_price == 119500
        assert directive.target_price == 121500
        assert directive.stop_price == 119200
        assert directive.leverage == 30

    def test_ticker_defaults(self):
        defaults = FallbackDefaults()
        assert defaults.ticker_price == 113279
        assert defaults.ticker_change_24h == -2.76

    @pytest.mark.parametrize("leverage", [29, 51])
    def test_leverage_out_of_range_rejected(self, leverage):
        with pytest.raises(ValidationError):
            FallbackDefaults(leverage=leverage)

    def test_entry_must_be_positive(self):
        with pytest.raises(ValidationError):
            FallbackDefaults(entry_price=0)


class TestVariants:
    def test_known_variants(self):
        assert set(ENGINE_VARIANTS) == {"scalp", "consensus"}
        assert ENGINE_VARIANTS["scalp"].direction_window == WindowSelector.leading(3)
        assert ENGINE_VARIANTS["consensus"].direction_window == WindowSelector.full()
        for config in ENGINE_VARIANTS.values():
            assert config.leverage_window == WindowSelector.trailing(3)


class TestSettings:
    """Tests for environment-driven Settings."""

    def test_defaults(self):
        settings = Settings(_env_file=None)
        config = settings.engine_config()

        assert config.direction_window == WindowSelector.leading(3)
        assert config.leverage_window == WindowSelector.trailing(3)
        assert settings.fallback_defaults() == FallbackDefaults()

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("DIRECTION_WINDOW", "all")
        monkeypatch.setenv("FALLBACK_ENTRY_PRICE", "100000")
        monkeypatch.setenv("SOURCE_TIMEOUT", "2.5")
        settings = Settings(_env_file=None)

        assert settings.engine_config().direction_window == WindowSelector.full()
        assert settings.fallback_defaults().entry_price == 100000
        assert settings.source_timeout == 2.5

    def test_invalid_window_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, leverage_window="sideways")

    @pytest.mark.parametrize("leverage", [10, 29, 51])
    def test_invalid_fallback_leverage_rejected(self, leverage):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, fallback_leverage=leverage)

    def test_fallback_leverage_from_env_rejected(self, monkeypatch):
        monkeypatch.setenv("FALLBACK_LEVERAGE", "75")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

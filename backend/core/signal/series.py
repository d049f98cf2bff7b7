"""Fixed-length series of per-timeframe indicator counts."""

from __future__ import annotations

from typing import Iterable, Sequence

from pydantic import BaseModel, ConfigDict

from core.models.config import TIMEFRAMES, WindowSelector
from core.models.signal import IndicatorCount

RawCount = Sequence[int]


class TimeframeSeries(BaseModel):
    """Indicator counts ordered from the shortest to the longest timeframe.

    Always holds one entry per canonical timeframe, so any window over it
    is well defined.
    """

    model_config = ConfigDict(frozen=True)

    counts: tuple[IndicatorCount, ...]

    @classmethod
    def build(cls, raw_counts: Iterable[RawCount] | None = None) -> TimeframeSeries:
        """Label raw ``(up, down, neutral)`` triples with canonical timeframes.

        Missing timeframes are zero-filled; entries past the last canonical
        timeframe are ignored.

        Raises:
            ValueError: If a triple does not hold exactly three values.
            pydantic.ValidationError: If a value is not a non-negative int.
        """
        raw = list(raw_counts or [])[: len(TIMEFRAMES)]
        counts = []
        for idx, timeframe in enumerate(TIMEFRAMES):
            if idx < len(raw):
                up, down, neutral = raw[idx]
                counts.append(
                    IndicatorCount(timeframe=timeframe, up=up, down=down, neutral=neutral)
                )
            else:
                counts.append(IndicatorCount(timeframe=timeframe))
        return cls(counts=tuple(counts))

    @classmethod
    def empty(cls) -> TimeframeSeries:
        return cls.build([])

    def window(self, selector: WindowSelector) -> list[IndicatorCount]:
        return selector.select(self.counts)

    def totals(self, selector: WindowSelector) -> tuple[int, int]:
        """Sum of ``up`` and ``down`` votes inside the window."""
        frames = self.window(selector)
        return sum(c.up for c in frames), sum(c.down for c in frames)

    def __len__(self) -> int:
        return len(self.counts)

    def __getitem__(self, idx: int) -> IndicatorCount:
        return self.counts[idx]

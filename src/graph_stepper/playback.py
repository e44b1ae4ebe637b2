"""
Step-by-step cursor over a materialized step sequence.

The player only tracks position; callers decide when to tick it, e.g. every
``interval_ms`` milliseconds from their own timer.
"""

import logging
from typing import List, Optional, Sequence

from .config import StepperConfig, config as default_config
from .exceptions import PlaybackIntervalError
from .models import Step

logger = logging.getLogger(__name__)


class StepPlayer:
    """Cursor over one run's steps supporting forward, back, seek and reset."""

    def __init__(
        self,
        steps: Sequence[Step],
        interval_ms: Optional[int] = None,
        config: Optional[StepperConfig] = None,
    ):
        self.config = config or default_config
        self._steps: List[Step] = list(steps)
        self._index = -1
        self._interval_ms = self.config.default_interval_ms
        if interval_ms is not None:
            self.interval_ms = interval_ms

    def __len__(self) -> int:
        return len(self._steps)

    @property
    def current_index(self) -> int:
        """Index of the step on display, -1 before the first step."""
        return self._index

    @property
    def current_step(self) -> Optional[Step]:
        if self._index < 0:
            return None
        return self._steps[self._index]

    @property
    def is_finished(self) -> bool:
        return self._index >= len(self._steps) - 1

    @property
    def progress(self) -> float:
        """Fraction of steps shown so far, 1.0 for an empty sequence."""
        if not self._steps:
            return 1.0
        return (self._index + 1) / len(self._steps)

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    @interval_ms.setter
    def interval_ms(self, value: int) -> None:
        low, high, step = self.config.min_interval_ms, self.config.max_interval_ms, self.config.interval_step_ms
        if not low <= value <= high:
            raise PlaybackIntervalError(f"Interval {value}ms must be between {low}ms and {high}ms.")
        if (value - low) % step != 0:
            raise PlaybackIntervalError(f"Interval {value}ms must move in increments of {step}ms.")
        self._interval_ms = value

    def step_forward(self) -> Optional[Step]:
        """Advance one step; returns None once the sequence is exhausted."""
        if self.is_finished:
            return None
        self._index += 1
        return self._steps[self._index]

    def step_back(self) -> Optional[Step]:
        if self._index <= 0:
            self._index = -1
            return None
        self._index -= 1
        return self._steps[self._index]

    def seek(self, index: int) -> Step:
        if not 0 <= index < len(self._steps):
            raise IndexError(f"Step index {index} out of range for {len(self._steps)} steps")
        self._index = index
        return self._steps[index]

    def reset(self) -> None:
        self._index = -1
        logger.debug("Playback reset")

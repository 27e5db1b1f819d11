"""Recognise short/long touch sequences on a capacitive touch pad."""

from __future__ import annotations

import sys
import time
from typing import Callable, Mapping, Optional, TextIO

SHORT = "S"
LONG = "L"
LONG_PRESS_COUNT = 5
TOUCH_THRESHOLD = 20
TOUCH_DELAY = 350

DEFAULT_PATTERNS: dict[str, str] = {
    "LSLL": "Unlock the door",
    "SSL": "Lock the door",
}


def classify_touch(count: int) -> str:
    """``'L'`` for a press counted five or more times, otherwise ``'S'``."""
    return LONG if count >= LONG_PRESS_COUNT else SHORT


def _millis() -> float:
    return time.monotonic() * 1000.0


class TouchControl:
    """Turns touch interrupts into S/L symbols and matches them to actions.

    A held pad keeps firing the interrupt; it is counted at most once per
    ``touch_delay`` milliseconds. Once no touch arrives for ``touch_delay``,
    the count becomes a symbol appended to ``pattern``.
    """

    def __init__(
        self,
        *,
        threshold: int = TOUCH_THRESHOLD,
        touch_delay: float = TOUCH_DELAY,
        patterns: Optional[Mapping[str, str]] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self.threshold = threshold
        self.touch_delay = touch_delay
        self.patterns = dict(DEFAULT_PATTERNS if patterns is None else patterns)
        self._clock = clock or _millis
        self.touched = False
        self.touch_count = 0
        self.pattern = ""
        self._last_registered = 0.0
        self._any_touch = 0.0
        self._stream: Optional[TextIO] = None
        self.debug_enabled = False

    def enable_debug(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self.debug_enabled = True

    def touch_interrupt(self) -> None:
        """Record that the pad reading fell below the threshold."""
        self.touched = True

    def _log(self, line: str) -> None:
        if self._stream is not None:
            print(line, file=self._stream)

    def handle_touch(self) -> Optional[str]:
        """Process pending touches; return the action of a matched pattern."""
        now = self._clock()
        if self.touched:
            self.touched = False
            if now - self._last_registered > self.touch_delay:
                if self.debug_enabled:
                    self._log("Touch sensor touched")
                self._last_registered = now
                self.touch_count += 1
            self._any_touch = now
            return None

        if now - self._any_touch > self.touch_delay and self.touch_count > 0:
            self.pattern += classify_touch(self.touch_count)
            self.touch_count = 0
            self._log(self.pattern)
            if len(self.pattern) >= 3:
                action = self.patterns.get(self.pattern)
                if action is not None:
                    return action
                self.pattern = ""
        return None
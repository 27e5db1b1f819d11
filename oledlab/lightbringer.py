"""Switch an LED on and off from text commands, with optional debug tracing."""

from __future__ import annotations

import sys
import time
from typing import Callable, Optional, TextIO, Union

LED_PIN = 21
BLINK_PIN = 21
BANNER = "Light bringer v1.0"
PROMPT = "What is it you wish to do?"
COMMANDS: dict[str, bool] = {"on": True, "off": False}

Writer = Callable[[int, bool], None]


class LightController:
    """Reads commands and drives one LED; ``trace`` logs each greeting step."""

    def __init__(
        self,
        pin: int = LED_PIN,
        *,
        write: Optional[Writer] = None,
        sleep: Callable[[float], None] = time.sleep,
        output: Optional[TextIO] = None,
        trace: bool = False,
    ) -> None:
        self.pin = pin
        self._write = write
        self._sleep = sleep
        self.output = output if output is not None else sys.stdout
        self.trace = trace
        self.level = False

    def _say(self, line: str) -> None:
        print(line, file=self.output)

    def _set(self, level: bool) -> None:
        self.level = level
        if self._write is not None:
            self._write(self.pin, level)

    def greeting(self) -> None:
        """Announce the program, blink three times, then prompt for a command."""
        self._say(BANNER)
        for i in range(3):
            self._set(True)
            self._sleep(1.0)
            self._set(False)
            self._sleep(1.0)
            if self.trace:
                self._say(f"i = {i}")
        self._say(PROMPT)

    def process_command(self, command: str) -> Optional[bool]:
        """Apply ``on`` or ``off``; return the new level, or ``None`` if unknown."""
        if self.trace:
            self._say(f"process_command({command!r})")
        self._say(f"You asked for light to be: {command}")
        level = COMMANDS.get(command)
        if level is None:
            self._say("I don't get that :(")
            return None
        self._say(f"light is now {command}")
        self._set(level)
        return level

    def read_input(self, data: Union[bytes, str]) -> Optional[bool]:
        """Handle a chunk of serial input as one trimmed command."""
        text = data.decode("latin-1") if isinstance(data, bytes) else data
        if not text:
            return None
        return self.process_command(text.strip())


class Blinker:
    """Blinks a pin five times, optionally narrating to a debug stream."""

    def __init__(
        self,
        *,
        write: Optional[Writer] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._write = write
        self._sleep = sleep
        self._stream: Optional[TextIO] = None
        self.debug_enabled = False

    def enable_debug(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self.debug_enabled = True

    def _debug(self, line: str) -> None:
        if self.debug_enabled and self._stream is not None:
            print(line, file=self._stream)

    def blink(self, pin: int = BLINK_PIN) -> None:
        for _ in range(5):
            self._debug("Turning LED on")
            if self._write is not None:
                self._write(pin, True)
            self._sleep(0.5)
            self._debug("Turning LED off")
            if self._write is not None:
                self._write(pin, False)
            self._sleep(0.5)
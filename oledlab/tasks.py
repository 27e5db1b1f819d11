"""Indicator tasks that light an LED or an LED strip when an event is signalled."""

from __future__ import annotations

import abc
import time
from typing import Callable, Optional

Color = tuple[int, int, int]
Clock = Callable[[], float]

BLACK: Color = (0, 0, 0)
STRIP_BASE: Color = (0, 128, 0)
STRIP_COUNT = 24

ONBOARD_COLORS: tuple[Color, ...] = (
    (255, 0, 0), (0, 255, 0), (0, 0, 255), (255, 255, 0), (255, 0, 255),
    (0, 255, 255), (255, 255, 255),
    (255, 128, 128), (128, 255, 128), (128, 128, 255), (255, 255, 128),
    (255, 128, 255), (128, 255, 255),
    (64, 128, 255), (128, 64, 255), (128, 255, 64), (64, 255, 128),
    (255, 64, 128), (255, 128, 64),
)

STRIP_COLORS: tuple[Color, ...] = (
    (255, 0, 0), (0, 255, 0), (0, 0, 255), (255, 255, 0), (255, 0, 255),
    (0, 255, 255), (255, 255, 255),
    (255, 128, 128), (128, 255, 128), (128, 128, 255), (255, 255, 128),
    (255, 128, 255), (128, 255, 255),
    (255, 128, 0), (255, 0, 128), (0, 255, 128), (128, 255, 0),
    (0, 128, 255), (128, 0, 255),
    (64, 128, 255), (128, 64, 255), (128, 255, 64), (64, 255, 128),
    (255, 64, 128), (255, 128, 64),
)


def _millis() -> float:
    return time.monotonic() * 1000.0


def _check_channel(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be in 0..255, got {value}")


class Task(abc.ABC):
    """Something switched on by an event and switched off again over time."""

    @abc.abstractmethod
    def on(self) -> None:
        """React to an event."""

    @abc.abstractmethod
    def off(self) -> None:
        """Return to the idle state."""

    @abc.abstractmethod
    def tick(self) -> None:
        """Called once per frame."""


class PixelStrip:
    """An addressable RGB pixel strip kept in memory.

    Colours are staged with ``set_pixel``/``set_all`` and become visible
    in ``displayed`` only when ``show`` is called.
    """

    def __init__(self, count: int = STRIP_COUNT) -> None:
        if count < 1:
            raise ValueError(f"strip needs at least one pixel, got {count}")
        self.count = count
        self.pixels: list[Color] = [BLACK] * count
        self.brightness = 255
        self.displayed: tuple[Color, ...] = tuple(self.pixels)
        self.displayed_brightness = 0
        self.show_count = 0

    def __len__(self) -> int:
        return self.count

    def set_pixel(self, index: int, red: int, green: int, blue: int) -> None:
        if not 0 <= index < self.count:
            raise IndexError(f"pixel {index} outside strip of {self.count}")
        for name, value in (("red", red), ("green", green), ("blue", blue)):
            _check_channel(name, value)
        self.pixels[index] = (red, green, blue)

    def set_all(self, red: int, green: int, blue: int) -> None:
        for index in range(self.count):
            self.set_pixel(index, red, green, blue)

    def set_brightness(self, level: int) -> None:
        _check_channel("brightness", level)
        self.brightness = level

    def show(self) -> None:
        self.displayed = tuple(self.pixels)
        self.displayed_brightness = self.brightness
        self.show_count += 1


class PinLedTask(Task):
    """A plain LED on a digital pin, lit on an event for ``delay`` milliseconds."""

    def __init__(
        self,
        pin: int,
        delay: float,
        swap: bool = False,
        *,
        clock: Optional[Clock] = None,
        write: Optional[Callable[[int, bool], None]] = None,
    ) -> None:
        self.pin = pin
        self.delay = delay
        self.swap = swap
        self._clock = clock or _millis
        self._write = write
        self.level = False
        self._last = self._clock()

    def _set(self, lit: bool) -> None:
        self.level = lit != self.swap
        if self._write is not None:
            self._write(self.pin, self.level)

    @property
    def lit(self) -> bool:
        return self.level != self.swap

    def on(self) -> None:
        self._set(True)
        self._last = self._clock()

    def off(self) -> None:
        self._set(False)

    def tick(self) -> None:
        if self._clock() - self._last > self.delay:
            self.off()


class RgbLedTask(Task):
    """A single RGB pixel that flashes the next palette colour on each event."""

    def __init__(
        self,
        strip: PixelStrip,
        brightness: int,
        delay: float,
        *,
        clock: Optional[Clock] = None,
        palette: tuple[Color, ...] = ONBOARD_COLORS,
    ) -> None:
        _check_channel("brightness", brightness)
        if not palette:
            raise ValueError("palette must not be empty")
        self.strip = strip
        self.brightness = brightness
        self.delay = delay
        self.palette = palette
        self.color_cycle = 0
        self._clock = clock or _millis
        self._last = self._clock()

    def on(self) -> None:
        self.strip.set_pixel(0, *self.palette[self.color_cycle])
        self.strip.set_brightness(self.brightness)
        self.strip.show()
        self._last = self._clock()

    def off(self) -> None:
        self.strip.set_pixel(0, *self.palette[self.color_cycle])
        self.strip.set_brightness(0)
        self.strip.show()
        self.color_cycle = (self.color_cycle + 1) % len(self.palette)

    def tick(self) -> None:
        if self._clock() - self._last > self.delay:
            self.off()


class StripLedTask(Task):
    """An LED strip where each event injects a colour that travels along it."""

    def __init__(
        self,
        strip: PixelStrip,
        brightness: int,
        delay: float,
        *,
        clock: Optional[Clock] = None,
        sleep: Callable[[float], None] = time.sleep,
        palette: tuple[Color, ...] = STRIP_COLORS,
    ) -> None:
        if not palette:
            raise ValueError("palette must not be empty")
        self.strip = strip
        self.delay = delay
        self.palette = palette
        self.color_cycle = 0
        self._clock = clock or _millis
        self._colors: list[Color] = [BLACK] * strip.count

        strip.set_brightness(brightness)
        strip.set_all(0, 255, 0)
        strip.show()
        self._intro(sleep)
        self._last = self._clock()

    def _intro(self, sleep: Callable[[float], None]) -> None:
        strip = self.strip
        count = strip.count
        strip.set_all(*STRIP_BASE)
        strip.show()
        sleep(1.0)
        for j in range(count - 1):
            if j > 0:
                strip.set_pixel(j - 1, *STRIP_BASE)
                strip.set_pixel(count - j, *STRIP_BASE)
            strip.set_pixel(j, 255, 0, 0)
            strip.set_pixel(count - 1 - j, 255, 255, 255)
            strip.show()
            sleep(0.08)
        strip.set_all(*STRIP_BASE)
        strip.show()
        sleep(0.5)

    @property
    def colors(self) -> tuple[Color, ...]:
        return tuple(self._colors)

    def on(self) -> None:
        self._colors[0] = self.palette[self.color_cycle]
        self.strip.set_pixel(0, *self._colors[0])
        self.strip.show()
        self.color_cycle = (self.color_cycle + 1) % len(self.palette)

    def off(self) -> None:
        self.strip.set_pixel(0, *BLACK)
        self.strip.show()
        self._last = self._clock()

    def tick(self) -> None:
        for j in range(self.strip.count - 1, 0, -1):
            self._colors[j] = self._colors[j - 1]
            self.strip.set_pixel(j, *self._colors[j])
        self._colors[0] = BLACK
        self.strip.show()
        if self._clock() - self._last > self.delay:
            self.off()
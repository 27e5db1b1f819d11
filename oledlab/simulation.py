"""Elastic collision simulation of balls bouncing inside a rectangular box."""

from __future__ import annotations

import enum
import math
import random
from dataclasses import dataclass
from typing import Iterable, Optional, Protocol

DEFAULT_SPEED = (0.5, 0.73)
MASS_FACTOR = 0.001


class _Signal(Protocol):
    def on(self) -> None: ...


class CollisionTrigger(enum.Enum):
    """When a ball-to-ball collision switches the attached task on."""

    NEVER = "never"
    CONTACT = "contact"
    BOUNCE = "bounce"


@dataclass
class Ball:
    """A ball with position, velocity, radius and mass."""

    x: float
    y: float
    vx: float
    vy: float
    radius: float
    mass: float

    @property
    def momentum(self) -> tuple[float, float]:
        return self.vx * self.mass, self.vy * self.mass


def random_radius(base_radius: float, rng: random.Random) -> float:
    """Radius between 1.5 and just under 3.5 times ``base_radius``."""
    return base_radius / 2.0 + base_radius * (100 + rng.randrange(200)) / 100.0


def bitmap_radius(rng: random.Random) -> float:
    """Whole-number radius from 5 to 14, one per available ball bitmap."""
    return rng.randrange(10) + 5.0


class Simulation:
    """Balls stacked diagonally from the top-left corner, moving together."""

    def __init__(
        self,
        radii: Iterable[float],
        *,
        speed: tuple[float, float] = DEFAULT_SPEED,
        task: Optional[_Signal] = None,
        collision_trigger: CollisionTrigger = CollisionTrigger.CONTACT,
        wall_trigger: bool = False,
    ) -> None:
        self.task = task
        self.collision_trigger = collision_trigger
        self.wall_trigger = wall_trigger
        self.balls: list[Ball] = []
        previous: Optional[Ball] = None
        for radius in radii:
            if radius <= 0:
                raise ValueError(f"ball radius must be positive, got {radius}")
            if previous is None:
                x = y = radius
            else:
                x = previous.x + previous.radius + radius
                y = previous.y + previous.radius + radius
            ball = Ball(x, y, speed[0], speed[1], radius, radius * radius * MASS_FACTOR)
            self.balls.append(ball)
            previous = ball
        self.current_momentum = self._total_momentum()
        self.start_momentum = self.current_momentum

    def _total_momentum(self) -> float:
        return math.sqrt(
            sum((b.vx * b.mass) ** 2 + (b.vy * b.mass) ** 2 for b in self.balls)
        )

    def _signal(self) -> None:
        if self.task is not None:
            self.task.on()

    def update_positions(self, width: float, height: float) -> None:
        """Advance one step inside a ``width`` x ``height`` box."""
        if self._wall_bounce(width, height) and self.wall_trigger:
            self._signal()
        for ball in self.balls:
            ball.x += ball.vx
            ball.y += ball.vy
        for j, first in enumerate(self.balls):
            for second in self.balls[j + 1:]:
                if not self._is_candidate(first, second):
                    continue
                reach = first.radius + second.radius
                distance = math.hypot(second.x - first.x, second.y - first.y)
                if distance <= reach:
                    self._correct_position(first, second)
                    if self.collision_trigger is CollisionTrigger.CONTACT:
                        self._signal()
                    bounced = self._ball_bounce(first, second, reach)
                    if bounced and self.collision_trigger is CollisionTrigger.BOUNCE:
                        self._signal()
                    self._keep_total_momentum()
        self.current_momentum = self._total_momentum()

    def _wall_bounce(self, width: float, height: float) -> bool:
        bounced = False
        for ball in self.balls:
            if ball.x < ball.radius and ball.vx < 0.0:
                ball.vx = -ball.vx
                bounced = True
            if ball.y < ball.radius and ball.vy < 0.0:
                ball.vy = -ball.vy
                bounced = True
            if ball.x > width - ball.radius and ball.vx > 0.0:
                ball.vx = -ball.vx
                bounced = True
            if ball.y > height - ball.radius and ball.vy > 0.0:
                ball.vy = -ball.vy
                bounced = True
        return bounced

    @staticmethod
    def _is_candidate(first: Ball, second: Ball) -> bool:
        reach = first.radius + second.radius
        return abs(second.x - first.x) <= reach and abs(second.y - first.y) <= reach

    @staticmethod
    def _correct_position(first: Ball, second: Ball) -> None:
        """Push the second ball out along the centre line until they touch."""
        dx = second.x - first.x
        dy = second.y - first.y
        distance = math.hypot(dx, dy)
        if distance == 0.0:
            return
        ratio = (first.radius + second.radius) / distance
        second.x = first.x + dx * ratio
        second.y = first.y + dy * ratio

    @staticmethod
    def _ball_bounce(first: Ball, second: Ball, reach: float) -> bool:
        dx = second.x - first.x
        dy = second.y - first.y
        dvx = second.vx - first.vx
        dvy = second.vy - first.vy
        approach = (dx * dvx + dy * dvy) / (reach * reach)
        if approach >= 0:
            return False
        total_mass = first.mass + second.mass
        mass_term = (second.mass - first.mass) / total_mass - 1
        share = 2.0 * second.mass / total_mass

        change = dx * approach
        dvx += change * mass_term
        second.vx = first.vx + dvx
        first.vx = first.vx + change * share

        change = dy * approach
        dvy += change * mass_term
        second.vy = first.vy + dvy
        first.vy = first.vy + change * share
        return True

    def _keep_total_momentum(self) -> None:
        ratio = self.start_momentum / self.current_momentum
        for ball in self.balls:
            ball.vx *= ratio
            ball.vy *= ratio
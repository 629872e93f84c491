"""Balls, pegs and collecting bins of the Galton board."""

from __future__ import annotations

from dataclasses import dataclass

from .display import Display
from .rand import PseudoRandom


@dataclass
class Ball:
    """A falling ball: position and per-step velocity."""

    x: int
    y: int
    vx: int
    vy: int

    def move(self, display: Display) -> None:
        """Advance one step and draw the ball."""
        self.x += self.vx
        display.draw_pixel(self.x, self.y)

    def check_collision(self, x: int, y: int, rng: PseudoRandom) -> None:
        """Deflect sideways at random if the ball sits on the peg at ``(x, y)``."""
        if self.x == x and self.y == y:
            self.y += rng.next_sign() * self.vy


@dataclass(frozen=True)
class BinsConfig:
    """Where the bins start, their half width and their depth."""

    x: int
    width: int
    height: int
    y: int = 0


@dataclass
class Bin:
    """One bin: its corner, size and the number of balls it holds."""

    x: int
    y: int
    width: int
    height: int
    balls: int = 0

    @property
    def capacity(self) -> int:
        """Most balls the bin can hold."""
        return self.width * self.height


def make_bins(config: BinsConfig, size: int) -> list[Bin]:
    """Create ``size`` bins side by side, the first starting at -1."""
    step = 2 * config.width
    return [
        Bin(x=config.x, y=-1 + index * step, width=step - 1, height=config.height)
        for index in range(size)
    ]


def add_ball(bins: list[Bin], pos: int) -> bool:
    """Count a ball landing at ``pos`` in its bin; return whether it was kept."""
    for bin_ in bins:
        if bin_.y < pos <= bin_.y + bin_.width + 1:
            if bin_.balls < bin_.capacity:
                bin_.balls += 1
                return True
            return False
    return False


def draw_bins(bins: list[Bin], display: Display) -> None:
    """Draw the collected balls stacked from the bottom of each bin."""
    for bin_ in bins:
        cols = bin_.width
        for b in range(bin_.balls):
            display.draw_pixel(bin_.x + bin_.height - 1 - b // cols, bin_.y + b % cols + 1)


@dataclass(frozen=True)
class ObstaclesConfig:
    """A triangle of pegs: row count, centre line, spacing, row pitch and offset."""

    rows: int
    center: int
    width: int
    height: int
    x_offset: int


@dataclass(frozen=True)
class Obstacle:
    """One peg."""

    x: int
    y: int


def make_obstacles(config: ObstaclesConfig) -> list[Obstacle]:
    """Lay out the pegs row by row, row ``n`` holding ``n`` pegs."""
    return [
        Obstacle(
            x=row * config.height + config.x_offset,
            y=config.center + int((i - (row - 1) / 2.0) * 2 * config.width),
        )
        for row in range(1, config.rows + 1)
        for i in range(row)
    ]


def draw_obstacles(obstacles: list[Obstacle], display: Display) -> None:
    """Draw every peg."""
    for obstacle in obstacles:
        display.draw_pixel(obstacle.x, obstacle.y)
"""The Galton board game loop."""

from __future__ import annotations

import argparse
import time

from .board import (
    Ball,
    BinsConfig,
    ObstaclesConfig,
    add_ball,
    draw_bins,
    draw_obstacles,
    make_bins,
    make_obstacles,
)
from .display import Display
from .gpio import Gpio, GpioConfig, PinLine
from .hal import Pin, init_hal
from .rand import PseudoRandom
from .scheduler import Scheduler

SCREEN_WIDTH = 128
SCREEN_HEIGHT = 64

BIN_HEIGHT = 50
STOP_HEIGHT = SCREEN_WIDTH - BIN_HEIGHT

BALL_START = 32
HORIZONTAL_SPACING = 1
OBSTACLES_ROWS = 32 // HORIZONTAL_SPACING

BUTTON_CONFIG = GpioConfig(pin=Pin.BUTTON_A.gpio, mode=1, direction=0, logic=1)
OBSTACLES_CONFIG = ObstaclesConfig(
    rows=OBSTACLES_ROWS, center=32, width=HORIZONTAL_SPACING, height=2, x_offset=10
)
BINS_CONFIG = BinsConfig(x=STOP_HEIGHT, width=HORIZONTAL_SPACING, height=BIN_HEIGHT)


class GaltonBoard:
    """Balls dropped by a button fall through pegs into bins on the display."""

    def __init__(self, display: Display, button: Gpio, rng: PseudoRandom) -> None:
        self.display = display
        self.button = button
        self.rng = rng
        self.balls: list[Ball] = []
        self.bins = make_bins(BINS_CONFIG, SCREEN_HEIGHT // BINS_CONFIG.width + 1)
        self.obstacles = make_obstacles(OBSTACLES_CONFIG)

    def update_screen(self) -> None:
        """Send the frame, then start the next one with pegs and bins."""
        self.display.show()
        self.display.clear()
        draw_obstacles(self.obstacles, self.display)
        draw_bins(self.bins, self.display)

    def move_balls(self) -> None:
        """Advance every ball; balls that reach the bins are counted and removed."""
        falling = []
        for ball in self.balls:
            ball.move(self.display)
            for obstacle in self.obstacles:
                ball.check_collision(obstacle.x, obstacle.y, self.rng)
            if ball.x >= STOP_HEIGHT:
                add_ball(self.bins, ball.y)
            else:
                falling.append(ball)
        self.balls = falling

    def read_button(self) -> None:
        """Drop a new ball while the button is pressed."""
        if not self.button.get_input():
            self.balls.append(Ball(x=0, y=BALL_START, vx=1, vy=HORIZONTAL_SPACING))


class _DiscardTransport:
    """A bus that accepts every write and reads zeros."""

    def write(self, address: int, data: bytes, nostop: bool) -> int:
        return len(data)

    def read(self, address: int, length: int, nostop: bool) -> bytes:
        return bytes(length)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="galtonpico", description="Run the Galton board.")
    parser.add_argument("--ticks", type=int, default=None,
                        help="stop after this many 1 ms ticks (default: run until interrupted)")
    parser.add_argument("--hold", action="store_true", help="keep the drop button pressed")
    parser.add_argument("--render", action="store_true", help="print the final frame as text")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the game loop."""
    args = _parse_args(argv)
    if args.ticks is not None and args.ticks < 0:
        raise SystemExit("--ticks must not be negative")
    scheduler = Scheduler()
    with init_hal(scheduler, _DiscardTransport()) as hal:
        line = PinLine()
        button = Gpio(BUTTON_CONFIG, line)
        if args.hold:
            line.level = False
        board = GaltonBoard(hal.display, button, PseudoRandom(0.5))

        scheduler.create_task(200, board.update_screen)
        scheduler.create_task(100, board.read_button)
        scheduler.create_task(100, board.move_balls)

        try:
            while args.ticks is None or scheduler.timestamp() < args.ticks:
                scheduler.run()
                time.sleep(0.0005)
        except KeyboardInterrupt:
            pass

        if args.render:
            print(hal.display.render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
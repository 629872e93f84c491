"""Digital pins with configurable direction, pull and active level."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PinLine:
    """The electrical state of one pin: level, direction and pull."""

    level: bool = False
    output: bool = False
    pull_up: bool = False


@dataclass(frozen=True)
class GpioConfig:
    """Pin number, pull mode (1 up, 0 down), direction (1 out) and logic (1 active high)."""

    pin: int
    mode: int = 1
    direction: int = 0
    logic: int = 1


class Gpio:
    """A pin whose values are read and written in its configured logic."""

    def __init__(self, config: GpioConfig, line: PinLine | None = None) -> None:
        self.pin = config.pin
        self.logic = bool(config.logic)
        self.line = line if line is not None else PinLine()
        self.line.output = bool(config.direction)
        self.line.pull_up = bool(config.mode)
        # An input idles at its pull level; a fresh output starts low.
        self.line.level = self.line.pull_up if not self.line.output else False

    def set_output(self, value: bool) -> None:
        """Drive the pin to ``value`` in the configured logic."""
        self.line.level = bool(value) if self.logic else not value

    def toggle_output(self) -> None:
        """Invert the current level of the pin."""
        self.line.level = not self.line.level

    def get_input(self) -> bool:
        """Return the pin level in the configured logic."""
        return self.line.level if self.logic else not self.line.level
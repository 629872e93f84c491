"""Monochrome OLED frame buffer driven over I2C."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .font import FONT_8X5
from .i2c import I2CConfig, I2CDevice


class Command(IntEnum):
    """Controller command bytes."""

    SET_CONTRAST = 0x81
    SET_ENTIRE_ON = 0xA4
    SET_NORM_INV = 0xA6
    SET_DISP = 0xAE
    SET_MEM_ADDR = 0x20
    SET_COL_ADDR = 0x21
    SET_PAGE_ADDR = 0x22
    SET_DISP_START_LINE = 0x40
    SET_SEG_REMAP = 0xA0
    SET_MUX_RATIO = 0xA8
    SET_COM_OUT_DIR = 0xC0
    SET_DISP_OFFSET = 0xD3
    SET_COM_PIN_CFG = 0xDA
    SET_DISP_CLK_DIV = 0xD5
    SET_PRECHARGE = 0xD9
    SET_VCOM_DESEL = 0xDB
    SET_CHARGE_PUMP = 0x8D


@dataclass(frozen=True)
class DisplayConfig:
    """Panel geometry, power mode and bus settings."""

    i2c: I2CConfig
    width: int = 128
    height: int = 64
    external_vcc: bool = False


class Display:
    """A paged frame buffer that is sent to the panel on ``show``."""

    def __init__(self, config: DisplayConfig, bus: I2CDevice) -> None:
        self.bus = bus
        self.width = config.width
        self.height = config.height
        self.pages = config.height // 8
        self.buffer = bytearray(self.pages * self.width)
        self.font = FONT_8X5
        ext = config.external_vcc
        for value in (
            Command.SET_DISP,
            Command.SET_DISP_CLK_DIV, 0x80,
            Command.SET_MUX_RATIO, self.height - 1,
            Command.SET_DISP_OFFSET, 0x00,
            Command.SET_DISP_START_LINE,
            Command.SET_CHARGE_PUMP, 0x10 if ext else 0x14,
            Command.SET_SEG_REMAP | 0x01,
            Command.SET_COM_OUT_DIR | 0x08,
            Command.SET_COM_PIN_CFG, 0x02 if self.width > 2 * self.height else 0x12,
            Command.SET_CONTRAST, 0xFF,
            Command.SET_PRECHARGE, 0x22 if ext else 0xF1,
            Command.SET_VCOM_DESEL, 0x30,
            Command.SET_ENTIRE_ON,
            Command.SET_NORM_INV,
            Command.SET_DISP | 0x01,
            Command.SET_MEM_ADDR, 0x00,
        ):
            self._command(value)

    def _command(self, value: int) -> None:
        self.bus.write(bytes([0x00, int(value) & 0xFF]))

    def invert(self, inv: int) -> None:
        """Invert the panel when ``inv`` is odd or true."""
        self._command(Command.SET_NORM_INV | (int(inv) & 1))

    def show(self) -> None:
        """Send the whole frame buffer to the panel."""
        col_start, col_end = 0, self.width - 1
        if self.width == 64:
            col_start += 32
            col_end += 32
        for value in (
            Command.SET_COL_ADDR, col_start, col_end,
            Command.SET_PAGE_ADDR, 0, self.pages - 1,
        ):
            self._command(value)
        self.bus.write(b"\x40" + bytes(self.buffer))

    def clear(self) -> None:
        """Blank the frame buffer."""
        self.buffer[:] = bytes(len(self.buffer))

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def draw_pixel(self, x: int, y: int) -> None:
        """Light one pixel; points off the panel are ignored."""
        if not self._inside(x, y):
            return
        self.buffer[x + self.width * (y >> 3)] |= 1 << (y & 7)

    def pixel(self, x: int, y: int) -> bool:
        """Return whether a pixel is lit; points off the panel are dark."""
        if not self._inside(x, y):
            return False
        return bool(self.buffer[x + self.width * (y >> 3)] & (1 << (y & 7)))

    def draw_char(self, x: int, y: int, scale: int, char: str) -> None:
        """Draw one character; characters outside the font are skipped."""
        if char not in self.font:
            return
        parts = self.font.parts_per_column
        glyph = self.font.glyph(char)
        for w in range(self.font.width):
            for lp, line in enumerate(glyph[w * parts:(w + 1) * parts]):
                for j in range(8):
                    if line >> j & 1:
                        self.draw_square(x + w * scale, y + ((lp << 3) + j) * scale, scale, scale)

    def draw_string(self, x: int, y: int, scale: int, text: str) -> None:
        """Draw ``text`` left to right starting at ``(x, y)``."""
        advance = (self.font.width + self.font.spacing) * scale
        for offset, char in enumerate(text):
            self.draw_char(x + offset * advance, y, scale, char)

    def draw_square(self, x: int, y: int, width: int, height: int) -> None:
        """Fill a ``width`` by ``height`` block whose corner is ``(x, y)``."""
        for i in range(width):
            for j in range(height):
                self.draw_pixel(x + i, y + j)

    def render(self) -> str:
        """Return the frame buffer as text, '#' for lit and '.' for dark."""
        return "\n".join(
            "".join("#" if self.pixel(x, y) else "." for x in range(self.width))
            for y in range(self.height)
        )
"""Board pin map and the configuration of the devices the game uses."""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum

from .display import Display, DisplayConfig
from .i2c import I2CConfig, I2CDevice
from .scheduler import PeriodicTimer, Scheduler


class Pin(IntEnum):
    """Named pins of the board, numbered in table order."""

    RGB_RED = 0
    RGB_GREEN = 1
    RGB_BLUE = 2
    SPI_TX = 3
    SPI_RX = 4
    SPI_CS = 5
    SPI_CLK = 6
    DISPLAY_SDA = 7
    DISPLAY_SCL = 8
    BUTTON_A = 9
    BUTTON_B = 10
    BUZZER_A = 11
    BUZZER_B = 12
    LED_MATRIX = 13
    MICROPHONE = 14
    JOYSTICK_X = 15
    JOYSTICK_Y = 16
    JOYSTICK_Z = 17
    AHT10_SDA = 18
    AHT10_SCL = 19
    COOLER = 20
    ALARM = 21

    @property
    def gpio(self) -> int:
        """The GPIO number the name is wired to."""
        return _GPIO_NUMBERS[self]


_GPIO_NUMBERS = {
    Pin.RGB_RED: 13,
    Pin.RGB_GREEN: 11,
    Pin.RGB_BLUE: 12,
    Pin.SPI_TX: 19,
    Pin.SPI_RX: 16,
    Pin.SPI_CS: 17,
    Pin.SPI_CLK: 18,
    Pin.DISPLAY_SDA: 14,
    Pin.DISPLAY_SCL: 15,
    Pin.BUTTON_A: 5,
    Pin.BUTTON_B: 6,
    Pin.BUZZER_A: 10,
    Pin.BUZZER_B: 21,
    Pin.LED_MATRIX: 7,
    Pin.MICROPHONE: 28,
    Pin.JOYSTICK_X: 27,
    Pin.JOYSTICK_Y: 26,
    Pin.JOYSTICK_Z: 22,
    Pin.AHT10_SDA: 16,
    Pin.AHT10_SCL: 17,
    Pin.COOLER: 8,
    Pin.ALARM: 18,
}


class DeviceId(IntEnum):
    """Devices brought up by :func:`init_hal`, in start-up order."""

    TIMER_OS = 0
    D1306_OLED = 1


@dataclass(frozen=True)
class TimerConfig:
    """A periodic timer or a one-shot alarm, with its timeout in milliseconds."""

    timeout: int
    periodic: bool = True
    periodic_callback: Callable[[], bool] | None = None
    alarm_callback: Callable[[], object] | None = None


def timer_config(device_id: DeviceId, callback: Callable[[], bool]) -> TimerConfig:
    """Return the timer settings for ``device_id``, calling ``callback`` on each period."""
    if device_id == DeviceId.TIMER_OS:
        return TimerConfig(timeout=1, periodic=True, periodic_callback=callback)
    raise ValueError(f"no timer configuration for device {device_id!r}")


def display_config(device_id: DeviceId) -> DisplayConfig:
    """Return the display settings for ``device_id``."""
    if device_id == DeviceId.D1306_OLED:
        return DisplayConfig(
            i2c=I2CConfig(
                bus_id=1,
                address=0x3C,
                frequency=400 * 1000,
                pin_sda=Pin.DISPLAY_SDA.gpio,
                pin_scl=Pin.DISPLAY_SCL.gpio,
            ),
            width=128,
            height=64,
            external_vcc=False,
        )
    raise ValueError(f"no display configuration for device {device_id!r}")


@dataclass
class Hal:
    """The running devices: the tick timer and the display."""

    scheduler: Scheduler
    timer: PeriodicTimer | threading.Timer
    display: Display

    def close(self) -> None:
        """Stop the tick timer."""
        if isinstance(self.timer, PeriodicTimer):
            self.timer.stop()
        else:
            self.timer.cancel()

    def __enter__(self) -> Hal:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _start_timer(config: TimerConfig) -> PeriodicTimer | threading.Timer:
    if config.periodic:
        if config.periodic_callback is None:
            raise ValueError("a periodic timer needs a periodic callback")
        timer = PeriodicTimer(config.timeout, config.periodic_callback)
    else:
        if config.alarm_callback is None:
            raise ValueError("an alarm needs an alarm callback")
        timer = threading.Timer(config.timeout / 1000, config.alarm_callback)
        timer.daemon = True
    timer.start()
    return timer


def init_hal(scheduler: Scheduler, transport) -> Hal:
    """Start the 1 ms tick driving ``scheduler`` and bring up the display on ``transport``."""

    def on_tick() -> bool:
        scheduler.tick()
        return True

    timer = _start_timer(timer_config(DeviceId.TIMER_OS, on_tick))
    try:
        config = display_config(DeviceId.D1306_OLED)
        display = Display(config, I2CDevice(config.i2c, transport))
    except BaseException:
        if isinstance(timer, PeriodicTimer):
            timer.stop()
        else:
            timer.cancel()
        raise
    return Hal(scheduler=scheduler, timer=timer, display=display)
import time

import pytest

from galtonpico.display import Command
from galtonpico.hal import (
    DeviceId,
    Pin,
    TimerConfig,
    display_config,
    init_hal,
    timer_config,
)
from galtonpico.i2c import MemoryTransport
from galtonpico.scheduler import Scheduler


def test_pin_numbers_follow_the_board_table():
    assert Pin(7).gpio == 14
    assert Pin(8).gpio == 15
    assert Pin(9).gpio == 5
    assert Pin(14).gpio == 28


def test_pin_ids_are_consecutive_in_table_order():
    assert [Pin(i) for i in range(len(Pin))] == list(Pin)
    assert Pin(0) is Pin.RGB_RED
    assert Pin(len(Pin) - 1) is Pin.ALARM


def test_shared_gpio_numbers_stay_distinct_names():
    assert Pin(4).gpio == Pin(18).gpio == 16
    assert Pin(4) is Pin.SPI_RX
    assert Pin(18) is Pin.AHT10_SDA


def test_timer_config_for_os_tick():
    def callback():
        return True

    cfg = timer_config(DeviceId.TIMER_OS, callback)
    assert cfg == TimerConfig(timeout=1, periodic=True, periodic_callback=callback)


def test_timer_config_rejects_other_devices():
    with pytest.raises(ValueError):
        timer_config(DeviceId.D1306_OLED, lambda: True)


def test_display_config_for_oled():
    cfg = display_config(DeviceId.D1306_OLED)
    assert (cfg.width, cfg.height, cfg.external_vcc) == (128, 64, False)
    assert cfg.i2c.address == 0x3C
    assert cfg.i2c.frequency == 400 * 1000
    assert cfg.i2c.bus_id == 1
    assert (cfg.i2c.pin_sda, cfg.i2c.pin_scl) == (Pin.DISPLAY_SDA.gpio, Pin.DISPLAY_SCL.gpio)


def test_display_config_rejects_other_devices():
    with pytest.raises(ValueError):
        display_config(DeviceId.TIMER_OS)


def test_init_hal_starts_ticking_and_brings_up_display():
    scheduler = Scheduler()
    transport = MemoryTransport()
    with init_hal(scheduler, transport) as hal:
        deadline = time.monotonic() + 5
        while scheduler.timestamp() < 3 and time.monotonic() < deadline:
            time.sleep(0.005)
        assert scheduler.timestamp() >= 3
        assert hal.display.width == 128
    address, data, _ = transport.writes[0]
    assert address == 0x3C
    assert data == bytes([0x00, Command.SET_DISP])
    stopped_at = scheduler.timestamp()
    time.sleep(0.02)
    assert scheduler.timestamp() == stopped_at
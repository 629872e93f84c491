import pytest

from galtonpico.gpio import Gpio, GpioConfig, PinLine


def test_pull_up_input_reads_high_with_active_high_logic():
    line = PinLine()
    gpio = Gpio(GpioConfig(pin=5, mode=1, direction=0, logic=1), line)
    assert line.pull_up is True
    assert line.output is False
    assert gpio.get_input() is True


def test_pull_down_input_reads_low():
    gpio = Gpio(GpioConfig(pin=5, mode=0, direction=0, logic=1), PinLine())
    assert gpio.get_input() is False


def test_pressed_button_reads_low():
    line = PinLine()
    gpio = Gpio(GpioConfig(pin=5), line)
    line.level = False
    assert gpio.get_input() is False


def test_active_low_logic_inverts_input():
    line = PinLine()
    gpio = Gpio(GpioConfig(pin=5, mode=1, direction=0, logic=0), line)
    assert line.level is True
    assert gpio.get_input() is False


@pytest.mark.parametrize("logic", [0, 1])
@pytest.mark.parametrize("value", [False, True])
def test_set_output_round_trips_through_get_input(logic, value):
    gpio = Gpio(GpioConfig(pin=13, mode=0, direction=1, logic=logic), PinLine())
    gpio.set_output(value)
    assert gpio.get_input() is value


def test_active_low_output_drives_inverse_level():
    line = PinLine()
    gpio = Gpio(GpioConfig(pin=13, mode=0, direction=1, logic=0), line)
    gpio.set_output(True)
    assert line.level is False


def test_toggle_flips_level_twice_back():
    line = PinLine()
    gpio = Gpio(GpioConfig(pin=13, mode=0, direction=1, logic=1), line)
    assert line.level is False
    gpio.toggle_output()
    assert line.level is True
    gpio.toggle_output()
    assert line.level is False


def test_default_line_is_created():
    gpio = Gpio(GpioConfig(pin=6))
    assert gpio.line.pull_up is True
    assert gpio.pin == 6
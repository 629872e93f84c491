from galtonpico.display import Command, Display, DisplayConfig
from galtonpico.i2c import I2CConfig, I2CDevice, MemoryTransport

I2C = I2CConfig(bus_id=1, address=0x3C, frequency=400_000, pin_sda=14, pin_scl=15)


def make_display(width=128, height=64, external_vcc=False):
    transport = MemoryTransport()
    config = DisplayConfig(i2c=I2C, width=width, height=height, external_vcc=external_vcc)
    display = Display(config, I2CDevice(I2C, transport))
    return display, transport


def command_bytes(writes):
    return [data[1] for _, data, _ in writes if len(data) == 2 and data[0] == 0x00]


def test_init_sequence():
    _, transport = make_display()
    assert command_bytes(transport.writes) == [
        0xAE, 0xD5, 0x80, 0xA8, 0x3F, 0xD3, 0x00, 0x40, 0x8D, 0x14, 0xA1, 0xC8,
        0xDA, 0x12, 0x81, 0xFF, 0xD9, 0xF1, 0xDB, 0x30, 0xA4, 0xA6, 0xAF, 0x20, 0x00,
    ]
    assert all(addr == 0x3C and nostop for addr, _, nostop in transport.writes)


def test_init_external_vcc():
    _, transport = make_display(external_vcc=True)
    sent = command_bytes(transport.writes)
    assert sent[sent.index(Command.SET_CHARGE_PUMP) + 1] == 0x10
    assert sent[sent.index(Command.SET_PRECHARGE) + 1] == 0x22


def test_buffer_size_and_pages():
    display, _ = make_display()
    assert display.pages == 8
    assert len(display.buffer) == 128 * 8


def test_draw_pixel_and_read_back():
    display, _ = make_display()
    display.draw_pixel(3, 10)
    assert display.pixel(3, 10)
    assert not display.pixel(3, 11)
    assert display.buffer[3 + 128] == 1 << 2


def test_out_of_range_pixel_ignored():
    display, _ = make_display()
    for x, y in [(128, 0), (0, 64), (-1, 0), (0, -1)]:
        display.draw_pixel(x, y)
    assert not any(display.buffer)
    assert not display.pixel(200, 200)


def test_clear():
    display, _ = make_display()
    display.draw_square(0, 0, 10, 10)
    assert display.render().count("#") == 100
    display.clear()
    assert display.render().count("#") == 0
    assert not display.pixel(0, 0)


def test_show_sends_address_window_then_data():
    display, transport = make_display()
    transport.writes.clear()
    display.draw_pixel(0, 0)
    display.show()
    assert command_bytes(transport.writes[:6]) == [Command.SET_COL_ADDR, 0, 127, Command.SET_PAGE_ADDR, 0, 7]
    _, data, nostop = transport.writes[-1]
    assert data[0] == 0x40
    assert len(data) == len(display.buffer) + 1
    assert data[1] == 1
    assert nostop


def test_show_narrow_panel_offsets_columns():
    display, transport = make_display(width=64, height=32)
    transport.writes.clear()
    display.show()
    assert command_bytes(transport.writes[:6]) == [Command.SET_COL_ADDR, 32, 95, Command.SET_PAGE_ADDR, 0, 3]


def test_invert():
    display, transport = make_display()
    transport.writes.clear()
    display.invert(1)
    display.invert(0)
    display.invert(2)
    assert command_bytes(transport.writes) == [0xA7, 0xA6, 0xA6]


def test_draw_square_lights_area():
    display, _ = make_display()
    display.draw_square(5, 6, 4, 3)
    assert display.render().count("#") == 12
    assert display.pixel(5, 6) and display.pixel(8, 8)
    assert not display.pixel(9, 6)


def test_draw_char_uses_font_columns():
    display, _ = make_display()
    display.draw_char(0, 0, 1, "A")
    column = [display.pixel(0, y) for y in range(8)]
    assert column == [bool(0x7C >> y & 1) for y in range(8)]


def test_draw_char_outside_font_draws_nothing():
    display, _ = make_display()
    display.draw_char(0, 0, 1, "\x7f")
    assert display.render().count("#") == 0


def test_draw_string_advances_by_width_and_spacing():
    display, _ = make_display()
    display.draw_string(0, 0, 1, "!!")
    step = display.font.width + display.font.spacing
    assert display.pixel(2, 0)
    assert display.pixel(2 + step, 0)
    assert display.render().count("#") == 2 * bin(0x5F).count("1")


def test_scaled_char_quadruples_pixels():
    display, _ = make_display()
    display.draw_char(0, 0, 1, "!")
    single = display.render().count("#")
    display.clear()
    display.draw_char(0, 0, 2, "!")
    assert display.render().count("#") == 4 * single


def test_render_shape():
    display, _ = make_display(width=64, height=32)
    rows = display.render().split("\n")
    assert len(rows) == 32
    assert all(len(row) == 64 for row in rows)
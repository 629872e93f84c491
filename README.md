# galtonpico

A Galton board simulation on a 128x64 monochrome frame buffer. Balls fall
through a triangle of pegs; at each peg a pseudo-random draw sends them one
step left or right, and at the bottom they pile up in bins.

## Modules

- `galtonpico.rand` – `PseudoRandom(percentage=0.5, seed=11152)`, a small
  multiplicative congruential generator. `next_sign()` returns `1` or `-1`;
  iterating over it yields an endless stream of signs.
- `galtonpico.scheduler` – `Scheduler`, a cooperative tick-based scheduler:
  `create_task(period, callback)` registers a callback (at most 12; one more
  raises `SchedulerFullError`), `tick()` advances the 32-bit time stamp,
  `timestamp()` reads it and `run()` calls every task whose period has
  elapsed, in creation order. `PeriodicTimer(interval_ms, callback)` calls a
  function on a background thread until the callback returns a false value
  or `stop()` is called; it also works as a context manager.
- `galtonpico.font` – `Font`, a column-wise bitmap font, and `FONT_8X5`,
  printable ASCII from space to tilde. `glyph(char)` returns a character's
  column bytes.
- `galtonpico.i2c` – `I2CDevice(config, transport)` with `write_byte`,
  `read_byte`, `write` and `read`; a short transfer raises `I2CError`.
  `I2CConfig` holds bus, address, frequency and pins. `MemoryTransport`
  is an in-memory bus that records writes and serves reads from a queue.
- `galtonpico.display` – `Display(config, bus)`, a paged frame buffer that
  sends the controller's start-up command sequence (`Command`) when created.
  It offers `draw_pixel`, `pixel`, `draw_square`, `draw_char`,
  `draw_string`, `clear`, `invert`, `show` (sends the buffer over the bus)
  and `render()`, which returns the frame as text with `#` for lit pixels.
  `DisplayConfig` holds the geometry, power mode and bus settings.
- `galtonpico.gpio` – `Gpio(config, line)`, a pin with active-high or
  active-low logic over a `PinLine` that holds its level, direction and pull.
  `GpioConfig` sets pin, pull mode, direction and logic.
- `galtonpico.board` – `Ball` (`move`, `check_collision`), bins
  (`BinsConfig`, `Bin`, `make_bins`, `add_ball`, `draw_bins`) and pegs
  (`ObstaclesConfig`, `Obstacle`, `make_obstacles`, `draw_obstacles`).
- `galtonpico.hal` – the board's pin map (`Pin`, with `Pin.X.gpio`), device
  ids (`DeviceId`), `timer_config`, `display_config` and
  `init_hal(scheduler, transport)`, which starts a 1 ms tick timer for the
  scheduler and brings up the display. The returned `Hal` stops its timer on
  `close()` or when used as a context manager.
- `galtonpico.app` – `GaltonBoard(display, button, rng)`: `read_button()`
  drops a ball while the button reads low, `move_balls()` advances the balls
  and counts those that reach the bins, `update_screen()` sends the frame
  and draws pegs and bins into the next one. `main()` runs it all.

## Installing

```
pip install .
```

## Running

```
galtonpico --ticks 20000 --hold --render
```

runs the game loop: the screen task every 200 ticks, the button and ball
tasks every 100 ticks, with one tick per millisecond.

- `--ticks N` stops after `N` ticks; without it the loop runs until
  interrupted with Ctrl-C.
- `--hold` keeps the drop button pressed, so a ball is dropped on every
  button check. Without it no balls are dropped.
- `--render` prints the last frame as text when the loop ends.

## What it does not do

The command does not drive a real panel or read a real button: the display
writes go to a bus that discards them, and the button is only pressed by
`--hold`. Nothing is shown while the loop runs; the frame is printed once,
at the end, and only with `--render`.

## Tests

```
pip install .[test]
pytest
```
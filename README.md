# oledlab

`oledlab` collects small, self-contained building blocks from a series of
microcontroller lab exercises, written as ordinary Python so they can be
run, inspected and tested on a desktop machine. Everything that would touch
hardware (pins, clocks, delays, LED strips) is passed in as a plain
callable or an in-memory object, so the logic runs anywhere.

## What is inside

- `oledlab.simulation`: the bouncing-ball simulation. `Ball` holds a ball's
  position (`x`, `y`), speed (`vx`, `vy`), `radius` and `mass`.
  `Simulation(radii, speed=..., task=..., collision_trigger=..., wall_trigger=...)`
  places one ball per radius diagonally from the top-left corner, bounces
  them off the walls and off each other, and after each collision rescales
  all speeds to restore the starting total momentum.
  `Simulation.update_positions(width, height)` advances one frame;
  `start_momentum` and `current_momentum` report the totals.
  `CollisionTrigger` chooses whether a collision calls `task.on()` on
  contact, only on an actual bounce, or never. `random_radius` and
  `bitmap_radius` choose starting radii from a `random.Random`.
- `oledlab.tasks`: indicator tasks with `on()`, `off()` and `tick()`:
  the abstract `Task`, `PinLedTask` (an LED on a pin, written through a
  callable you supply), `RgbLedTask` (one RGB pixel cycling through a
  palette) and `StripLedTask` (a colour injected on each event travels
  along the strip). They drive a `PixelStrip`, an in-memory strip with
  `set_pixel`, `set_all`, `set_brightness` and `show`.
- `oledlab.bitmaps`: monochrome ball sprites for radii 5 to 14, looked up
  with `bitmap_for_radius` and unpacked into rows of lit/unlit pixels with
  `bitmap_rows`.
- `oledlab.cube`: a rotating cube: `rotate`, `project`, `wireframe_lines`
  for a monochrome wireframe, `shaded_faces` for flat-shaded visible faces,
  and `color565` to pack RGB into 16 bits.
- `oledlab.touch`: `TouchControl` turns touch interrupts
  (`touch_interrupt()`, then `handle_touch()` once per loop) into short and
  long symbols and returns the action for patterns such as `"SSL"`
  ("Lock the door") and `"LSLL"` ("Unlock the door"); `classify_touch`
  tells a short touch from a long one.
- `oledlab.i2c_registers`: the request and register layout of a
  master/slave I2C exchange: `pack_request`, `unpack_request`,
  `decode_register`, `format_screen`, and `RegisterBank`, which holds the
  slave's registers and answers requests through `on_receive` and
  `on_request`.
- `oledlab.ota`: firmware update checks against a JSON manifest:
  `download_json`, `find_update`, `write_firmware`, `run_update`, and
  `handle_message`, which passes a manifest URL received on the update
  topic to a callback.
- `oledlab.http_header`: `build_request`, `parse_header` (giving a
  `HeaderInfo`) and `download_file` for a plain HTTP/1.1 GET over a socket.
- `oledlab.lightbringer`: `LightController`, which switches a light on
  and off from the text commands `on` and `off`, and `Blinker`, which
  blinks a pin five times and can narrate to a debug stream.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the simulation

```python
import random

from oledlab.simulation import Simulation, random_radius

rng = random.Random(1)
sim = Simulation([random_radius(3, rng) for _ in range(7)])
for _ in range(100):
    sim.update_positions(128, 64)

for ball in sim.balls:
    print(f"{ball.x:6.1f} {ball.y:6.1f} r={ball.radius:.1f}")
print(f"m:{sim.current_momentum:.3f}/{sim.start_momentum:.3f}")
```

## What it does not do

- There is no command-line program; the package is used as a library.
- Nothing is drawn to a screen. The simulation, cube and sprite modules
  compute positions, lines, triangles and pixel rows, but rendering them
  is left to the caller.
- No hardware is accessed. Pin writes, clocks and sleeps are callables you
  pass in, and `PixelStrip` only records colours in memory.
- There is no MQTT client or Wi-Fi handling: `handle_message` only
  dispatches a message you have already received, and `run_update`
  writes firmware bytes to whatever sink you give it.
# furyrgb

A small command-line tool and library for controlling the RGB lighting on
Kingston Fury Renegade memory modules. It talks to the modules through the
Linux I2C character devices (`/dev/i2c-*`) and needs no other packages.

## Requirements

- Linux, with the `i2c-dev` kernel module loaded (`modprobe i2c-dev`)
- Permission to read and write the I2C bus device. This usually means root,
  or membership of the `i2c` group.
- Python 3.10 or newer

## Installation

```sh
pip install .
```

This installs the `furyrgb` command. The same interface is also available
as `python -m furyrgb.cli`.

## Command-line use

Choose the bus with `-b`/`--bus` (required). Choose the sticks to control
with any of `-1`/`--stick-1` to `-4`/`--stick-4`, which are the modules at
SMBus addresses `0x60` to `0x63`. Then give a command:

```sh
furyrgb --bus /dev/i2c-1 -1 -2 -3 -4 reset
furyrgb --bus /dev/i2c-1 -1 -2 -3 -4 sync
furyrgb --bus /dev/i2c-1 -1 -2 brightness 60
furyrgb --bus /dev/i2c-1 -1 -2 colour-brightness --red 100 --green 50 --blue 80
furyrgb --bus /dev/i2c-1 -1 -2 -3 -4 pattern breathe '#ff0080' 0,255,0
furyrgb --bus /dev/i2c-1 -1 -2 -3 -4 pattern-start-offset 4
furyrgb --bus /dev/i2c-1 -1 -2 -3 -4 pattern-repeat-delay 1
furyrgb --bus /dev/i2c-1 -1 noop
furyrgb --version
```

### Commands

| Command | Effect |
|---|---|
| `noop` | Opens and closes a command on each stick, reading a few status registers in between |
| `reset` | Puts everything back to the defaults: brightness 100, channel brightness 100/100/100, start offset 0, repeat delay 1, rainbow pattern, timings synced |
| `sync` | Synchronises pattern timing between the selected sticks |
| `colour-brightness -r R -g G -b B` | Applies a per-channel brightness mask; all three are required, 0–100 each |
| `brightness N` | Sets overall brightness, 0–100 |
| `pattern-start-offset N` | Sets a delay before the pattern starts (raw 0–255). On synced sticks the offsets add up |
| `pattern-repeat-delay N` | Sets a delay before the pattern repeats (raw 0–255). Use the same value on every stick |
| `pattern STYLE [COLOUR ...]` | Sets the pattern style and zero to 11 colours |

Pattern styles: `solid`, `rainbow`, `scan`, `breathe`, `fade`, `stripe`,
`trail`, `lightning`, `countdown`, `fire`, `sparkles`, `fury`.
Some styles, such as `rainbow`, `fire` and `sparkles`, ignore the colours.
Several styles look best with four sticks.

Colours can be given as `#RRGGBB`, as `#RGB`, or as decimal `R,G,B` with
each part from 0 to 255.

Before running the command, the tool prints the selected stick addresses and
the parsed options. Invalid arguments are reported by the argument parser.
If no stick is selected, if there are more than 11 colours, or if the bus
cannot be opened or accessed, the command prints `Error: ...` to standard
error and exits with status 1.

## Library use

```python
from furyrgb.colour import Colour
from furyrgb.controller import MultiRamController, PatternStyle

with MultiRamController.open("/dev/i2c-1", [0x60, 0x61]) as controller:
    controller.sync_timings()
    controller.set_brightness_percent(80)
    controller.set_pattern(
        PatternStyle.parse("breathe"),
        [Colour.parse("#f08"), Colour.parse("0,255,0")],
    )
```

- `furyrgb.colour.Colour` is a frozen dataclass with `red`, `green` and
  `blue` (0–255, default 0). `Colour.parse` raises `ValueError` on bad input.
- `furyrgb.controller.PatternStyle` is an `IntEnum` of the styles above.
  `PatternStyle.parse` takes the lower-case name and raises
  `UnknownPatternStyle` (a `ValueError`) for anything else.
- `furyrgb.controller.MultiRamController` takes any bus object with
  `set_slave_address`, `smbus_write_byte_data`, `smbus_read_byte_data` and
  `close`, or opens a real one with `MultiRamController.open(path, sticks)`.
  Its methods are `noop`, `sync_timings`, `set_rgb_brightness_percent`,
  `set_brightness_percent`, `set_pattern_start_offset`,
  `set_pattern_repeat_delay`, `set_pattern`, `reset` and `close`.
- `furyrgb.i2c.LinuxI2CDevice` opens an `/dev/i2c-N` device and performs
  SMBus byte-data reads and writes. It can be used as a context manager.

The modules sometimes answer `ENXIO` while they are busy. Every bus access
made by the controller goes through `furyrgb.i2c.force_write_byte_data` or
`force_read_byte_data`, which retry with a doubling back-off starting at
1 ms and pass the error on once the back-off would exceed 10 seconds. Other
errors are raised at once.

## Limitations

- Linux only; there is no support for other operating systems' I2C
  interfaces.
- Settings can only be written. The tool does not read back the current
  pattern, colours or brightness, and it does not detect which sticks are
  present: you choose them with `-1` to `-4`.

## Running the tests

```sh
pip install .[test]
pytest
```

The tests use a fake bus and need no hardware.
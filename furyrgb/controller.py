"""Commands for the RGB controllers on Kingston Fury Renegade memory sticks."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from enum import IntEnum

from .colour import Colour
from .i2c import LinuxI2CDevice, force_read_byte_data, force_write_byte_data

_REG_COMMAND = 0x08
_COMMAND_START = 0x53
_COMMAND_END = 0x44
_REG_PATTERN = 0x09
_REG_SYNC_OFFSET = 0x0B
_REG_START_OFFSET = 0x0D
_REG_BRIGHTNESS = 0x20
_REG_REPEAT_DELAY = 0x27
_REG_RED_BRIGHTNESS = 0x2D
_REG_GREEN_BRIGHTNESS = 0x2E
_REG_BLUE_BRIGHTNESS = 0x2F
_REG_COLOUR_COUNT = 0x30
_REG_FIRST_COLOUR = 0x31
_NOOP_READ_REGISTERS = (0x05, 0x06, 0x26)
_MAX_COLOURS = 0x0B


class UnknownPatternStyle(ValueError):
    """Raised when a pattern style name is not recognised."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Couldn't parse {name} as a known colour pattern style")
        self.name = name


class PatternStyle(IntEnum):
    """Lighting patterns the controller can run."""

    SOLID = 0x00
    RAINBOW = 0x01
    SCAN = 0x02
    BREATHE = 0x03
    FADE = 0x04
    STRIPE = 0x05
    TRAIL = 0x06
    LIGHTNING = 0x07
    COUNTDOWN = 0x08
    FIRE = 0x09
    SPARKLES = 0x0A
    FURY = 0x0B

    @classmethod
    def parse(cls, text: str) -> PatternStyle:
        """Look up a style by its lower-case name."""
        styles = {style.name.lower(): style for style in cls}
        try:
            return styles[text]
        except KeyError:
            raise UnknownPatternStyle(text) from None


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be between 0 and 255, got {value}")


class MultiRamController:
    """Sends the same command to every selected stick on one I2C bus."""

    def __init__(self, bus, sticks: Iterable[int]) -> None:
        self.bus = bus
        self.sticks = list(sticks)

    @classmethod
    def open(cls, path: str | os.PathLike[str], sticks: Sequence[int]) -> MultiRamController:
        """Open the bus at ``path`` for the given stick addresses."""
        sticks = list(sticks)
        if not sticks:
            raise ValueError("At least one stick must be selected")
        return cls(LinuxI2CDevice(path, sticks[0]), sticks)

    def close(self) -> None:
        self.bus.close()

    def __enter__(self) -> MultiRamController:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _write_to_all(self, register: int, value: int) -> None:
        for address in self.sticks:
            self.bus.set_slave_address(address)
            force_write_byte_data(self.bus, register, value)

    def _start_command(self) -> None:
        self._write_to_all(_REG_COMMAND, _COMMAND_START)

    def _end_command(self) -> None:
        self._write_to_all(_REG_COMMAND, _COMMAND_END)

    def noop(self) -> None:
        """Open and close a command on each stick, reading the status registers."""
        for address in self.sticks:
            self.bus.set_slave_address(address)
            force_write_byte_data(self.bus, _REG_COMMAND, _COMMAND_START)
            for register in _NOOP_READ_REGISTERS:
                force_read_byte_data(self.bus, register)
            force_write_byte_data(self.bus, _REG_COMMAND, _COMMAND_END)

    def sync_timings(self) -> None:
        """Give each stick its position so their animations line up."""
        self._start_command()
        count = len(self.sticks)
        for index, address in enumerate(self.sticks):
            self.bus.set_slave_address(address)
            force_write_byte_data(self.bus, _REG_SYNC_OFFSET, (count - index - 1) & 0xFF)
        self._end_command()

    def set_rgb_brightness_percent(self, red: int, green: int, blue: int) -> None:
        """Scale each colour channel; the default is 100 for all three."""
        for name, value in (("red", red), ("green", green), ("blue", blue)):
            _check_byte(name, value)
        self._start_command()
        self._write_to_all(_REG_RED_BRIGHTNESS, red)
        self._write_to_all(_REG_GREEN_BRIGHTNESS, green)
        self._write_to_all(_REG_BLUE_BRIGHTNESS, blue)
        self._end_command()

    def set_brightness_percent(self, brightness_percent: int) -> None:
        """Set overall brightness; the default is 100."""
        _check_byte("brightness", brightness_percent)
        self._start_command()
        self._write_to_all(_REG_BRIGHTNESS, brightness_percent)
        self._end_command()

    def set_pattern_start_offset(self, raw_offset: int) -> None:
        """Delay before the pattern starts; the default is 0."""
        _check_byte("offset", raw_offset)
        self._start_command()
        self._write_to_all(_REG_START_OFFSET, raw_offset)
        self._end_command()

    def set_pattern_repeat_delay(self, raw_delay: int) -> None:
        """Delay before the pattern repeats; the default is 1."""
        _check_byte("delay", raw_delay)
        self._start_command()
        self._write_to_all(_REG_REPEAT_DELAY, raw_delay)
        self._end_command()

    def set_pattern(self, pattern: PatternStyle, colours: Sequence[Colour]) -> None:
        """Select a pattern and up to eleven colours for it."""
        colours = list(colours)
        if len(colours) > _MAX_COLOURS:
            raise ValueError(f"Cannot set more than 11 colours, got {len(colours)}")
        self._start_command()
        self._write_to_all(_REG_PATTERN, int(pattern))
        self._write_to_all(_REG_COLOUR_COUNT, len(colours))
        for index, colour in enumerate(colours):
            base = _REG_FIRST_COLOUR + index * 3
            self._write_to_all(base, colour.red)
            self._write_to_all(base + 1, colour.green)
            self._write_to_all(base + 2, colour.blue)
        self._end_command()

    def reset(self) -> None:
        """Return every setting to its factory default."""
        self.noop()
        self.noop()
        self.sync_timings()
        self.set_brightness_percent(100)
        self.set_rgb_brightness_percent(100, 100, 100)
        self.set_pattern_start_offset(0)
        self.set_pattern_repeat_delay(1)
        self.set_pattern(PatternStyle.RAINBOW, [Colour()])
        self.sync_timings()
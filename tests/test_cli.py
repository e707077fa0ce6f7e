import struct
from unittest import mock

import pytest

from furyrgb.cli import PERCENT_TOO_HIGH, build_parser, main, selected_sticks
from furyrgb.colour import Colour
from furyrgb.controller import PatternStyle
from furyrgb.i2c import I2C_SLAVE, I2C_SMBUS


def parse(*argv):
    return build_parser().parse_args(list(argv))


def test_selected_sticks_in_order():
    args = parse("--bus", "/dev/i2c-1", "-3", "-1", "noop")
    assert selected_sticks(args) == [0x60, 0x62]


def test_long_stick_flags():
    args = parse("-b", "/dev/i2c-1", "--stick-2", "--stick-4", "sync")
    assert selected_sticks(args) == [0x61, 0x63]
    assert args.action == "sync"


def test_colour_brightness_options():
    args = parse("-b", "/dev/i2c-1", "colour-brightness", "-r", "10", "-g", "20", "-b", "30")
    assert (args.red, args.green, args.blue) == (10, 20, 30)


def test_percent_guard(capsys):
    with pytest.raises(SystemExit):
        parse("-b", "/dev/i2c-1", "brightness", "101")
    assert PERCENT_TOO_HIGH in capsys.readouterr().err


def test_raw_offset_must_fit_byte():
    with pytest.raises(SystemExit):
        parse("-b", "/dev/i2c-1", "pattern-start-offset", "256")


def test_pattern_arguments():
    args = parse("-b", "/dev/i2c-1", "pattern", "fury", "#fff", "1,2,3")
    assert args.style is PatternStyle.FURY
    assert args.colours == [Colour.parse("#ffffff"), Colour(1, 2, 3)]


def test_pattern_without_colours():
    args = parse("-b", "/dev/i2c-1", "pattern", "rainbow")
    assert args.colours == []


def test_unknown_pattern_rejected():
    with pytest.raises(SystemExit):
        parse("-b", "/dev/i2c-1", "pattern", "disco")


def test_bus_is_required():
    with pytest.raises(SystemExit):
        parse("-1", "noop")


def test_main_sends_brightness(capsys):
    calls = []

    def ioctl(fd, request, arg=0, *rest):
        if request == I2C_SMBUS:
            calls.append(("smbus",) + struct.unpack_from("@BBI", arg)[:2])
        else:
            calls.append(("slave", arg))
        return 0

    with mock.patch("os.open", return_value=42), mock.patch("os.close") as closer, mock.patch(
        "fcntl.ioctl", side_effect=ioctl
    ):
        status = main(["-b", "/dev/i2c-7", "-2", "brightness", "40"])

    assert status == 0
    assert calls == [
        ("slave", 0x61),
        ("slave", 0x61),
        ("smbus", 0, 0x08),
        ("slave", 0x61),
        ("smbus", 0, 0x20),
        ("slave", 0x61),
        ("smbus", 0, 0x08),
    ]
    closer.assert_called_once_with(42)
    assert "Running command on sticks: [97]" in capsys.readouterr().out
    assert I2C_SLAVE != I2C_SMBUS


def test_main_without_sticks_fails(tmp_path, capsys):
    status = main(["-b", str(tmp_path / "bus"), "noop"])
    assert status == 1
    assert "Error:" in capsys.readouterr().err


def test_main_missing_bus_fails(tmp_path, capsys):
    status = main(["-b", str(tmp_path / "missing"), "-1", "noop"])
    assert status == 1
    assert "Error:" in capsys.readouterr().err
import pytest

from furyrgb.colour import Colour


def test_full_hex_code():
    assert Colour.parse("#ff8000") == Colour(255, 0x80, 0)


def test_uppercase_hex_code():
    assert Colour.parse("#FFFFFF") == Colour(255, 255, 255)


def test_shorthand_hex_expands_each_digit():
    assert Colour.parse("#f80") == Colour.parse("#ff8800")


def test_decimal_triplet():
    assert Colour.parse("1,2,3") == Colour(1, 2, 3)


def test_decimal_accepts_leading_plus():
    assert Colour.parse("+1,2,3") == Colour(1, 2, 3)


def test_default_is_black():
    assert Colour() == Colour(0, 0, 0)


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("256,0,0", "Invalid red value"),
        ("0,-1,0", "Invalid green value"),
        ("0,0,x", "Invalid blue value"),
        (" 1,2,3", "Invalid red value"),
        ("1,2", "Colour must be in the format R,G,B"),
        ("1,2,3,4", "Colour must be in the format R,G,B"),
        ("#12345", "Colour must be in the format R,G,B"),
        ("#gg0000", "Invalid red value in hex"),
        ("#00zz00", "Invalid green value in hex"),
        ("#0000zz", "Invalid blue value in hex"),
    ],
)
def test_invalid_colours(text, message):
    with pytest.raises(ValueError) as info:
        Colour.parse(text)
    assert str(info.value) == message


def test_channel_range_checked():
    with pytest.raises(ValueError):
        Colour(300, 0, 0)
import pytest

from conversor.services.money import format2, parse_amount


@pytest.mark.parametrize(
    "value,expected",
    [
        (10, "10.00"),
        (0.5555555, "0.56"),
        (1.005, "1.01"),  # half-up on the shortest repr, not the binary value
        (2.675, "2.68"),
        (-1.5, "-1.50"),
        (1e20, "100000000000000000000.00"),
        (1e30, "1000000000000000000000000000000.00"),
    ],
)
def test_format2(value, expected):
    assert format2(value) == expected


@pytest.mark.parametrize("value", [-0.0, -0.001, -0.004999])
def test_format2_values_rounding_to_zero_are_unsigned(value):
    assert format2(value) == "0.00"


def test_format2_small_negative_keeps_sign_when_nonzero():
    assert format2(-0.005) == "-0.01"


@pytest.mark.parametrize(
    "text,expected",
    [("10", 10.0), (" 2.5 ", 2.5), ("-3", -3.0), ("1e3", 1000.0), ("0", 0.0)],
)
def test_parse_amount_accepts_numbers(text, expected):
    assert parse_amount(text) == expected


@pytest.mark.parametrize("text", [None, "", " ", "ten", "nan", "Infinity", "1.2.3", "1_000", "1,000"])
def test_parse_amount_rejects_non_finite_or_garbage(text):
    assert parse_amount(text) is None

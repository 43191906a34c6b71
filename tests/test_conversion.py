import pytest

from conversor.services.money import format2
from conversor.services.rates.conversion import convert, swap

R = {"USD": 1.0, "ARS": 900.0, "BRL": 5.0}


def test_usd_to_ars():
    result = convert("10", "USD", "ARS", {"USD": 1, "ARS": 900})
    assert result is not None
    assert result.converted == "9000.00"


def test_ars_to_usd():
    assert convert("900", "ARS", "USD", {"USD": 1, "ARS": 900}).converted == "1.00"


def test_cross_rate_goes_through_usd():
    # (100 / 900) * 5 = 0.5555...
    assert convert("100", "ARS", "BRL", R).converted == "0.56"


@pytest.mark.parametrize("amount", ["0", "1", "12.5", "250.75", "1000000"])
def test_pivot_formulas(amount):
    a = float(amount)
    assert convert(amount, "USD", "BRL", R).converted == format2(a * R["BRL"])
    assert convert(amount, "BRL", "USD", R).converted == format2(a / R["BRL"])
    assert convert(amount, "ARS", "BRL", R).converted == format2((a / R["ARS"]) * R["BRL"])


@pytest.mark.parametrize("code", ["USD", "ARS", "BRL"])
def test_same_currency_is_identity(code):
    assert convert("123.45", code, code, R).converted == "123.45"


def test_trailing_zeros_are_kept():
    assert convert("10", "USD", "USD", R).converted == "10.00"


def test_zero_and_negative_amounts_use_the_formula():
    assert convert("0", "ARS", "BRL", R).converted == "0.00"
    assert convert("-2", "USD", "ARS", R).converted == "-1800.00"


@pytest.mark.parametrize("amount", ["-0", "-0.0009"])
def test_negative_amounts_rounding_to_zero_render_unsigned(amount):
    assert convert(amount, "USD", "BRL", R).converted == "0.00"


@pytest.mark.parametrize("amount", ["", "   ", None, "abc", "1,5", "1_000", "nan", "inf", "-inf"])
def test_unparseable_amount_gives_no_result(amount):
    assert convert(amount, "USD", "ARS", R) is None


def test_missing_code_gives_no_result():
    assert convert("10", "USD", "CLP", R) is None
    assert convert("10", "COP", "USD", R) is None


def test_empty_table_gives_no_result():
    assert convert("10", "USD", "ARS", {}) is None


def test_amount_is_trimmed_and_summary_rendered():
    result = convert(" 10 ", "USD", "ARS", R)
    assert result.amount == "10"
    assert result.summary == "10 USD = 9000.00 ARS"


def test_swap():
    assert swap("USD", "ARS") == ("ARS", "USD")
    assert swap("BRL", "BRL") == ("BRL", "BRL")

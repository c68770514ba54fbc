import pytest

from roicalc.domain.roi.formatting import (
    PLACEHOLDER,
    format_currency,
    format_months,
    format_percentage,
)


@pytest.mark.parametrize(
    "amount, expected",
    [
        (1_044_000, "$1,044,000"),
        (2_632_000.0, "$2,632,000"),
        (-250_000, "-$250,000"),
        (999.5, "$1,000"),
        (-999.5, "-$1,000"),
        (0.4, "$0"),
        (-0.4, "$0"),
        (0, "$0"),
        (None, PLACEHOLDER),
        (float("inf"), PLACEHOLDER),
        (float("nan"), PLACEHOLDER),
    ],
)
def test_format_currency(amount, expected):
    assert format_currency(amount) == expected


def test_format_currency_handles_huge_amounts():
    assert format_currency(1e20) == "$100,000,000,000,000,000,000"


@pytest.mark.parametrize(
    "value, signed, expected",
    [(526, True, "+526%"), (50, False, "50%"), (-5, True, "-5%"), (None, True, PLACEHOLDER)],
)
def test_format_percentage(value, signed, expected):
    assert format_percentage(value, signed=signed) == expected


def test_format_months():
    assert format_months(6) == "6"
    assert format_months(None) == PLACEHOLDER

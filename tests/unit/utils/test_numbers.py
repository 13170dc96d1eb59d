import pytest

from liftlog.utils.numbers import format_fixed, round_half_up


@pytest.mark.parametrize(
    "value, places, expected",
    [
        (123.45, 1, 123.5),
        (2.675, 2, 2.68),
        (0.5, 0, 1.0),
        (-0.5, 0, -1.0),
        (10.333333, 2, 10.33),
    ],
)
def test_round_half_up(value, places, expected):
    assert round_half_up(value, places) == expected


@pytest.mark.parametrize(
    "value, places, expected",
    [(0, 1, "0.0"), (123.45, 1, "123.5"), (1800, 1, "1800.0"), (7.25, 2, "7.25")],
)
def test_format_fixed(value, places, expected):
    assert format_fixed(value, places) == expected

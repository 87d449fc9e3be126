import pytest

from inputs import (
    LOAN_AMOUNT_RANGE,
    to_number,
    clamp_slider,
    clamp_tenure,
    start_year_options,
    sanitize_slab,
)


@pytest.mark.parametrize("raw", [None, "", "abc", -5, float("nan"), float("inf")])
def test_bad_input_becomes_zero(raw):
    assert to_number(raw) == 0


def test_numbers_pass_through():
    assert to_number("2500000") == 2_500_000
    assert to_number(8.5) == 8.5


def test_clamp_slider():
    low, high, _ = LOAN_AMOUNT_RANGE

    assert clamp_slider(10, low, high) == low
    assert clamp_slider(60_000_000, low, high) == 60_000_000
    assert clamp_slider(200_000_000, low, high) == high * 2
    assert clamp_slider("oops", low, high) == low


def test_clamp_tenure():
    assert clamp_tenure(20, 0) == 240
    assert clamp_tenure(15, 6) == 186
    assert clamp_tenure(45, 20) == 30 * 12 + 11
    assert clamp_tenure(-1, None) == 0


def test_start_year_options():
    assert start_year_options(3) == [1, 2, 3]
    assert start_year_options(0) == [1]


def test_sanitize_slab():
    assert sanitize_slab(20) == 20
    assert sanitize_slab("30") == 30
    assert sanitize_slab(25) == 0

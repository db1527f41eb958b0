from chromapick.utils import format_number, round_half_up


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(1.5) == 2
    assert round_half_up(2.5) == 3
    assert round_half_up(127.5) == 128
    assert round_half_up(-0.5) == 0
    assert round_half_up(0.49999) == 0


def test_format_number():
    assert format_number(1.0) == "1"
    assert format_number(0.0) == "0"
    assert format_number(3) == "3"
    assert format_number(0.5) == "0.5"
    assert format_number(0.502) == "0.502"


def test_format_number_small_fractions():
    assert format_number(0.000005) == "0.000005"
    assert format_number(-0.00001) == "-0.00001"
    assert format_number(0.0001234) == "0.0001234"
    assert format_number(1e-8) == "1e-08"

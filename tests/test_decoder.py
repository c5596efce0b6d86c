"""
Unit tests for the joystick line decoder.
"""

import pytest

from joybridge.errors import DecodeError
from joybridge.protocol import AxisState, decode_line, try_decode, normalize_axis


class TestDecodeLine:

    @pytest.mark.parametrize("line, expected", [
        ("512 512 1", (512, 512, 1)),
        ("0 1023 0", (0, 1023, 0)),
        ("  17\t42   1  ", (17, 42, 1)),
        ("1,2,3", (1, 2, 3)),
        ("1, 2 ,3", (1, 2, 3)),
        ("-5 +6 0", (-5, 6, 0)),
        ("512 512 1\r", (512, 512, 1)),
    ])
    def test_well_formed(self, line, expected):
        state = decode_line(line)
        assert (state.x, state.y, state.button) == expected

    @pytest.mark.parametrize("line", [
        "",
        "   ",
        "512 512",
        "512 512 1 7",
        "512 abc 1",
        "1.5 2 3",
        "OK READY",
    ])
    def test_malformed_raises(self, line):
        with pytest.raises(DecodeError):
            decode_line(line)

    def test_decode_error_is_value_error(self):
        with pytest.raises(ValueError):
            decode_line("x y z")

    def test_explicit_delimiter(self):
        assert decode_line("10;20;1", delimiter=";") == AxisState(10, 20, 1)
        # with an explicit delimiter spaces no longer separate fields
        assert try_decode("10 20 1", delimiter=";") is None

    def test_try_decode_returns_none_on_noise(self):
        assert try_decode("garbage") is None
        assert try_decode("1 2 3") == AxisState(1, 2, 3)


class TestAxisState:

    def test_centre_normalizes_to_zero(self):
        state = decode_line("512 512 1")
        assert state.normalized() == (0.0, 0.0)
        assert not state.pressed

    def test_full_deflection(self):
        state = decode_line("1024 0 0")
        assert state.normalized() == (1.0, -1.0)
        assert state.pressed

    def test_default_is_centred_and_released(self):
        state = AxisState()
        assert state.normalized() == (0.0, 0.0)
        assert state.button == 1

    def test_is_immutable(self):
        state = AxisState(1, 2, 3)
        with pytest.raises(AttributeError):
            state.x = 5

    def test_normalize_axis(self):
        assert normalize_axis(768) == pytest.approx(0.5)
        assert normalize_axis(256) == pytest.approx(-0.5)

"""Tests for degree-based trigonometry helpers."""

import pytest

from solarday import trig


class TestForward:

    @pytest.mark.parametrize("angle, expected", [(0, 0), (30, 0.5), (90, 1)])
    def test_sin(self, angle, expected):
        assert trig.sin(angle) == pytest.approx(expected, abs=1e-6)

    @pytest.mark.parametrize(
        "angle, expected", [(0, 1), (30, 0.866025), (60, 0.5), (90, 0)]
    )
    def test_cos(self, angle, expected):
        assert trig.cos(angle) == pytest.approx(expected, abs=1e-6)

    def test_sin_is_periodic_in_degrees(self):
        assert trig.sin(390) == pytest.approx(0.5, abs=1e-9)


class TestInverse:

    @pytest.mark.parametrize("ratio, expected", [(0, 0), (0.5, 30), (1, 90)])
    def test_asin(self, ratio, expected):
        assert trig.asin(ratio) == pytest.approx(expected, abs=1e-6)

    @pytest.mark.parametrize("ratio, expected", [(0, 90), (0.5, 60), (1, 0)])
    def test_acos(self, ratio, expected):
        assert trig.acos(ratio) == pytest.approx(expected, abs=1e-6)

    def test_acos_out_of_domain_raises(self):
        """Out-of-domain policy belongs to callers; the helper does not clamp."""
        with pytest.raises(ValueError):
            trig.acos(1.5)

"""Tests for unit conversions."""

import pytest

from scmr_coil.utils.units import (
    awg_to_radius, radius_to_awg,
    inches_to_meters, meters_to_inches, meters_to_feet,
    to_mhz, to_pf, to_uh, pf, mhz,
)


class TestWireGauge:
    """Tests for AWG <-> radius conversion."""

    def test_awg_36_is_five_mils(self):
        """AWG 36 is defined as 0.127 mm diameter."""
        assert awg_to_radius(36) == pytest.approx(0.127e-3 / 2)

    def test_awg_0000(self):
        """AWG 0000 (gauge -3) is 92x the diameter of AWG 36."""
        assert awg_to_radius(-3) == pytest.approx(11.684e-3 / 2)

    def test_awg_22(self):
        assert awg_to_radius(22) == pytest.approx(3.2e-4, rel=0.01)

    def test_larger_gauge_is_thinner(self):
        assert awg_to_radius(30) < awg_to_radius(20) < awg_to_radius(10)

    @pytest.mark.parametrize("gauge", range(10, 31))
    def test_round_trip(self, gauge):
        r = awg_to_radius(gauge)
        assert radius_to_awg(r) == pytest.approx(gauge, abs=1e-9)
        assert abs(awg_to_radius(radius_to_awg(r)) - r) / r < 1e-3

    def test_fractional_gauge(self):
        r = 4.0e-4
        g = radius_to_awg(r)
        assert 20 < g < 21
        assert awg_to_radius(g) == pytest.approx(r, rel=1e-3)

    def test_non_positive_radius(self):
        with pytest.raises(ValueError):
            radius_to_awg(0.0)


class TestLength:
    def test_inches(self):
        assert inches_to_meters(1.0) == pytest.approx(0.0254)
        assert meters_to_inches(0.0254) == pytest.approx(1.0)

    def test_feet(self):
        assert meters_to_feet(0.3048) == pytest.approx(1.0)

    def test_quarter_inch_tube(self):
        assert inches_to_meters(0.25 / 2) == pytest.approx(3.175e-3)


class TestDisplayUnits:
    def test_electrical(self):
        assert to_mhz(mhz(6.78)) == pytest.approx(6.78)
        assert to_pf(pf(120.0)) == pytest.approx(120.0)
        assert to_uh(73e-6) == pytest.approx(73.0)

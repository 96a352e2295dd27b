"""Tests for the compute pipeline."""

import pytest

from scmr_coil import CalculationResult, GeometryDomainError, InvalidArgument, compute
from scmr_coil.utils.constants import PhysicalConstants


class TestWireScenario:
    """Default 22 AWG coil: 10 cm loop, 10 turns, pitch 2.025·rc."""

    def test_geometry(self):
        result = compute()
        g = result.geometry
        assert g.cross_section_radius == pytest.approx(3.2e-4, rel=0.01)
        assert g.loop_radius == pytest.approx(0.10)
        assert g.turn_count == 10
        assert g.pitch == pytest.approx(6.5e-4, rel=0.01)

    def test_predictions(self):
        result = compute("wire")
        assert 10e-6 < result.inductance < 100e-6
        assert 1e6 < result.resonant_frequency < 10e6
        assert 100e3 < result.resonant_frequency < 100e6
        assert result.capacitance == result.total_capacitance
        assert result.quality_factor > 0

    def test_all_checks_pass(self):
        assert compute().validation.ok

    def test_no_arguments_equals_wire(self):
        assert compute() == compute("wire")

    def test_idempotent(self):
        a = compute(1e-3, 5, 0.05, 3e-3, 20e-12)
        b = compute(1e-3, 5, 0.05, 3e-3, 20e-12)
        assert a == b
        assert a.quality_factor == b.quality_factor


class TestArguments:
    def test_named_fields_match_positional(self):
        named = compute(cross_section_radius=1e-3, turn_count=5, loop_radius=0.05, pitch=3e-3)
        assert named == compute(1e-3, 5, 0.05, 3e-3)

    def test_two_arguments(self):
        with pytest.raises(InvalidArgument):
            compute(1e-3, 5)

    def test_unknown_profile(self):
        with pytest.raises(InvalidArgument, match="recognized default profile"):
            compute("coil")

    def test_mixed_calling_conventions(self):
        with pytest.raises(InvalidArgument):
            compute(1e-3, 5, 0.05, turn_count=5)

    def test_unknown_field(self):
        with pytest.raises(InvalidArgument):
            compute(wire_gauge=22)

    def test_negative_length(self):
        with pytest.raises(InvalidArgument):
            compute(1e-3, 5, -0.05)

    def test_custom_constants(self):
        k = PhysicalConstants(c=2.99792458e8)
        result = compute(constants=k)
        assert result.constants is k
        assert result.properties.wavelength * result.resonant_frequency == pytest.approx(k.c)


class TestDomainErrors:
    def test_pitch_too_small(self):
        with pytest.raises(GeometryDomainError) as info:
            compute(0.001, 5, 0.01, 0.0001)
        err = info.value
        assert err.formula == "self_capacitance"
        assert err.parameter == "pitch"
        assert err.value == 0.0001
        assert err.partial["geometry"].pitch == 0.0001
        assert err.partial["inductance"] > 0

    def test_default_pitch_is_valid(self):
        # 2.025·rc keeps s/(2rc) just above 1
        result = compute(0.001, 5, 0.05)
        assert result.geometry.spacing_ratio == pytest.approx(1.0125)


class TestResult:
    def test_summary(self):
        summary = compute().summary()
        assert set(summary) == {"geometry", "predictions", "optima", "validity"}
        assert summary["geometry"]["profile"] == "wire"
        assert summary["validity"]["frequency_out_of_range"] is False

    def test_report(self):
        result = compute()
        assert isinstance(result, CalculationResult)
        text = result.report()
        assert "Estimated f0" in text

    def test_bigwire(self):
        result = compute("bigwire")
        o = result.optimization
        assert o.optimal_radius == pytest.approx(result.geometry.loop_radius)
        assert o.global_max_q == pytest.approx(o.local_max_q, rel=1e-3)


class TestUnrealizablePitch:
    """No pitch realizes the tuning capacitance; everything else is still reported."""

    def test_other_results_survive(self):
        result = compute(1e-4, 200, 0.5, 3e-4)
        o = result.optimization
        assert o.optimal_spacing is None
        assert "optimal_spacing" in o.spacing_error
        assert o.required_capacitance > 0
        assert o.global_max_q > 0
        assert o.local_max_q == pytest.approx(o.local_max_q_closed_form, rel=0.01)
        assert result.resonant_frequency == pytest.approx(27584.85, rel=1e-3)
        assert result.quality_factor == pytest.approx(7.43, rel=0.01)
        assert result.validation.frequency_out_of_range
        assert result.summary()["optima"]["optimal_spacing_m"] is None

    def test_report_shows_missing_pitch(self):
        text = compute(1e-4, 200, 0.5, 3e-4).report()
        assert "Optimal coil pitch     = N/A" in text
        assert "Validity Checks" in text

"""
Tests for the drift estimator (DriftEstimator in cosmology/expansion.py)

Tests validate:
1. Closed-form first derivative against N(a)
2. Sign of the drift for standard, phantom and vacuum models
3. Finite-difference second derivative against the analytic form
4. Error handling

Run with: pytest tests/test_drift.py -v
"""

import numpy as np
import pytest

from omegadrift.core.constants import H0_FIDUCIAL, T_NOW
from omegadrift.core.errors import DomainError
from omegadrift.core.parameters import ModelParameters, LAMBDA_CDM
from omegadrift.cosmology.expansion import CosmologyModel, DriftEstimator


class TestFirstDerivative:
    """Test d omega/dt = ratio · (-H^2 N / D)."""

    def test_value_at_reference(self, estimator):
        """At a = 1: d omega/dt = -ratio · H_ref^2 · N(1)."""
        N = 1.5 * LAMBDA_CDM.omega_matter + 2.0 * LAMBDA_CDM.omega_radiation
        expected = -(1.0 / H0_FIDUCIAL) * H0_FIDUCIAL**2 * N
        assert np.isclose(estimator.first_derivative(T_NOW), expected, rtol=1e-12)

    def test_negative_for_lcdm(self, estimator):
        """With w = -1 omega always decreases."""
        for t in [1e-20 * T_NOW, 1e-5 * T_NOW, T_NOW, 1e3 * T_NOW]:
            assert estimator.first_derivative(t) < 0

    def test_exactly_zero_for_vacuum(self, vacuum):
        """A pure cosmological constant gives no drift at all."""
        d = DriftEstimator(vacuum)
        assert d.first_derivative(T_NOW) == 0.0
        assert d.second_derivative(T_NOW) == 0.0

    def test_phantom_turns_positive(self, phantom):
        """Phantom energy (w < -1) eventually drives omega upward."""
        d = DriftEstimator(phantom)
        assert d.first_derivative(1e-3 * T_NOW) < 0
        assert d.first_derivative(1e3 * T_NOW) > 0

    def test_einstein_de_sitter(self, eds):
        """Matter only: d omega/dt = -1.5 · ratio · H_ref^2 · a^-3."""
        d = DriftEstimator(eds)
        t = 4 * T_NOW
        a = eds.scale_factor(t)
        expected = -1.5 * H0_FIDUCIAL * a**-3
        assert np.isclose(d.first_derivative(t), expected, rtol=1e-12)

    def test_zero_density_sum(self):
        """D(a) = 0 is rejected."""
        empty = CosmologyModel(ModelParameters(omega_matter=0.0, omega_radiation=0.0,
                                               omega_lambda=0.0))
        assert empty.hubble_at_time(T_NOW) == 0.0
        with pytest.raises(DomainError):
            DriftEstimator(empty).first_derivative(T_NOW)
        with pytest.raises(DomainError):
            DriftEstimator(empty).second_derivative(T_NOW, method='analytic')

    def test_invalid_time(self, estimator):
        with pytest.raises(DomainError):
            estimator.first_derivative(0.0)
        with pytest.raises(DomainError):
            estimator.second_derivative(-T_NOW)


class TestSecondDerivative:
    """Test d^2 omega/dt^2."""

    @pytest.mark.parametrize("t", [1e-25 * T_NOW, 1e-10 * T_NOW, 1e-3 * T_NOW, T_NOW, 1e3 * T_NOW])
    @pytest.mark.parametrize("fixture", ["lcdm", "phantom", "eds"])
    def test_finite_difference_matches_analytic(self, fixture, t, request):
        """Central difference with dt = 0.01·t agrees with the closed form."""
        model = request.getfixturevalue(fixture)
        d = DriftEstimator(model)
        fd = d.second_derivative(t)
        exact = d.second_derivative(t, method='analytic')
        assert np.isclose(fd, exact, rtol=1e-3)

    def test_analytic_at_reference(self, estimator):
        """At a = 1: ratio · H_ref^2 · (3Ωm + (16/3)Ωr) / t_ref for w = -1."""
        curvature = 3.0 * LAMBDA_CDM.omega_matter + (16.0 / 3.0) * LAMBDA_CDM.omega_radiation
        expected = H0_FIDUCIAL * curvature / T_NOW
        assert np.isclose(estimator.second_derivative(T_NOW, method='analytic'), expected, rtol=1e-12)

    def test_positive_for_lcdm(self, estimator):
        """The decline of omega keeps slowing down."""
        for t in [1e-20 * T_NOW, T_NOW, 1e3 * T_NOW]:
            assert estimator.second_derivative(t) > 0

    def test_smaller_step_is_closer(self, lcdm):
        """Truncation error shrinks with the step."""
        t = T_NOW
        exact = DriftEstimator(lcdm).second_derivative(t, method='analytic')
        coarse = DriftEstimator(lcdm, step_fraction=0.05).second_derivative(t)
        fine = DriftEstimator(lcdm, step_fraction=0.005).second_derivative(t)
        assert abs(fine - exact) < abs(coarse - exact)

    def test_deterministic(self, estimator):
        assert estimator.second_derivative(T_NOW) == estimator.second_derivative(T_NOW)

    def test_unknown_method(self, estimator):
        with pytest.raises(DomainError):
            estimator.second_derivative(T_NOW, method='spline')

    @pytest.mark.parametrize("fraction", [0.0, -0.01, 1.0, 2.0])
    def test_invalid_step_fraction(self, lcdm, fraction):
        with pytest.raises(DomainError):
            DriftEstimator(lcdm, step_fraction=fraction)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

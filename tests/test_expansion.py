"""
Tests for the expansion model (cosmology/expansion.py) and ModelParameters

Tests validate:
1. Scale factor normalisation and power-law scaling
2. Hubble parameter positivity and limits
3. omega <-> H rescaling
4. Domain and overflow errors
5. Parameter validation

Run with: pytest tests/test_expansion.py -v
"""

import dataclasses

import numpy as np
import pytest

from omegadrift.core.constants import H0_FIDUCIAL, H0_KMS_MPC, MPC_TO_KM, T_NOW, OMEGA_REFERENCE
from omegadrift.core.errors import DomainError, NumericOverflowError
from omegadrift.core.parameters import ModelParameters, LAMBDA_CDM, PRESETS
from omegadrift.cosmology.expansion import CosmologyModel


TIMES = [1e-30 * T_NOW, 1e-12 * T_NOW, 1e-3 * T_NOW, T_NOW, 10 * T_NOW, 1e3 * T_NOW]


class TestScaleFactor:
    """Test a(t) = (t / t_ref)^(2/3)."""

    def test_exactly_one_at_reference(self, lcdm):
        """a(t_ref) is exactly 1."""
        assert lcdm.scale_factor(T_NOW) == 1.0

    def test_positive(self, lcdm):
        """a(t) > 0 for all t > 0."""
        for t in TIMES:
            assert lcdm.scale_factor(t) > 0

    def test_two_thirds_power(self, lcdm):
        """Eight times the reference age gives a = 4."""
        assert np.isclose(lcdm.scale_factor(8 * T_NOW), 4.0, rtol=1e-12)

    def test_custom_reference_time(self):
        """The reference epoch follows reference_time."""
        model = CosmologyModel(ModelParameters(reference_time=1e10))
        assert model.scale_factor(1e10) == 1.0


class TestHubbleParameter:
    """Test H(t)."""

    @pytest.mark.parametrize("preset", sorted(PRESETS))
    def test_positive(self, preset):
        """H(t) > 0 for every preset over the sampled range."""
        model = CosmologyModel(PRESETS[preset])
        for t in TIMES:
            assert model.hubble_at_time(t) > 0

    def test_value_at_reference(self, lcdm):
        """At a = 1, H = H_ref · sqrt(Omega_total)."""
        expected = H0_FIDUCIAL * np.sqrt(LAMBDA_CDM.omega_total)
        assert np.isclose(lcdm.hubble_at_time(T_NOW), expected, rtol=1e-12)

    def test_einstein_de_sitter_scaling(self, eds):
        """Matter only: H = H_ref · a^(-3/2) = H_ref · t_ref / t."""
        t = 0.01 * T_NOW
        assert np.isclose(eds.hubble_at_time(t), H0_FIDUCIAL * T_NOW / t, rtol=1e-10)

    def test_decreasing_for_lcdm(self, lcdm):
        """With w = -1, H falls monotonically with time."""
        H = [lcdm.hubble_at_time(t) for t in TIMES]
        assert all(h1 > h2 for h1, h2 in zip(H, H[1:]))

    def test_vacuum_is_constant(self, vacuum):
        """Pure vacuum energy gives H = H_ref at every time."""
        for t in TIMES:
            assert vacuum.hubble_at_time(t) == H0_FIDUCIAL

    def test_radiation_dominates_early(self, lcdm):
        """At very early times H grows like a^-2, i.e. t^(-4/3)."""
        t1, t2 = 1e-30 * T_NOW, 1e-29 * T_NOW
        ratio = lcdm.hubble_at_time(t1) / lcdm.hubble_at_time(t2)
        assert np.isclose(ratio, 10 ** (4.0 / 3.0), rtol=1e-3)


class TestOmega:
    """Test omega = H · (omega_ref / H_ref)."""

    def test_reference_omega(self, lcdm):
        """omega(t_ref) = omega_ref when the fractions sum to one."""
        assert np.isclose(lcdm.omega_at_time(T_NOW), OMEGA_REFERENCE, rtol=1e-9)

    def test_linear_rescaling(self):
        """Doubling omega_ref doubles omega at any time."""
        base = CosmologyModel(ModelParameters())
        doubled = CosmologyModel(ModelParameters(reference_omega=2.0))
        t = 0.5 * T_NOW
        assert np.isclose(doubled.omega_at_time(t), 2 * base.omega_at_time(t), rtol=1e-14)

    def test_omega_from_hubble(self, lcdm):
        """omega_from_hubble(H_ref) = omega_ref."""
        assert np.isclose(lcdm.omega_from_hubble(H0_FIDUCIAL), OMEGA_REFERENCE)


class TestDomainErrors:
    """Out-of-domain times raise typed errors instead of NaN/inf."""

    @pytest.mark.parametrize("t", [0.0, -1.0, -T_NOW, np.nan, np.inf, -np.inf])
    def test_invalid_time(self, lcdm, t):
        with pytest.raises(DomainError):
            lcdm.hubble_at_time(t)
        with pytest.raises(DomainError):
            lcdm.scale_factor(t)

    def test_non_numeric_time(self, lcdm):
        with pytest.raises(DomainError):
            lcdm.omega_at_time("1e17")
        with pytest.raises(DomainError):
            lcdm.omega_at_time(None)

    def test_domain_error_is_value_error(self, lcdm):
        """DomainError can be caught as ValueError."""
        with pytest.raises(ValueError):
            lcdm.hubble_at_time(0.0)

    def test_overflow(self, lcdm):
        """a^-4 overflows at absurdly early times."""
        with pytest.raises(NumericOverflowError):
            lcdm.hubble_at_time(1e-300)

    def test_vanishing_component_never_overflows(self, vacuum):
        """Zero fractions contribute exact zeros, even where a^-4 would overflow."""
        assert vacuum.hubble_at_time(1e-300) == H0_FIDUCIAL


class TestModelParameters:
    """Test parameter validation and presets."""

    @pytest.mark.parametrize("field", ["omega_matter", "omega_radiation", "omega_lambda"])
    def test_negative_fraction_rejected(self, field):
        with pytest.raises(DomainError):
            ModelParameters(**{field: -0.1})

    @pytest.mark.parametrize("changes", [
        {"hubble_now": 0.0},
        {"hubble_now": -1e-18},
        {"reference_time": 0.0},
        {"dark_energy_w": np.nan},
        {"reference_omega": np.inf},
        {"reference_omega": 0.0},
    ])
    def test_invalid_values_rejected(self, changes):
        with pytest.raises(DomainError):
            ModelParameters(**changes)

    def test_fractions_need_not_sum_to_one(self):
        """Non-flat combinations are accepted."""
        params = ModelParameters(omega_matter=0.5, omega_lambda=0.9)
        assert params.omega_total > 1

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            LAMBDA_CDM.omega_matter = 0.5

    def test_replace(self):
        """replace() returns a validated copy."""
        params = LAMBDA_CDM.replace(dark_energy_w=-0.9)
        assert params.dark_energy_w == -0.9
        assert LAMBDA_CDM.dark_energy_w == -1.0
        with pytest.raises(DomainError):
            LAMBDA_CDM.replace(omega_matter=-1.0)
        with pytest.raises(TypeError):
            LAMBDA_CDM.replace(omega_curvature=0.1)

    def test_fiducial_hubble_from_kms_mpc(self):
        """H0_FIDUCIAL is 70 km/s/Mpc expressed in s^-1."""
        assert np.isclose(H0_FIDUCIAL, H0_KMS_MPC / MPC_TO_KM, rtol=1e-15)
        assert np.isclose(H0_FIDUCIAL, 2.27e-18, rtol=1e-2)

    def test_default_model_uses_fiducial(self):
        assert CosmologyModel().params == LAMBDA_CDM


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

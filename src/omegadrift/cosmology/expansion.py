#!/usr/bin/env python3
"""
Expansion Model and Frequency Drift
===================================

Evaluates the Hubble-like expansion rate of a Friedmann model and the
fundamental frequency omega(t) that tracks it.

The expansion history:
    a(t) = (t / t_ref)^(2/3)                     (matter-dominated approximation)
    H(t) = H_ref · sqrt(Ωm·a^-3 + Ωr·a^-4 + ΩΛ·a^(-3(1+w)))

omega is a fixed linear rescaling of H:
    omega(t) = H(t) · (omega_ref / H_ref)

The drift uses the closed form
    dH/dt = -H^2 · N(a) / D(a)
    N(a)  = 1.5·Ωm·a^-3 + 2·Ωr·a^-4 + 1.5·(1+w)·ΩΛ·a^(-3(1+w))
    D(a)  = Ωm·a^-3 + Ωr·a^-4 + ΩΛ·a^(-3(1+w))

and the curvature of omega is a central finite difference with a step that
scales with t, so the relative truncation error is roughly uniform over the
many decades the sampler covers.
"""

import logging
from typing import Optional, Tuple

import numpy as np

from omegadrift.core.constants import FD_STEP_FRACTION
from omegadrift.core.errors import DomainError, NumericOverflowError
from omegadrift.core.parameters import ModelParameters

logger = logging.getLogger(__name__)


def check_time(t) -> np.float64:
    """Validate a time argument and return it as a float64."""
    if isinstance(t, (str, bytes)):
        raise DomainError(f"time must be a real number, got {t!r}")
    try:
        t = np.float64(t)
    except (TypeError, ValueError) as exc:
        raise DomainError(f"time must be a real number, got {t!r}") from exc
    if not np.isfinite(t) or t <= 0:
        raise DomainError(f"time must be positive and finite, got {t}")
    return t


def require_finite(name: str, value, t) -> float:
    if not np.isfinite(value):
        raise NumericOverflowError(f"{name} is not finite at t = {t:.6e} s ({value})")
    return float(value)


# =============================================================================
# COSMOLOGY MODEL
# =============================================================================

class CosmologyModel:
    """
    Friedmann-like expansion model parameterised by ModelParameters.

    The model holds no mutable state: every method is a pure function of
    its arguments and the frozen parameters, so one instance can be shared
    by any number of callers.
    """

    def __init__(self, params: Optional[ModelParameters] = None):
        self.params = params if params is not None else ModelParameters()
        self._omega_per_hubble = self.params.reference_omega / self.params.hubble_now

    def __repr__(self):
        return f"CosmologyModel({self.params!r})"

    @property
    def omega_per_hubble(self) -> float:
        """Fixed ratio omega_ref / H_ref."""
        return self._omega_per_hubble

    def scale_factor(self, t: float) -> float:
        """Scale factor a(t) = (t / t_ref)^(2/3); exactly 1 at t_ref."""
        t = check_time(t)
        with np.errstate(over='ignore', under='ignore'):
            a = np.power(t / self.params.reference_time, 2.0 / 3.0)
        if not (np.isfinite(a) and a > 0):
            raise NumericOverflowError(f"scale factor out of range at t = {t:.6e} s ({a})")
        return float(a)

    def density_terms(self, a: float) -> Tuple[np.float64, np.float64, np.float64]:
        """
        Matter, radiation and dark-energy terms of D(a).

        Vanishing fractions contribute an exact zero, so an overflowing
        power of a never turns a missing component into NaN.
        """
        p = self.params
        a = np.float64(a)
        zero = np.float64(0.0)
        with np.errstate(over='ignore'):
            matter = p.omega_matter * a**-3.0 if p.omega_matter else zero
            radiation = p.omega_radiation * a**-4.0 if p.omega_radiation else zero
            dark = p.omega_lambda * a**(-3.0 * (1.0 + p.dark_energy_w)) if p.omega_lambda else zero
        return matter, radiation, dark

    def hubble_at_time(self, t: float) -> float:
        """Hubble parameter H(t) in s^-1."""
        t = check_time(t)
        matter, radiation, dark = self.density_terms(self.scale_factor(t))
        with np.errstate(over='ignore', invalid='ignore'):
            H = self.params.hubble_now * np.sqrt(matter + radiation + dark)
        return require_finite("H", H, t)

    def omega_from_hubble(self, H: float) -> float:
        """Linear map omega = H · (omega_ref / H_ref)."""
        return H * self._omega_per_hubble

    def omega_at_time(self, t: float) -> float:
        return self.omega_from_hubble(self.hubble_at_time(t))


# =============================================================================
# DRIFT ESTIMATOR
# =============================================================================

class DriftEstimator:
    """
    First and second time-derivatives of omega(t).

    Args:
        model: CosmologyModel to differentiate
        step_fraction: Finite-difference step as a fraction of t (0 < f < 1)
    """

    METHODS = ('finite_difference', 'analytic')

    def __init__(self, model: CosmologyModel, step_fraction: float = FD_STEP_FRACTION):
        if not 0.0 < step_fraction < 1.0:
            raise DomainError(f"step_fraction must lie in (0, 1), got {step_fraction}")
        self.model = model
        self.step_fraction = step_fraction

    def first_derivative(self, t: float) -> float:
        """d omega / dt from the closed-form dH/dt."""
        t = check_time(t)
        model = self.model
        w = model.params.dark_energy_w
        matter, radiation, dark = model.density_terms(model.scale_factor(t))

        D = matter + radiation + dark
        if D == 0:
            raise DomainError(f"density sum D(a) vanishes at t = {t:.6e} s")
        N = 1.5 * matter + 2.0 * radiation + 1.5 * (1.0 + w) * dark

        H = np.float64(model.hubble_at_time(t))
        with np.errstate(over='ignore', invalid='ignore'):
            dH_dt = -H**2 * N / D
        dH_dt = require_finite("dH/dt", dH_dt, t)
        return model.omega_from_hubble(dH_dt)

    def second_derivative(self, t: float, method: str = 'finite_difference') -> float:
        """
        d^2 omega / dt^2.

        'finite_difference' (default) takes a central difference of
        first_derivative with dt = step_fraction · t. 'analytic' uses

            ratio · H_ref^2 · (3M + (16/3)R + 3(1+w)^2 L) / t

        which is the exact derivative of first_derivative, since
        H^2 / D = H_ref^2.
        """
        t = check_time(t)
        if method == 'finite_difference':
            dt = self.step_fraction * t
            ahead = self.first_derivative(t + dt)
            behind = self.first_derivative(t - dt)
            return require_finite("d2omega/dt2", (ahead - behind) / (2.0 * dt), t)
        if method == 'analytic':
            return self._second_derivative_analytic(t)
        raise DomainError(f"Unknown method: {method}")

    def _second_derivative_analytic(self, t: np.float64) -> float:
        model = self.model
        p = model.params
        matter, radiation, dark = model.density_terms(model.scale_factor(t))
        if matter + radiation + dark == 0:
            raise DomainError(f"density sum D(a) vanishes at t = {t:.6e} s")
        with np.errstate(over='ignore', invalid='ignore'):
            curvature = (3.0 * matter + (16.0 / 3.0) * radiation
                         + 3.0 * (1.0 + p.dark_energy_w)**2 * dark)
            d2H = p.hubble_now**2 * curvature / t
        return model.omega_from_hubble(require_finite("d2H/dt2", d2H, t))


__all__ = ['CosmologyModel', 'DriftEstimator', 'check_time', 'require_finite']

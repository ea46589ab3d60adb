#!/usr/bin/env python3
"""
Projection Calculators
======================

Derived queries on the expansion model at a chosen "now" t0. They work
directly on CosmologyModel/DriftEstimator and never need a trace.

    Resonance breakdown:   gamma_c = 0.01·omega(t0),  t_break = gamma_c / |d omega/dt|
    Time perception:       omega(t0) / omega(t0 + Δt)
    Atomic clock drift:    omega(t0 + Δt) / omega(t0), detectable above 1e-18
    Fractional shift:      exact Δt with |omega(t0+Δt)/omega(t0) - 1| = f (brentq)
"""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
from scipy.optimize import brentq

from omegadrift.core.constants import (
    SECONDS_PER_YEAR,
    RESONANCE_FRACTION,
    NEGLIGIBLE_DRIFT,
    CLOCK_PRECISION,
)
from omegadrift.core.errors import DomainError
from omegadrift.cosmology.expansion import CosmologyModel, DriftEstimator, check_time

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResonanceBreakdown:
    breakdown: bool
    time_to_breakdown: float    # s


@dataclass(frozen=True)
class TimePerception:
    omega_ratio: float          # omega(t0 + Δt) / omega(t0)
    perception_ratio: float     # omega(t0) / omega(t0 + Δt)


@dataclass(frozen=True)
class AtomicClockDrift:
    frequency_ratio: float
    percent_change: float
    detectable: bool


@dataclass(frozen=True)
class FractionalShift:
    fraction: float
    reached: bool
    seconds: float
    years: float


class ProjectionCalculator:
    """
    Projections of omega from a given epoch.

    Args:
        model: Expansion model
        estimator: Drift estimator (defaults to one built on model)
    """

    def __init__(self, model: CosmologyModel, estimator: Optional[DriftEstimator] = None):
        self.model = model
        self.estimator = estimator if estimator is not None else DriftEstimator(model)

    def _offset_time(self, t0: float, years: float) -> float:
        if not np.isfinite(years):
            raise DomainError(f"years must be finite, got {years}")
        t1 = check_time(t0) + years * SECONDS_PER_YEAR
        if t1 <= 0:
            raise DomainError(f"t0 + {years} yr = {t1:.6e} s is not a positive time")
        return t1

    def _omega(self, t: float) -> float:
        omega = self.model.omega_at_time(t)
        if omega == 0:
            raise DomainError(f"omega vanishes at t = {t:.6e} s; ratios are undefined")
        return omega

    def resonance_breakdown(self, t0: float) -> ResonanceBreakdown:
        """Time until the accumulated drift reaches 1% of omega(t0)."""
        gamma_critical = RESONANCE_FRACTION * self.model.omega_at_time(t0)
        drift = self.estimator.first_derivative(t0)

        if abs(drift) < NEGLIGIBLE_DRIFT:
            logger.debug("resonance_breakdown: drift %.3e negligible at t0=%.3e", drift, t0)
            return ResonanceBreakdown(breakdown=False, time_to_breakdown=float('inf'))

        return ResonanceBreakdown(breakdown=True, time_to_breakdown=gamma_critical / abs(drift))

    def time_perception(self, t0: float, years: float) -> TimePerception:
        """How much slower (ratio > 1) or faster time seems after `years`."""
        omega_now = self._omega(t0)
        omega_later = self.model.omega_at_time(self._offset_time(t0, years))
        return TimePerception(
            omega_ratio=omega_later / omega_now,
            perception_ratio=omega_now / omega_later,
        )

    def atomic_clock_drift(self, t0: float, years: float) -> AtomicClockDrift:
        """Fractional frequency change an atomic clock would see over `years`."""
        omega_now = self._omega(t0)
        omega_later = self.model.omega_at_time(self._offset_time(t0, years))
        ratio = omega_later / omega_now
        return AtomicClockDrift(
            frequency_ratio=ratio,
            percent_change=(ratio - 1.0) * 100.0,
            detectable=abs(ratio - 1.0) > CLOCK_PRECISION,
        )

    def fractional_shift_horizon(self, t0: float, fraction: float = RESONANCE_FRACTION,
                                 max_factor: float = 1e6) -> FractionalShift:
        """
        Exact time for omega to move by `fraction` of its value at t0.

        The root is bracketed by stepping the offset up a decade at a time
        from 1e-6·t0 to max_factor·t0, then refined with brentq.
        """
        if not 0.0 < fraction < 1.0:
            raise DomainError(f"fraction must lie in (0, 1), got {fraction}")
        t0 = check_time(t0)
        omega_now = self._omega(t0)

        def excess(dt):
            return abs(self.model.omega_at_time(t0 + dt) / omega_now - 1.0) - fraction

        lo, hi = 0.0, 1e-6 * t0
        while excess(hi) < 0:
            if hi >= max_factor * t0:
                logger.debug("fractional_shift_horizon: %.2e not reached by %.3e s", fraction, hi)
                return FractionalShift(fraction=fraction, reached=False,
                                       seconds=float('inf'), years=float('inf'))
            lo, hi = hi, hi * 10.0

        dt = brentq(excess, lo, hi, xtol=1e-12 * hi, rtol=1e-12)
        return FractionalShift(fraction=fraction, reached=True,
                               seconds=dt, years=dt / SECONDS_PER_YEAR)


__all__ = [
    'ResonanceBreakdown', 'TimePerception', 'AtomicClockDrift', 'FractionalShift',
    'ProjectionCalculator',
]

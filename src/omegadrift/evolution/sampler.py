"""
Evolution Sampler
=================

Samples omega(t) and its derivatives on a log-uniform time grid:

    t_i = 10^(log10(t_start) + i·Δlog),   i = 0..steps
    Δlog = (log10(t_end) - log10(t_start)) / steps

Every call returns a fresh, immutable EvolutionTrace; the sampler itself
keeps no record of previous runs.
"""

import logging
import numbers
from dataclasses import dataclass, astuple
from typing import Iterator, Optional, Tuple

import numpy as np
import pandas as pd

from omegadrift.core.errors import DomainError, NumericOverflowError
from omegadrift.cosmology.expansion import CosmologyModel, DriftEstimator, check_time

logger = logging.getLogger(__name__)

COLUMNS = ('time', 'scale_factor', 'omega', 'd_omega', 'd2_omega')


@dataclass(frozen=True)
class SamplePoint:
    """State of omega at a single time."""
    time: float
    scale_factor: float
    omega: float
    d_omega: float
    d2_omega: float


@dataclass(frozen=True)
class EvolutionTrace:
    """Ordered samples with strictly increasing time."""
    samples: Tuple[SamplePoint, ...]
    t_start: float
    t_end: float
    steps: int

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self) -> Iterator[SamplePoint]:
        return iter(self.samples)

    def __getitem__(self, index):
        return self.samples[index]

    @property
    def terminal(self) -> SamplePoint:
        """Last sample, which decides the fate of the model."""
        return self.samples[-1]

    def column(self, name: str) -> np.ndarray:
        if name not in COLUMNS:
            raise KeyError(name)
        return np.array([getattr(s, name) for s in self.samples])

    @property
    def times(self) -> np.ndarray:
        return self.column('time')

    @property
    def scale_factors(self) -> np.ndarray:
        return self.column('scale_factor')

    @property
    def omegas(self) -> np.ndarray:
        return self.column('omega')

    @property
    def d_omegas(self) -> np.ndarray:
        return self.column('d_omega')

    @property
    def d2_omegas(self) -> np.ndarray:
        return self.column('d2_omega')

    def to_dataframe(self) -> pd.DataFrame:
        """One row per sample, one column per SamplePoint field."""
        return pd.DataFrame([astuple(s) for s in self.samples], columns=list(COLUMNS))


class EvolutionSampler:
    """
    Drives CosmologyModel and DriftEstimator over a log-spaced time range.

    Args:
        model: Expansion model to sample
        estimator: Derivative estimator (defaults to one built on model)
    """

    def __init__(self, model: CosmologyModel, estimator: Optional[DriftEstimator] = None):
        self.model = model
        self.estimator = estimator if estimator is not None else DriftEstimator(model)

    def time_grid(self, t_start: float, t_end: float, steps: int) -> np.ndarray:
        """Validated log-uniform grid of steps + 1 times."""
        t_start = check_time(t_start)
        t_end = check_time(t_end)
        if t_end <= t_start:
            raise DomainError(f"t_end ({t_end}) must exceed t_start ({t_start})")
        if isinstance(steps, bool) or not isinstance(steps, numbers.Integral):
            raise DomainError(f"steps must be an integer, got {steps!r}")
        if steps < 1:
            raise DomainError(f"steps must be >= 1, got {steps}")

        log_start = np.log10(t_start)
        d_log = (np.log10(t_end) - log_start) / steps
        times = 10.0 ** (log_start + np.arange(steps + 1) * d_log)
        if not np.all(np.diff(times) > 0):
            raise DomainError(
                f"{steps} steps over [{t_start}, {t_end}] do not give strictly increasing times"
            )
        return times

    def sample(self, t: float) -> SamplePoint:
        """Evaluate a single SamplePoint, rejecting non-finite values."""
        point = SamplePoint(
            time=float(t),
            scale_factor=self.model.scale_factor(t),
            omega=self.model.omega_at_time(t),
            d_omega=self.estimator.first_derivative(t),
            d2_omega=self.estimator.second_derivative(t),
        )
        if not np.all(np.isfinite(astuple(point))):
            raise NumericOverflowError(f"non-finite sample at t = {t:.6e} s: {point}")
        return point

    def simulate(self, t_start: float, t_end: float, steps: int) -> EvolutionTrace:
        """
        Sample omega over [t_start, t_end] in `steps` log-uniform intervals.

        Returns:
            EvolutionTrace with steps + 1 samples
        """
        times = self.time_grid(t_start, t_end, steps)
        logger.debug("simulate: t in [%.3e, %.3e] s, %d steps", times[0], times[-1], steps)

        samples = tuple(self.sample(t) for t in times)
        logger.debug("simulate: terminal sample %s", samples[-1])

        return EvolutionTrace(
            samples=samples,
            t_start=float(t_start),
            t_end=float(t_end),
            steps=int(steps),
        )


__all__ = ['SamplePoint', 'EvolutionTrace', 'EvolutionSampler', 'COLUMNS']

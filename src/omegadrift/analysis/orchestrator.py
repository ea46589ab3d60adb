"""
Analysis Orchestrator
=====================

Bundles a full pass over the engine for a chosen "now" t0:

    1. simulate omega from 1e-32·t0 to 1000·t0
    2. classify the terminal sample
    3. summary statistics at t0
    4. resonance breakdown, time perception (1 Gyr), atomic clock drift (1 yr)
"""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from omegadrift.core.constants import (
    SECONDS_PER_YEAR,
    RESONANCE_FRACTION,
    NEGLIGIBLE_DRIFT,
    ANALYSIS_START_FACTOR,
    ANALYSIS_END_FACTOR,
    ANALYSIS_STEPS,
    PERCEPTION_YEARS,
    CLOCK_YEARS,
)
from omegadrift.core.errors import DomainError
from omegadrift.core.parameters import ModelParameters
from omegadrift.cosmology.expansion import CosmologyModel, DriftEstimator, check_time
from omegadrift.evolution.sampler import EvolutionSampler, EvolutionTrace
from omegadrift.evolution.fate import FateClassifier, FatePrediction
from omegadrift.analysis.projections import (
    ProjectionCalculator,
    ResonanceBreakdown,
    TimePerception,
    AtomicClockDrift,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SummaryStats:
    omega: float
    d_omega: float
    d2_omega: float
    normalized_drift: float     # s^-1
    years_to_percent: float


@dataclass(frozen=True)
class FullAnalysis:
    t0: float
    params: ModelParameters
    trace: EvolutionTrace
    fate: FatePrediction
    summary: SummaryStats
    resonance: ResonanceBreakdown
    perception: TimePerception
    clock_drift: AtomicClockDrift
    perception_years: float
    clock_years: float

    def to_dict(self) -> Dict[str, Any]:
        """Scalar results as plain dicts (the trace is summarised, not expanded)."""
        return {
            't0': self.t0,
            'params': asdict(self.params),
            'trace': {
                't_start': self.trace.t_start,
                't_end': self.trace.t_end,
                'steps': self.trace.steps,
                'terminal': asdict(self.trace.terminal),
            },
            'fate': {**asdict(self.fate), 'scenario': self.fate.scenario.value},
            'summary': asdict(self.summary),
            'resonance': asdict(self.resonance),
            'perception': {**asdict(self.perception), 'years': self.perception_years},
            'clock_drift': {**asdict(self.clock_drift), 'years': self.clock_years},
        }


class AnalysisOrchestrator:
    """
    Composes the engine components around one shared, read-only model.

    Args:
        params: Model parameters (defaults to the fiducial LambdaCDM)
        classifier: Fate classifier (defaults to the standard rule ordering)
    """

    def __init__(self, params: Optional[ModelParameters] = None,
                 classifier: Optional[FateClassifier] = None):
        self.model = CosmologyModel(params)
        self.estimator = DriftEstimator(self.model)
        self.sampler = EvolutionSampler(self.model, self.estimator)
        self.classifier = classifier if classifier is not None else FateClassifier()
        self.projections = ProjectionCalculator(self.model, self.estimator)

    @property
    def params(self) -> ModelParameters:
        return self.model.params

    def simulate(self, t_start: float, t_end: float, steps: int) -> EvolutionTrace:
        return self.sampler.simulate(t_start, t_end, steps)

    def predict_fate(self, trace: EvolutionTrace) -> FatePrediction:
        return self.classifier.predict(trace)

    def summary_stats(self, t0: float) -> SummaryStats:
        """omega and its derivatives at t0 with the drift expressed per unit omega."""
        omega = self.model.omega_at_time(t0)
        d_omega = self.estimator.first_derivative(t0)
        d2_omega = self.estimator.second_derivative(t0)
        if omega == 0:
            raise DomainError(f"omega vanishes at t0 = {t0:.6e} s")

        normalized = d_omega / omega
        if abs(d_omega) < NEGLIGIBLE_DRIFT:
            years_to_percent = float('inf')
        else:
            years_to_percent = RESONANCE_FRACTION / abs(normalized) / SECONDS_PER_YEAR

        return SummaryStats(
            omega=omega,
            d_omega=d_omega,
            d2_omega=d2_omega,
            normalized_drift=normalized,
            years_to_percent=years_to_percent,
        )

    def full_analysis(self, t0: float) -> FullAnalysis:
        t0 = float(check_time(t0))
        logger.info("full analysis at t0 = %.3e s", t0)

        trace = self.simulate(ANALYSIS_START_FACTOR * t0, ANALYSIS_END_FACTOR * t0, ANALYSIS_STEPS)
        fate = self.predict_fate(trace)
        logger.info("fate: %s (stability %.1f)", fate.scenario.value, fate.stability_score)

        return FullAnalysis(
            t0=t0,
            params=self.params,
            trace=trace,
            fate=fate,
            summary=self.summary_stats(t0),
            resonance=self.projections.resonance_breakdown(t0),
            perception=self.projections.time_perception(t0, PERCEPTION_YEARS),
            clock_drift=self.projections.atomic_clock_drift(t0, CLOCK_YEARS),
            perception_years=PERCEPTION_YEARS,
            clock_years=CLOCK_YEARS,
        )


def run_full_analysis(t0: float, params: Optional[ModelParameters] = None) -> FullAnalysis:
    """Convenience wrapper: full analysis with a fresh orchestrator."""
    return AnalysisOrchestrator(params).full_analysis(t0)


__all__ = ['SummaryStats', 'FullAnalysis', 'AnalysisOrchestrator', 'run_full_analysis']

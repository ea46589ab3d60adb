"""
Omega Drift

Time-evolution of the fundamental frequency omega(t) under a Friedmann
expansion model, and classification of its long-term fate.
"""

from .core.errors import OmegaDriftError, DomainError, NumericOverflowError
from .core.parameters import (
    ModelParameters, LAMBDA_CDM, EINSTEIN_DE_SITTER, PHANTOM_ENERGY, PURE_VACUUM, PRESETS
)
from .cosmology.expansion import CosmologyModel, DriftEstimator
from .evolution.sampler import SamplePoint, EvolutionTrace, EvolutionSampler
from .evolution.fate import FateScenario, FatePrediction, FateClassifier, predict_fate
from .analysis.projections import (
    ProjectionCalculator, ResonanceBreakdown, TimePerception, AtomicClockDrift, FractionalShift
)
from .analysis.orchestrator import (
    SummaryStats, FullAnalysis, AnalysisOrchestrator, run_full_analysis
)

__version__ = "0.1.0"

__all__ = [
    'OmegaDriftError', 'DomainError', 'NumericOverflowError',
    'ModelParameters', 'LAMBDA_CDM', 'EINSTEIN_DE_SITTER', 'PHANTOM_ENERGY',
    'PURE_VACUUM', 'PRESETS',
    'CosmologyModel', 'DriftEstimator',
    'SamplePoint', 'EvolutionTrace', 'EvolutionSampler',
    'FateScenario', 'FatePrediction', 'FateClassifier', 'predict_fate',
    'ProjectionCalculator', 'ResonanceBreakdown', 'TimePerception',
    'AtomicClockDrift', 'FractionalShift',
    'SummaryStats', 'FullAnalysis', 'AnalysisOrchestrator', 'run_full_analysis',
]

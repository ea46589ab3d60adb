"""
Evolution of omega over time:
    - sampler: log-spaced evolution traces
    - fate: long-term scenario classification
"""

from .sampler import SamplePoint, EvolutionTrace, EvolutionSampler
from .fate import FateScenario, FatePrediction, FateClassifier, predict_fate

__all__ = [
    'SamplePoint', 'EvolutionTrace', 'EvolutionSampler',
    'FateScenario', 'FatePrediction', 'FateClassifier', 'predict_fate',
]

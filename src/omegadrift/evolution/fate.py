"""
Fate Classifier
===============

Maps the terminal derivatives of omega to a qualitative long-term scenario.
First matching rule wins:

    1. d_omega > 0, d2_omega >= 0   -> ETERNAL_EXPANSION      (stability 0.3)
    2. d_omega > 0, d2_omega <  0   -> ASYMPTOTIC_EXPANSION   (stability 0.7)
    3. d_omega < 0, d2_omega <  0   -> BIG_CRUNCH             (stability 0.1)
       d_omega < 0, d2_omega >= 0   -> BOUNCE                 (stability 0.5)
       both report time_to_halt = -omega / d_omega
    4. otherwise                    -> STEADY_STATE           (stability 0.9)

With the default ordering rule 4 only catches an exactly vanishing drift.
near_zero_is_steady=True checks |d_omega| < STEADY_STATE_DRIFT first, so a
negligible drift of either sign also counts as steady.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from omegadrift.core.constants import STEADY_STATE_DRIFT
from omegadrift.evolution.sampler import EvolutionTrace

logger = logging.getLogger(__name__)


class FateScenario(str, Enum):
    ETERNAL_EXPANSION = "ETERNAL_EXPANSION"
    ASYMPTOTIC_EXPANSION = "ASYMPTOTIC_EXPANSION"
    BIG_CRUNCH = "BIG_CRUNCH"
    BOUNCE = "BOUNCE"
    STEADY_STATE = "STEADY_STATE"


STABILITY = {
    FateScenario.ETERNAL_EXPANSION: 0.3,
    FateScenario.ASYMPTOTIC_EXPANSION: 0.7,
    FateScenario.BIG_CRUNCH: 0.1,
    FateScenario.BOUNCE: 0.5,
    FateScenario.STEADY_STATE: 0.9,
}

DESCRIPTIONS = {
    FateScenario.ETERNAL_EXPANSION:
        "omega rises without bound and keeps accelerating",
    FateScenario.ASYMPTOTIC_EXPANSION:
        "omega rises but decelerates towards a limiting value",
    FateScenario.BIG_CRUNCH:
        "omega falls at an accelerating rate and halts",
    FateScenario.BOUNCE:
        "omega falls but the decline is slowing, allowing a turnaround",
    FateScenario.STEADY_STATE:
        "omega is frozen at its present value",
}


@dataclass(frozen=True)
class FatePrediction:
    """Long-term scenario inferred from one sample."""
    scenario: FateScenario
    time_to_halt: Optional[float]
    stability_score: float
    description: str


class FateClassifier:
    """
    Pure decision procedure over (omega, d_omega, d2_omega).

    Args:
        near_zero_is_steady: Treat |d_omega| < STEADY_STATE_DRIFT as steady
            before testing the sign of the drift
    """

    def __init__(self, near_zero_is_steady: bool = False):
        self.near_zero_is_steady = near_zero_is_steady

    def classify(self, omega: float, d_omega: float, d2_omega: float) -> FatePrediction:
        time_to_halt = None

        if self.near_zero_is_steady and abs(d_omega) < STEADY_STATE_DRIFT:
            scenario = FateScenario.STEADY_STATE
        elif d_omega > 0 and d2_omega >= 0:
            scenario = FateScenario.ETERNAL_EXPANSION
        elif d_omega > 0 and d2_omega < 0:
            scenario = FateScenario.ASYMPTOTIC_EXPANSION
        elif d_omega < 0:
            time_to_halt = -omega / d_omega
            scenario = FateScenario.BIG_CRUNCH if d2_omega < 0 else FateScenario.BOUNCE
        else:
            scenario = FateScenario.STEADY_STATE

        logger.debug("classify: d_omega=%.3e d2_omega=%.3e -> %s",
                     d_omega, d2_omega, scenario.value)
        return FatePrediction(
            scenario=scenario,
            time_to_halt=time_to_halt,
            stability_score=STABILITY[scenario],
            description=DESCRIPTIONS[scenario],
        )

    def predict(self, trace: EvolutionTrace) -> FatePrediction:
        """Classify the terminal sample of a trace."""
        last = trace.terminal
        return self.classify(last.omega, last.d_omega, last.d2_omega)


def predict_fate(trace: EvolutionTrace) -> FatePrediction:
    """Classify a trace with the default rule ordering."""
    return FateClassifier().predict(trace)


__all__ = [
    'FateScenario', 'FatePrediction', 'FateClassifier', 'predict_fate',
    'STABILITY', 'DESCRIPTIONS',
]

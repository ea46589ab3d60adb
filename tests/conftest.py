"""Shared fixtures for the omegadrift test suite."""

import matplotlib
matplotlib.use("Agg")

import pytest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from omegadrift.core.parameters import LAMBDA_CDM, PHANTOM_ENERGY, PURE_VACUUM, EINSTEIN_DE_SITTER
from omegadrift.cosmology.expansion import CosmologyModel, DriftEstimator


@pytest.fixture
def lcdm():
    return CosmologyModel(LAMBDA_CDM)


@pytest.fixture
def phantom():
    return CosmologyModel(PHANTOM_ENERGY)


@pytest.fixture
def vacuum():
    return CosmologyModel(PURE_VACUUM)


@pytest.fixture
def eds():
    return CosmologyModel(EINSTEIN_DE_SITTER)


@pytest.fixture
def estimator(lcdm):
    return DriftEstimator(lcdm)

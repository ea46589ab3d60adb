"""Expansion model and omega derivatives."""

from .expansion import CosmologyModel, DriftEstimator

__all__ = ['CosmologyModel', 'DriftEstimator']

"""Projections, full-analysis orchestration and text reports."""

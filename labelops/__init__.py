"""Simulated data-labeling operations: models, simulation, storage and analytics."""

"""Estimator business services."""

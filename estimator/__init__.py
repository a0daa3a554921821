"""Discovery call pricing estimator for school accounting services."""

__version__ = "0.1.0"

"""ROI calculator for legacy application modernization."""

__version__ = "1.0.0"

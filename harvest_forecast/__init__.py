"""Harvest forecasting engine for mushroom cultivation batches."""

__version__ = "1.0.0"

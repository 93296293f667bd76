"""Crop yield data cleaning and exploratory analysis."""

__version__ = "1.0.0"

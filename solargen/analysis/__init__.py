"""Derived analysis of generated systems."""

from .statistics import calculate_statistics

__all__ = ["calculate_statistics"]

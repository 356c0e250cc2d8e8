"""Maths helpers: fractions, vectors, trigonometry, statistics, regression, fit tests and typed numbers."""

__version__ = "0.1.0"
"""Galton board simulation on a monochrome frame buffer with a cooperative scheduler."""

__version__ = "0.1.0"
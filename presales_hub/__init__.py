"""Presales Hub: executive brief generation and discovery question bank."""

__version__ = "0.1.0"
__author__ = "Presales Hub Team"

__all__ = ["__version__", "__author__"]

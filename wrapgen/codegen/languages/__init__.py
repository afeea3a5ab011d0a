"""
Target-specific wrapper generators.

This module contains generators for the supported UI frameworks.
"""

from .vue import VueGenerator

__all__ = ["VueGenerator"]

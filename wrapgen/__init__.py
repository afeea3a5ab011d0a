"""
wrapgen

Generates framework wrapper classes for custom elements from their metadata.
"""

__version__ = "0.1.0"

"""
Vue wrapper generator module.

Generates vue-property-decorator class components around custom elements.
"""

from .config import VueConfig
from .emitters import (
    define_events,
    define_methods,
    define_model,
    define_props,
    define_ref,
    define_render,
    resolve_type,
)
from .generator import VueGenerator

__all__ = [
    "VueGenerator",
    "VueConfig",
    # Emitters
    "define_events",
    "define_methods",
    "define_model",
    "define_props",
    "define_ref",
    "define_render",
    "resolve_type",
]

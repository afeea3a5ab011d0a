"""
Core code generation components.

Provides base classes and utilities used by all target generators.
"""

from .generator import CodeGenerator, GeneratorError, GenerationResult, generate_code
from .schema import (
    ComponentMetadata,
    Property,
    Event,
    Method,
    ModelConfig,
    SchemaError,
    convert_metadata_document,
)
from .fragments import Block
from .naming import element_interface_name, indent_lines, to_identifier_case
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, render_index

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    # Metadata - core data structures
    "ComponentMetadata",
    "Property",
    "Event",
    "Method",
    "ModelConfig",
    "SchemaError",
    "convert_metadata_document",
    # Text assembly
    "Block",
    "element_interface_name",
    "indent_lines",
    "to_identifier_case",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "render_index",
]

"""
wrapgen Code Generation Module

Generates framework wrapper classes from custom element metadata.
"""

from typing import Iterable, List, Optional

from ..logging_config import get_logger
from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_target_info,
    list_supported_targets,
)
from .core.generator import CodeGenerator, GeneratorError, GenerationResult, generate_code
from .core.schema import (
    ComponentMetadata,
    Property,
    Event,
    Method,
    ModelConfig,
    SchemaError,
    convert_metadata_document,
)
from .core.config import GeneratorConfig, ConfigError, ConfigManager, load_config

logger = get_logger(__name__)


def generate_components(
    components: Iterable[ComponentMetadata],
    target: str = "vue",
    config: Optional[GeneratorConfig] = None,
) -> List[GenerationResult]:
    """
    Generate wrappers for every component that is not excluded.

    Args:
        components: Component metadata from the metadata source
        target: Target framework name
        config: Generator configuration (defaults for the target if omitted)

    Returns:
        One GenerationResult per generated component, sorted by tag name
    """
    config = config or load_config(target)
    generator = get_generator(target, config)

    results = []
    module_owners = {}
    for component in sorted(components, key=lambda c: c.tag_name):
        if config.is_excluded(component.tag_name):
            logger.info("Skipping excluded component <%s>", component.tag_name)
            continue

        model = config.get_model(component.tag_name)
        result = generate_code(generator, component, model)

        # Tags like "my--button" and "my-button" share one module file
        module_name = generator.module_name(component)
        owner = module_owners.setdefault(module_name, component.tag_name)
        if owner != component.tag_name:
            warning = (
                f"<{component.tag_name}> and <{owner}> both generate module "
                f"'{module_name}'; the later one overwrites the earlier"
            )
            logger.warning(warning)
            result.warnings.append(warning)

        results.append(result)

    return results


def generate_wrapper(
    component: ComponentMetadata,
    model: Optional[ModelConfig] = None,
    target: str = "vue",
    config: Optional[GeneratorConfig] = None,
) -> List[str]:
    """
    Generate the wrapper module lines for a single component.

    Raises:
        GeneratorError: If generation fails
    """
    generator = get_generator(target, config)
    result = generate_code(generator, component, model)

    if not result.success:
        raise GeneratorError(result.error_message) from result.exception
    return result.lines


__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "ComponentMetadata",
    "Property",
    "Event",
    "Method",
    "ModelConfig",
    "SchemaError",
    "GeneratorConfig",
    "ConfigError",
    "ConfigManager",
    "convert_metadata_document",
    "generate_code",
    "generate_components",
    "generate_wrapper",
    "get_generator",
    "get_target_info",
    "list_supported_targets",
    "load_config",
]

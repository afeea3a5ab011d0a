"""
Generator registry system for managing available wrapper generators.

Provides dynamic registration and instantiation of target generators.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Type, Union

from .core.config import GeneratorConfig, load_config
from .core.generator import CodeGenerator


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class GeneratorRegistry:
    """Registry for managing available wrapper generators."""

    def __init__(self):
        """Initialize empty registry."""
        self._generators: Dict[str, Type[CodeGenerator]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        target: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a generator for a target framework.

        Args:
            target: Primary target name (e.g., 'vue')
            generator_class: Generator class implementing CodeGenerator
            aliases: Alternative names for this target
            replace: If True, replace existing registration. If False, skip if exists.

        Raises:
            RegistryError: If generator class is invalid or conflicts exist
        """
        if not issubclass(generator_class, CodeGenerator):
            raise RegistryError("Generator class must inherit from CodeGenerator")

        target_key = target.lower()

        if target_key in self._generators and not replace:
            # Already registered, skip silently
            return

        alias_keys = [a.lower() for a in aliases or [] if a.lower() != target_key]

        if not replace:
            for alias_key in alias_keys:
                if alias_key in self._generators:
                    raise RegistryError(
                        f"Alias '{alias_key}' conflicts with existing primary target"
                    )
                if alias_key in self._aliases and self._aliases[alias_key] != target_key:
                    raise RegistryError(
                        f"Alias '{alias_key}' already points to '{self._aliases[alias_key]}'"
                    )

        self._generators[target_key] = generator_class
        for alias_key in alias_keys:
            self._aliases[alias_key] = target_key

    def unregister(self, target: str):
        """Unregister a generator and its aliases."""
        target_key = target.lower()
        self._generators.pop(target_key, None)

        for alias in [a for a, t in self._aliases.items() if t == target_key]:
            del self._aliases[alias]

    def get_generator_class(self, target: str) -> Type[CodeGenerator]:
        """
        Get generator class for a target.

        Raises:
            RegistryError: If target not found
        """
        target_key = target.lower()

        if target_key in self._generators:
            return self._generators[target_key]

        if target_key in self._aliases:
            return self._generators[self._aliases[target_key]]

        raise RegistryError(
            f"No generator registered for target: {target}. "
            f"Available: {', '.join(self.list_targets())}"
        )

    def create_generator(
        self,
        target: str,
        config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
    ) -> CodeGenerator:
        """
        Create generator instance for a target.

        Args:
            target: Target name or alias
            config: Configuration as GeneratorConfig, dict, or file path

        Returns:
            Configured generator instance

        Raises:
            RegistryError: If generator creation fails
        """
        generator_class = self.get_generator_class(target)
        primary = self.resolve(target)

        try:
            if isinstance(config, GeneratorConfig):
                final_config = config
            elif isinstance(config, (str, Path)):
                final_config = load_config(primary, config_file=config)
            elif isinstance(config, dict):
                final_config = load_config(primary, custom_config=config)
            elif config is None:
                final_config = load_config(primary)
            else:
                raise RegistryError(f"Invalid config type: {type(config)}")

            return generator_class(final_config)

        except Exception as e:
            raise RegistryError(f"Failed to create {target} generator: {e}") from e

    def resolve(self, target: str) -> str:
        """Return the primary name for a target or alias."""
        target_key = target.lower()
        return self._aliases.get(target_key, target_key)

    def list_targets(self) -> List[str]:
        """Get list of registered primary target names."""
        return sorted(self._generators.keys())

    def get_aliases_for_target(self, target: str) -> List[str]:
        """Get all aliases for a specific target."""
        target_key = target.lower()
        return sorted(alias for alias, t in self._aliases.items() if t == target_key)

    def is_supported(self, target: str) -> bool:
        """Check if target is supported (by name or alias)."""
        target_key = target.lower()
        return target_key in self._generators or target_key in self._aliases

    def get_target_info(self, target: str) -> Dict[str, Any]:
        """
        Get information about a registered target.

        Raises:
            RegistryError: If target not found
        """
        generator_class = self.get_generator_class(target)
        target_key = self.resolve(target)

        temp_generator = generator_class(load_config(target_key))

        return {
            "name": temp_generator.target_name,
            "class": generator_class.__name__,
            "file_extension": temp_generator.file_extension,
            "aliases": self.get_aliases_for_target(target_key),
            "module": generator_class.__module__,
        }


# Global registry instance - created once
_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Get the global generator registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
        _auto_register_generators(_global_registry)
    return _global_registry


def _auto_register_generators(registry: GeneratorRegistry):
    """Register the built-in generators with their aliases."""
    from .languages.vue import VueGenerator

    registry.register("vue", VueGenerator, aliases=["vue2"])


# Public API functions using the global registry


def get_generator(
    target: str = "vue",
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
) -> CodeGenerator:
    """Get generator instance from global registry."""
    return get_registry().create_generator(target, config)


def list_supported_targets() -> List[str]:
    """List all supported targets from global registry."""
    return get_registry().list_targets()


def is_target_supported(target: str) -> bool:
    """Check if target is supported by global registry."""
    return get_registry().is_supported(target)


def get_target_info(target: str) -> Dict[str, Any]:
    """Get information about a supported target."""
    return get_registry().get_target_info(target)

"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .naming import is_identifier, make_indent_unit
from .schema import ModelConfig, SchemaError


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class GeneratorConfig:
    """Base configuration for wrapper generators."""

    # Output settings
    output_dir: str = "proxies"
    index_file: Optional[str] = "index.ts"

    # Code style settings
    indent_size: int = 2
    use_tabs: bool = False

    # Component selection
    exclude_components: List[str] = field(default_factory=list)

    # Two-way binding per tag: {"my-input": {"propName": ..., "eventName": ...}}
    model_config: Dict[str, Dict[str, str]] = field(default_factory=dict)

    # Custom settings (target-specific)
    custom: Dict[str, Any] = field(default_factory=dict)

    @property
    def indent_unit(self) -> str:
        return make_indent_unit(self.indent_size, self.use_tabs)

    def is_excluded(self, tag_name: str) -> bool:
        """Check whether a tag is excluded from generation."""
        return tag_name in self.exclude_components

    def get_model(self, tag_name: str) -> Optional[ModelConfig]:
        """
        Resolve the two-way binding configuration for a tag.

        Raises:
            ConfigError: If the configured entry is malformed or incomplete
        """
        entry = self.model_config.get(tag_name)
        if entry is None:
            return None
        try:
            return ModelConfig.from_dict(entry)
        except SchemaError as e:
            raise ConfigError(f"Invalid model config for '{tag_name}': {e}") from e


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load default configurations for supported targets."""
        self._configs["vue"] = {
            "output_dir": "proxies",
            "index_file": "index.ts",
            "indent_size": 2,
            "custom": {
                "ref_name": "childWebComponent",
                "event_prefix": "on_",
                "decorator_package": "vue-property-decorator",
            },
        }

    def get_config(
        self,
        target: str = "vue",
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Get complete configuration for a target.

        Args:
            target: Target framework name
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration for the target
        """
        # Start with defaults
        base_config = json.loads(json.dumps(self._configs.get(target, {})))

        # Load from file if provided
        if config_file:
            self._merge(base_config, self._load_config_file(config_file))

        # Apply custom overrides
        if custom_config:
            self._merge(base_config, custom_config)

        return self._dict_to_config(base_config)

    @staticmethod
    def _merge(base: Dict[str, Any], overrides: Dict[str, Any]):
        """Merge overrides into base, combining the ``custom`` dictionaries."""
        for key, value in overrides.items():
            if key == "custom" and isinstance(value, dict):
                base.setdefault("custom", {}).update(value)
            else:
                base[key] = value

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        # Extract known fields
        known_fields = {f.name for f in GeneratorConfig.__dataclass_fields__.values()}

        # Accept the camelCase spellings used by JS build configs
        aliases = {
            "modelConfig": "model_config",
            "excludeComponents": "exclude_components",
            "outputDir": "output_dir",
            "indexFile": "index_file",
        }

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            key = aliases.get(key, key)
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        # Unknown keys end up in the custom dict
        if custom_args:
            existing_custom = dict(config_args.get("custom", {}))
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        return GeneratorConfig(**config_args)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = asdict(config)
        # Flatten custom settings back to the top level
        config_dict.update(config_dict.pop("custom"))

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def validate_config(self, config: GeneratorConfig) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        if config.indent_size < 1 and not config.use_tabs:
            warnings.append(f"Invalid indent_size: {config.indent_size}")

        for key in ("ref_name", "event_prefix"):
            value = config.custom.get(key)
            if value is not None and not is_identifier(str(value)):
                warnings.append(f"Invalid {key}: {value!r} is not an identifier")

        for tag_name, entry in config.model_config.items():
            if not isinstance(entry, dict):
                warnings.append(f"Model config for '{tag_name}' must be an object")
                continue
            try:
                ModelConfig.from_dict(entry)
            except SchemaError as e:
                warnings.append(str(e))

        for tag_name in config.exclude_components:
            if tag_name in config.model_config:
                warnings.append(
                    f"Component '{tag_name}' is excluded but has a model config"
                )

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    target: str = "vue",
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        target: Target framework name
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration for the target
    """
    manager = get_config_manager()
    return manager.get_config(target, custom_config, config_file)

"""
Vue-specific configuration and validation.

Resolves the literals the emitters need from the generic configuration.
"""

from dataclasses import dataclass

from ...core.config import ConfigError, GeneratorConfig
from ...core.naming import DEFAULT_INDENT, is_identifier

REF_NAME = "childWebComponent"
EVENT_PREFIX = "on_"
DECORATOR_PACKAGE = "vue-property-decorator"
VUE_PACKAGE = "vue"


@dataclass(frozen=True)
class VueConfig:
    """Literals used when emitting a Vue class-component wrapper."""

    ref_name: str = REF_NAME
    event_prefix: str = EVENT_PREFIX
    decorator_package: str = DECORATOR_PACKAGE
    vue_package: str = VUE_PACKAGE
    indent: str = DEFAULT_INDENT

    def __post_init__(self):
        if not is_identifier(self.ref_name):
            raise ConfigError(f"Invalid ref_name: {self.ref_name!r}")
        if not is_identifier(self.event_prefix):
            raise ConfigError(f"Invalid event_prefix: {self.event_prefix!r}")
        if not self.decorator_package:
            raise ConfigError("decorator_package cannot be empty")

    @classmethod
    def from_generator_config(cls, config: GeneratorConfig) -> "VueConfig":
        """Build Vue literals from the generic configuration."""
        custom = config.custom
        return cls(
            ref_name=custom.get("ref_name", REF_NAME),
            event_prefix=custom.get("event_prefix", EVENT_PREFIX),
            decorator_package=custom.get("decorator_package", DECORATOR_PACKAGE),
            vue_package=custom.get("vue_package", VUE_PACKAGE),
            indent=config.indent_unit,
        )

"""
Vue wrapper generator implementation.

Generates Vue 2 class components (vue-property-decorator) wrapping
custom elements.
"""

from typing import List, Optional

from ....logging_config import get_logger
from ...core.config import GeneratorConfig
from ...core.fragments import Block
from ...core.generator import CodeGenerator
from ...core.naming import is_identifier, to_identifier_case
from ...core.schema import ComponentMetadata, ModelConfig
from .config import VueConfig
from .emitters import (
    define_events,
    define_methods,
    define_model,
    define_props,
    define_ref,
    define_render,
)

logger = get_logger(__name__)


class VueGenerator(CodeGenerator):
    """Code generator for Vue class-component wrappers."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Vue generator with configuration."""
        super().__init__(config)
        self.vue_config = VueConfig.from_generator_config(self.config)

    @property
    def target_name(self) -> str:
        """Return the target name."""
        return "vue"

    @property
    def file_extension(self) -> str:
        """Return TypeScript file extension."""
        return ".ts"

    def module_name(self, component: ComponentMetadata) -> str:
        """Wrapper modules are named after their class."""
        return to_identifier_case(component.tag_name)

    def generate_component(
        self, component: ComponentMetadata, model: Optional[ModelConfig] = None
    ) -> List[str]:
        """Generate the wrapper module for one component."""
        vue = self.vue_config
        component_name = to_identifier_case(component.tag_name)

        model_block = define_model(component, model)
        if model is not None and model_block.is_empty():
            logger.debug("Model for <%s> did not resolve", component.tag_name)

        # The model-bound property must not be declared twice
        properties = component.properties
        if not model_block.is_empty():
            properties = tuple(p for p in properties if p.name != model.prop_name)
        props_block = define_props(properties)

        body = Block.nested(
            model_block,
            define_ref(component.tag_name, vue.ref_name),
            props_block,
            define_methods(component.methods, vue.ref_name),
            define_events(component.events, vue.event_prefix),
            define_render(component, vue.ref_name, vue.event_prefix),
        )

        decorators = ["Vue", "Component", "Ref"]
        if not props_block.is_empty():
            decorators.append("Prop")
        if not model_block.is_empty():
            decorators.append("Model")

        module = Block.of(
            f'import {{ CreateElement, VNode }} from "{vue.vue_package}";',
            f'import {{ {", ".join(decorators)} }} from "{vue.decorator_package}";',
            "",
            "@Component",
            f"export default class {component_name} extends Vue {{",
            body,
            "}",
            "",
        )

        logger.debug(
            "Generated <%s> as %s (%d properties, %d events, %d methods)",
            component.tag_name,
            component_name,
            len(component.properties),
            len(component.events),
            len(component.methods),
        )
        return module.flatten(vue.indent)

    def validate_component(
        self, component: ComponentMetadata, model: Optional[ModelConfig] = None
    ) -> List[str]:
        """Validate metadata for Vue generation."""
        warnings = super().validate_component(component, model)

        if not to_identifier_case(component.tag_name).isidentifier():
            warnings.append(
                f"Tag <{component.tag_name}> does not produce a valid class name"
            )

        prefix = self.vue_config.event_prefix
        members = [p.name for p in component.properties]
        members += [m.name for m in component.methods]
        for name in members:
            if not is_identifier(name):
                warnings.append(f"Member '{name}' of <{component.tag_name}> is not an identifier")
            if name.startswith(prefix):
                warnings.append(
                    f"Member '{name}' of <{component.tag_name}> may collide with "
                    f"event listeners prefixed '{prefix}'"
                )

        return warnings

"""
Base generator interface for all wrapper generation targets.

Defines the contract that all framework generators must implement.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ...logging_config import get_logger
from .config import GeneratorConfig
from .schema import ComponentMetadata, ModelConfig

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for all wrapper generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()

    @property
    @abstractmethod
    def target_name(self) -> str:
        """Return the name of the target framework (e.g., 'vue')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.ts')."""
        pass

    @abstractmethod
    def generate_component(
        self, component: ComponentMetadata, model: Optional[ModelConfig] = None
    ) -> List[str]:
        """
        Generate the wrapper module for one component.

        Args:
            component: Metadata of the wrapped element
            model: Optional two-way binding configuration

        Returns:
            Ordered lines of the generated module
        """
        pass

    def module_name(self, component: ComponentMetadata) -> str:
        """Return the file stem used for a component's wrapper module."""
        return component.tag_name

    def validate_component(
        self, component: ComponentMetadata, model: Optional[ModelConfig] = None
    ) -> List[str]:
        """
        Validate component metadata for structural issues.

        Targets should override this to add target-specific validation.

        Args:
            component: Metadata to validate
            model: Optional two-way binding configuration

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        if model is not None:
            if component.find_property(model.prop_name) is None:
                warnings.append(
                    f"Model property '{model.prop_name}' not found on "
                    f"<{component.tag_name}>; two-way binding skipped"
                )
            if component.find_event(model.event_name) is None:
                warnings.append(
                    f"Model event '{model.event_name}' not found on "
                    f"<{component.tag_name}>; two-way binding skipped"
                )

        for kind, members in (
            ("property", component.properties),
            ("event", component.events),
            ("method", component.methods),
        ):
            seen = set()
            for member in members:
                if member.name in seen:
                    warnings.append(
                        f"Duplicate {kind} '{member.name}' on <{component.tag_name}>"
                    )
                seen.add(member.name)

        return warnings


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        component: ComponentMetadata,
        lines: List[str],
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            component: Component the lines were generated for
            lines: Generated module lines
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.component = component
        self.lines = lines
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @property
    def code(self) -> str:
        """Generated module as a single string."""
        return "\n".join(self.lines)

    @classmethod
    def error(
        cls, component: ComponentMetadata, message: str, exception: Exception = None
    ) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(component, lines=[])
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    generator: CodeGenerator,
    component: ComponentMetadata,
    model: Optional[ModelConfig] = None,
) -> GenerationResult:
    """
    Generate one wrapper module with error handling.

    Args:
        generator: Code generator instance
        component: Metadata of the wrapped element
        model: Optional two-way binding configuration

    Returns:
        GenerationResult with lines, warnings, and metadata
    """
    try:
        warnings = generator.validate_component(component, model)
        for warning in warnings:
            logger.warning(warning)

        lines = generator.generate_component(component, model)

        metadata = {
            "target": generator.target_name,
            "tag_name": component.tag_name,
            "module_name": generator.module_name(component),
            "file_extension": generator.file_extension,
            "property_count": len(component.properties),
            "event_count": len(component.events),
            "method_count": len(component.methods),
            "has_model": bool(
                model
                and component.find_property(model.prop_name)
                and component.find_event(model.event_name)
            ),
        }

        return GenerationResult(component, lines, warnings, metadata)

    except Exception as e:
        logger.error("Generation failed for <%s>: %s", component.tag_name, e)
        return GenerationResult.error(
            component, f"Code generation failed: {e}", exception=e
        )

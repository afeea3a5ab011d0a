"""
Template engine wrapper for code generation.

Provides a simple interface for Jinja2 template rendering
with common utilities for code generation.
"""

from typing import Any, Dict, Optional

from jinja2 import DictLoader, Environment, select_autoescape


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(self, templates: Optional[Dict[str, str]] = None):
        """
        Initialize template engine.

        Args:
            templates: In-memory templates keyed by name
        """
        self._env = None
        self._setup_environment(dict(templates or {}))

    def _setup_environment(self, templates: Dict[str, str]):
        """Setup Jinja2 environment with code generation utilities."""
        self._env = Environment(
            loader=DictLoader(templates),
            autoescape=select_autoescape(["html", "xml"], default_for_string=False),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

        # Add custom filters for code generation
        self._env.filters["comment"] = self._comment_filter

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template file
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except Exception as e:
            raise TemplateError(
                f"Failed to render template {template_name}: {e}"
            ) from e

    def add_template(self, name: str, content: str):
        """
        Add an in-memory template.

        Args:
            name: Template name
            content: Template content
        """
        self._env.loader.mapping[name] = content

    # Template filters for code generation

    def _comment_filter(self, value: str, style: str = "//") -> str:
        """Add comment markers to each line."""
        lines = str(value).split("\n")
        return "\n".join(f"{style} {line}" if line.strip() else line for line in lines)


# Built-in templates for common patterns
INDEX_TEMPLATE = """\
{{ header | comment }}
{% for name in component_names %}
export { default as {{ name }} } from "./{{ name }}";
{% endfor %}
"""

INDEX_HEADER = """\
auto-generated Vue proxies
do not edit by hand, regenerate with wrapgen"""

# Default template engine instance
_default_engine = None


def get_default_template_engine() -> TemplateEngine:
    """Get the default template engine instance."""
    global _default_engine
    if _default_engine is None:
        _default_engine = TemplateEngine()

        # Add built-in templates
        _default_engine.add_template("index.ts.j2", INDEX_TEMPLATE)

    return _default_engine


def render_index(component_names: list, header: str = INDEX_HEADER) -> str:
    """
    Render the barrel module re-exporting every generated wrapper.

    Args:
        component_names: PascalCase wrapper class names
        header: Comment text placed at the top of the file

    Returns:
        Rendered index module
    """
    engine = get_default_template_engine()
    context = {"component_names": component_names, "header": header}
    return engine.render_template("index.ts.j2", context)

"""
Naming utilities for wrapper generation.

Handles tag name to identifier conversion and line indentation shared by
every emitter.
"""

import re
from typing import Iterable, List

# Separators allowed between segments of a custom element tag name
SEGMENT_SEPARATOR = re.compile(r"-+")

# Identifier shape accepted for reserved literals (handle name, prefixes)
IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

DEFAULT_INDENT = "  "


def to_identifier_case(name: str) -> str:
    """
    Convert a kebab-case name to PascalCase.

    Only the first letter of each segment is touched, so the result of a
    conversion converts to itself again.

    Args:
        name: Tag name or type name (e.g. ``my-button``, ``boolean``)

    Returns:
        PascalCase identifier (e.g. ``MyButton``, ``Boolean``)
    """
    segments = SEGMENT_SEPARATOR.split(name.strip())
    return "".join(segment[:1].upper() + segment[1:] for segment in segments if segment)


def element_interface_name(tag_name: str) -> str:
    """Return the DOM interface name generated for a custom element tag."""
    return f"HTML{to_identifier_case(tag_name)}Element"


def indent_lines(lines: Iterable[str], unit: str = DEFAULT_INDENT) -> List[str]:
    """Prefix every line with one indentation unit."""
    return [unit + line for line in lines]


def make_indent_unit(indent_size: int = 2, use_tabs: bool = False) -> str:
    """Build the indentation unit from style settings."""
    if use_tabs:
        return "\t"
    return " " * indent_size


def is_identifier(name: str) -> bool:
    """Check whether a name can be used as a TypeScript member name."""
    return bool(name) and IDENTIFIER_PATTERN.match(name) is not None

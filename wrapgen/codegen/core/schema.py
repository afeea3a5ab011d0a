"""
Core component metadata representation for code generation.

Converts element metadata documents into a normalized internal format
that generators can work with consistently.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

# Type names meaning "no static type available"
UNTYPED_NAMES = frozenset({"unknown", "any"})


class SchemaError(Exception):
    """Exception raised for malformed component metadata."""

    pass


@dataclass(frozen=True)
class Property:
    """A bindable property of a custom element."""

    name: str
    type: str = "unknown"

    @property
    def is_untyped(self) -> bool:
        """True when no static type is available for this property."""
        return self.type.strip() in UNTYPED_NAMES


@dataclass(frozen=True)
class Event:
    """An event dispatched by a custom element."""

    name: str


@dataclass(frozen=True)
class Method:
    """An imperative method exposed by a custom element."""

    name: str


@dataclass(frozen=True)
class ModelConfig:
    """Property/event pair implementing two-way binding."""

    prop_name: str
    event_name: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ModelConfig":
        """
        Build a model configuration from ``{propName, eventName}``.

        Raises:
            SchemaError: If the entry is not an object or either name is missing
        """
        if not isinstance(data, dict):
            raise SchemaError(
                f"Model configuration must be an object with propName and eventName: {data!r}"
            )
        prop_name = data.get("propName") or data.get("prop_name")
        event_name = data.get("eventName") or data.get("event_name")
        if not prop_name or not event_name:
            raise SchemaError(
                f"Model configuration needs propName and eventName: {data!r}"
            )
        return cls(prop_name=str(prop_name), event_name=str(event_name))


@dataclass(frozen=True)
class ComponentMetadata:
    """Everything known about one custom element."""

    tag_name: str
    properties: Tuple[Property, ...] = field(default_factory=tuple)
    events: Tuple[Event, ...] = field(default_factory=tuple)
    methods: Tuple[Method, ...] = field(default_factory=tuple)

    def find_property(self, name: str) -> Optional[Property]:
        """Return the first property declared with ``name``."""
        return next((prop for prop in self.properties if prop.name == name), None)

    def find_event(self, name: str) -> Optional[Event]:
        """Return the first event declared with ``name``."""
        return next((event for event in self.events if event.name == name), None)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ComponentMetadata":
        """
        Convert one metadata entry into ComponentMetadata.

        Accepts the canonical shape (``tagName``/``properties``) as well as
        Stencil ``docs-json`` entries (``tag``/``props``, events keyed by
        ``event``).

        Args:
            data: Parsed JSON object describing one component

        Returns:
            Normalized component metadata

        Raises:
            SchemaError: If the entry has no tag or an unnamed member
        """
        if not isinstance(data, dict):
            raise SchemaError(f"Component entry must be an object, got {type(data).__name__}")

        tag_name = data.get("tagName") or data.get("tag")
        if not tag_name:
            raise SchemaError(f"Component entry has no tag name: {data!r}")

        properties = tuple(
            Property(name=_member_name(entry, tag_name, "property"), type=_type_name(entry))
            for entry in data.get("properties", data.get("props", [])) or []
        )
        events = tuple(
            Event(name=_member_name(entry, tag_name, "event", keys=("name", "event")))
            for entry in data.get("events", []) or []
        )
        methods = tuple(
            Method(name=_member_name(entry, tag_name, "method"))
            for entry in data.get("methods", []) or []
        )

        return cls(
            tag_name=str(tag_name),
            properties=properties,
            events=events,
            methods=methods,
        )


def _member_name(
    entry: Any, tag_name: str, kind: str, keys: Tuple[str, ...] = ("name",)
) -> str:
    """Extract the name of a property/event/method entry."""
    if isinstance(entry, str):
        return entry

    if isinstance(entry, dict):
        for key in keys:
            if entry.get(key):
                return str(entry[key])

    raise SchemaError(f"Unnamed {kind} in component '{tag_name}': {entry!r}")


def _type_name(entry: Any) -> str:
    """Extract a property type, falling back to ``unknown``."""
    if isinstance(entry, dict):
        value = entry.get("type")
        if isinstance(value, str) and value.strip():
            return value.strip()
    return "unknown"


def convert_metadata_document(document: Any) -> List[ComponentMetadata]:
    """
    Convert a whole metadata document into component metadata.

    Args:
        document: Either a list of component entries or an object with a
            ``components`` list

    Returns:
        Components in document order
    """
    if isinstance(document, dict):
        entries = document.get("components")
        if entries is None:
            raise SchemaError("Metadata document has no 'components' list")
    else:
        entries = document

    if not isinstance(entries, list):
        raise SchemaError("Metadata components must be a list")

    return [ComponentMetadata.from_dict(entry) for entry in entries]

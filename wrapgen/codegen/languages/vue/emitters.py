"""
Emitters for the pieces of a Vue class-component wrapper.

Every function is pure: it takes metadata plus the literals it needs and
returns a Block of TypeScript lines.
"""

import json
from typing import Optional, Sequence, Tuple

from ...core.fragments import Block
from ...core.naming import element_interface_name, to_identifier_case
from ...core.schema import ComponentMetadata, Event, Method, ModelConfig, Property

ANY_TYPE = "any"


def _literal(value: str) -> str:
    """Quote a value as a TypeScript string literal."""
    return json.dumps(value)


def resolve_type(prop: Property) -> Tuple[str, Optional[str]]:
    """
    Resolve the static and runtime types of a property.

    The static type is the declared type string as written (``boolean``);
    the runtime type is its constructor name (``Boolean``).

    Returns:
        ``(static_type, runtime_type)``; runtime_type is None when the
        property has no usable type and falls back to ``any``
    """
    if prop.is_untyped:
        return ANY_TYPE, None
    return prop.type, to_identifier_case(prop.type)


def define_props(properties: Sequence[Property]) -> Block:
    """One ``@Prop`` declaration per property."""
    lines = []
    for prop in properties:
        static_type, runtime_type = resolve_type(prop)
        constraint = f"[{runtime_type}]" if runtime_type else ""
        lines.append(f"@Prop({constraint}) readonly {prop.name}!: {static_type}")
    return Block(tuple(lines))


def define_model(
    component: ComponentMetadata, model: Optional[ModelConfig]
) -> Block:
    """
    The ``@Model`` declaration for two-way binding.

    Empty when no model is configured or when either the property or the
    event is not declared by the component.
    """
    if model is None:
        return Block()

    prop = component.find_property(model.prop_name)
    event = component.find_event(model.event_name)
    if prop is None or event is None:
        return Block()

    static_type, runtime_type = resolve_type(prop)
    arguments = [_literal(event.name)]
    if runtime_type:
        arguments.append(f"{{ type: {runtime_type} }}")

    return Block.of(
        f"@Model({', '.join(arguments)}) readonly {prop.name}!: {static_type}"
    )


def define_ref(tag_name: str, ref_name: str) -> Block:
    """The handle bound to the wrapped element instance."""
    return Block.of(f"@Ref() readonly {ref_name}!: {element_interface_name(tag_name)}")


def define_methods(methods: Sequence[Method], ref_name: str) -> Block:
    """Getters delegating each method to the wrapped element."""
    return Block(
        tuple(
            f"get {method.name}() {{ return this.{ref_name}.{method.name}; }}"
            for method in methods
        )
    )


def define_events(events: Sequence[Event], event_prefix: str) -> Block:
    """Listener methods re-emitting each native event under its own name."""
    return Block(
        tuple(
            f"{event_prefix}{event.name}(eventValue: any) "
            f"{{ this.$emit({_literal(event.name)}, eventValue); }}"
            for event in events
        )
    )


def define_render(
    component: ComponentMetadata, ref_name: str, event_prefix: str
) -> Block:
    """
    The render function creating the wrapped element.

    Every property is forwarded, including a model-bound one, and every
    event is wired to its prefixed listener. Child content goes through the
    default slot.
    """
    props = Block.nested(
        *(f"{prop.name}: this.{prop.name}," for prop in component.properties)
    )
    native_on = Block.nested(
        *(
            f"{event.name}: this.{event_prefix}{event.name},"
            for event in component.events
        )
    )

    return Block.of(
        "render(createElement: CreateElement): VNode {",
        Block.nested(
            "return createElement(",
            Block.nested(
                f"{_literal(component.tag_name)},",
                "{",
                Block.nested(
                    f"ref: {_literal(ref_name)},",
                    "props: {",
                    props,
                    "},",
                    "nativeOn: {",
                    native_on,
                    "},",
                ),
                "},",
                "this.$slots.default",
            ),
            ");",
        ),
        "}",
    )

"""Tests for the individual Vue emitters."""

from __future__ import annotations

from wrapgen.codegen.core.schema import (
    ComponentMetadata,
    Event,
    Method,
    ModelConfig,
    Property,
)
from wrapgen.codegen.languages.vue.emitters import (
    define_events,
    define_methods,
    define_model,
    define_props,
    define_ref,
    define_render,
    resolve_type,
)


def test_resolve_type_for_concrete_and_untyped_properties() -> None:
    assert resolve_type(Property("a", "boolean")) == ("boolean", "Boolean")
    assert resolve_type(Property("a", "number")) == ("number", "Number")
    assert resolve_type(Property("a", "unknown")) == ("any", None)
    assert resolve_type(Property("a", "any")) == ("any", None)


def test_define_props_with_concrete_type() -> None:
    lines = define_props([Property("disabled", "boolean")]).flatten()
    assert lines == ["@Prop([Boolean]) readonly disabled!: boolean"]


def test_define_props_untyped_has_no_constraint() -> None:
    lines = define_props([Property("config", "unknown"), Property("data", "any")]).flatten()
    assert lines == [
        "@Prop() readonly config!: any",
        "@Prop() readonly data!: any",
    ]


def test_define_props_keeps_order_and_duplicates() -> None:
    props = [Property("b", "string"), Property("a", "number"), Property("b", "string")]
    lines = define_props(props).flatten()
    assert [line.split(" readonly ")[1].split("!")[0] for line in lines] == ["b", "a", "b"]


def test_define_model_resolved(my_input: ComponentMetadata) -> None:
    lines = define_model(my_input, ModelConfig("value", "myChange")).flatten()
    assert lines == ['@Model("myChange", { type: String }) readonly value!: string']


def test_define_model_untyped_property(my_input: ComponentMetadata) -> None:
    lines = define_model(my_input, ModelConfig("config", "myChange")).flatten()
    assert lines == ['@Model("myChange") readonly config!: any']


def test_define_model_skips_unresolved_names(my_input: ComponentMetadata) -> None:
    assert define_model(my_input, ModelConfig("missing", "myChange")).is_empty()
    assert define_model(my_input, ModelConfig("value", "missing")).is_empty()
    assert define_model(my_input, None).is_empty()


def test_define_model_uses_first_duplicate() -> None:
    component = ComponentMetadata(
        tag_name="dup-el",
        properties=(Property("value", "string"), Property("value", "number")),
        events=(Event("change"),),
    )
    lines = define_model(component, ModelConfig("value", "change")).flatten()
    assert lines == ['@Model("change", { type: String }) readonly value!: string']


def test_define_ref() -> None:
    lines = define_ref("my-button", "childWebComponent").flatten()
    assert lines == ["@Ref() readonly childWebComponent!: HTMLMyButtonElement"]


def test_define_methods_delegate_through_handle() -> None:
    lines = define_methods([Method("focus"), Method("scrollToTop")], "el").flatten()
    assert lines == [
        "get focus() { return this.el.focus; }",
        "get scrollToTop() { return this.el.scrollToTop; }",
    ]


def test_define_events_use_prefix() -> None:
    lines = define_events([Event("btnClick")], "on_").flatten()
    assert lines == [
        'on_btnClick(eventValue: any) { this.$emit("btnClick", eventValue); }'
    ]


def test_define_render_for_empty_component() -> None:
    lines = define_render(ComponentMetadata("empty-el"), "ref", "on_").flatten()
    assert lines == [
        "render(createElement: CreateElement): VNode {",
        "  return createElement(",
        '    "empty-el",',
        "    {",
        '      ref: "ref",',
        "      props: {",
        "      },",
        "      nativeOn: {",
        "      },",
        "    },",
        "    this.$slots.default",
        "  );",
        "}",
    ]


def test_define_render_wires_every_property_and_event(my_input: ComponentMetadata) -> None:
    lines = define_render(my_input, "childWebComponent", "on_").flatten()
    assert "        value: this.value," in lines
    assert "        placeholder: this.placeholder," in lines
    assert "        config: this.config," in lines
    assert "        myChange: this.on_myChange," in lines
    assert "        myBlur: this.on_myBlur," in lines

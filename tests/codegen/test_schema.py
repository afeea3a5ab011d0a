"""Tests for wrapgen.codegen.core.schema."""

from __future__ import annotations

import pytest

from wrapgen.codegen.core.schema import (
    ComponentMetadata,
    Event,
    Method,
    ModelConfig,
    Property,
    SchemaError,
    convert_metadata_document,
)


def test_from_dict_canonical_shape() -> None:
    component = ComponentMetadata.from_dict(
        {
            "tagName": "my-button",
            "properties": [{"name": "disabled", "type": "boolean"}],
            "events": [{"name": "btnClick"}],
            "methods": [{"name": "focus"}],
        }
    )

    assert component == ComponentMetadata(
        tag_name="my-button",
        properties=(Property("disabled", "boolean"),),
        events=(Event("btnClick"),),
        methods=(Method("focus"),),
    )


def test_from_dict_docs_json_shape() -> None:
    component = ComponentMetadata.from_dict(
        {
            "tag": "my-input",
            "props": [{"name": "value", "type": "string | undefined"}, {"name": "size"}],
            "events": [{"event": "myChange", "detail": "string"}],
        }
    )

    assert component.tag_name == "my-input"
    assert component.properties == (
        Property("value", "string | undefined"),
        Property("size", "unknown"),
    )
    assert component.events == (Event("myChange"),)
    assert component.methods == ()


def test_from_dict_rejects_missing_tag() -> None:
    with pytest.raises(SchemaError):
        ComponentMetadata.from_dict({"properties": []})


def test_from_dict_rejects_unnamed_member() -> None:
    with pytest.raises(SchemaError):
        ComponentMetadata.from_dict({"tag": "x-el", "events": [{"detail": "string"}]})


def test_untyped_property_detection() -> None:
    assert Property("a").is_untyped
    assert Property("a", "any").is_untyped
    assert not Property("a", "string").is_untyped


def test_find_returns_first_declaration() -> None:
    component = ComponentMetadata(
        "x-el",
        properties=(Property("v", "string"), Property("v", "number")),
        events=(Event("e"),),
    )

    assert component.find_property("v") == Property("v", "string")
    assert component.find_event("e") == Event("e")
    assert component.find_property("missing") is None


def test_model_config_from_dict() -> None:
    assert ModelConfig.from_dict({"propName": "value", "eventName": "myChange"}) == (
        ModelConfig("value", "myChange")
    )
    with pytest.raises(SchemaError):
        ModelConfig.from_dict({"propName": "value"})
    with pytest.raises(SchemaError, match="must be an object"):
        ModelConfig.from_dict("value")


def test_convert_metadata_document_accepts_list_or_object() -> None:
    entries = [{"tag": "a-el"}, {"tag": "b-el"}]

    assert [c.tag_name for c in convert_metadata_document(entries)] == ["a-el", "b-el"]
    assert [c.tag_name for c in convert_metadata_document({"components": entries})] == [
        "a-el",
        "b-el",
    ]


def test_convert_metadata_document_rejects_other_shapes() -> None:
    with pytest.raises(SchemaError):
        convert_metadata_document({"timestamp": "now"})
    with pytest.raises(SchemaError):
        convert_metadata_document("components")

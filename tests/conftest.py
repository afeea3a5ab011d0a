from __future__ import annotations

import json
from pathlib import Path

import pytest

from wrapgen.codegen.core.schema import ComponentMetadata, Event, Method, Property


@pytest.fixture
def my_button() -> ComponentMetadata:
    """The button element used throughout the examples."""
    return ComponentMetadata(
        tag_name="my-button",
        properties=(Property("disabled", "boolean"),),
        events=(Event("btnClick"),),
        methods=(Method("focus"),),
    )


@pytest.fixture
def my_input() -> ComponentMetadata:
    """An input element with a value/change pair suitable for v-model."""
    return ComponentMetadata(
        tag_name="my-input",
        properties=(
            Property("value", "string"),
            Property("placeholder", "string"),
            Property("config", "unknown"),
        ),
        events=(Event("myChange"), Event("myBlur")),
        methods=(Method("setFocus"), Method("getInputElement")),
    )


@pytest.fixture
def metadata_file(tmp_path: Path) -> Path:
    """Write a docs-json style metadata document and return its path."""
    document = {
        "components": [
            {
                "tag": "my-input",
                "props": [
                    {"name": "value", "type": "string"},
                    {"name": "disabled", "type": "boolean"},
                ],
                "events": [{"event": "myChange"}],
                "methods": [{"name": "setFocus"}],
            },
            {
                "tag": "my-button",
                "props": [{"name": "disabled", "type": "boolean"}],
                "events": [{"event": "btnClick"}],
                "methods": [],
            },
            {"tag": "my-internal", "props": [], "events": [], "methods": []},
        ]
    }
    path = tmp_path / "components.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return path

"""Tests for wrapgen.codegen.core.naming and the fragment tree."""

from __future__ import annotations

import pytest

from wrapgen.codegen.core.fragments import Block
from wrapgen.codegen.core.naming import (
    element_interface_name,
    indent_lines,
    is_identifier,
    make_indent_unit,
    to_identifier_case,
)


@pytest.mark.parametrize(
    ("tag", "expected"),
    [
        ("my-button", "MyButton"),
        ("ion-datetime-button", "IonDatetimeButton"),
        ("boolean", "Boolean"),
        ("x", "X"),
        ("my--double", "MyDouble"),
        ("HTMLElement", "HTMLElement"),
    ],
)
def test_to_identifier_case(tag: str, expected: str) -> None:
    assert to_identifier_case(tag) == expected


def test_to_identifier_case_is_idempotent() -> None:
    for tag in ("my-button", "ion-select-option", "a-b-c"):
        once = to_identifier_case(tag)
        assert to_identifier_case(once) == once


def test_element_interface_name_distinct_for_distinct_tags() -> None:
    assert element_interface_name("my-button") == "HTMLMyButtonElement"
    assert element_interface_name("my-button") != element_interface_name("my-buttons")


def test_indent_lines_preserves_order_and_count() -> None:
    lines = ["a", "", "b"]
    assert indent_lines(lines) == ["  a", "  ", "  b"]
    assert indent_lines(lines, "\t") == ["\ta", "\t", "\tb"]


def test_indent_lines_empty_input() -> None:
    assert indent_lines([]) == []


def test_make_indent_unit() -> None:
    assert make_indent_unit(4) == "    "
    assert make_indent_unit(4, use_tabs=True) == "\t"


def test_is_identifier() -> None:
    assert is_identifier("childWebComponent")
    assert is_identifier("on_")
    assert is_identifier("$el")
    assert not is_identifier("")
    assert not is_identifier("1abc")
    assert not is_identifier("my-ref")


def test_block_flatten_applies_nested_indentation() -> None:
    block = Block.of("a {", Block.nested("b {", Block.nested("c"), "}"), "}")
    assert block.flatten() == ["a {", "  b {", "    c", "  }", "}"]
    assert block.flatten("    ") == ["a {", "    b {", "        c", "    }", "}"]


def test_block_is_empty() -> None:
    assert Block().is_empty()
    assert Block.of(Block(), Block.nested()).is_empty()
    assert not Block.of("").is_empty()
    assert not Block.of(Block.of("x")).is_empty()


def test_block_join_keeps_depth() -> None:
    joined = Block.join([Block.of("a"), Block(), Block.of("b")])
    assert joined.flatten() == ["a", "b"]

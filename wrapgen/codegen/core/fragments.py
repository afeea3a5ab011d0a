"""
Immutable text fragment tree.

Emitters return nested blocks of lines; a single flattening pass applies
indentation at the end.
"""

from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

from .naming import DEFAULT_INDENT

Fragment = Union[str, "Block"]


@dataclass(frozen=True)
class Block:
    """An ordered group of lines and nested blocks."""

    children: Tuple[Fragment, ...] = ()
    indented: bool = False

    @classmethod
    def of(cls, *children: Fragment) -> "Block":
        """Build a block at the current depth."""
        return cls(tuple(children))

    @classmethod
    def nested(cls, *children: Fragment) -> "Block":
        """Build a block one level deeper than its parent."""
        return cls(tuple(children), indented=True)

    @classmethod
    def join(cls, parts: Iterable["Block"]) -> "Block":
        """Concatenate several blocks at the same depth."""
        return cls(tuple(parts))

    def is_empty(self) -> bool:
        return not any(
            isinstance(child, str) or not child.is_empty() for child in self.children
        )

    def flatten(self, unit: str = DEFAULT_INDENT) -> List[str]:
        """Render the tree into an ordered list of lines."""
        return _flatten(self, unit, "")


def _flatten(block: Block, unit: str, prefix: str) -> List[str]:
    if block.indented:
        prefix += unit

    lines = []
    for child in block.children:
        if isinstance(child, Block):
            lines.extend(_flatten(child, unit, prefix))
        else:
            lines.append(prefix + child)
    return lines

"""Depth-first search over nested block trees."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Iterator, List, Protocol, Sequence, TypeVar


class Node(Protocol):
    @property
    def children(self) -> Sequence["Node"]:
        ...


N = TypeVar("N", bound=Node)


def find_blocks(root: N, predicate: Callable[[N], bool]) -> List[N]:
    """Return matching descendants of ``root`` in document order.

    The root itself is never matched. A matching node's own subtree is not
    searched.
    """

    found: List[N] = []
    for child in root.children:
        if predicate(child):
            found.append(child)
        else:
            found.extend(find_blocks(child, predicate))
    return found


class ParsedBlock:
    """Adapter exposing a parsed block mapping as a :class:`Node`."""

    __slots__ = ("data",)

    def __init__(self, data: Mapping[str, Any]):
        self.data = data if isinstance(data, Mapping) else {}

    @property
    def name(self) -> str | None:
        return self.data.get("blockName")

    @property
    def attrs(self) -> Mapping[str, Any]:
        attrs = self.data.get("attrs")
        return attrs if isinstance(attrs, Mapping) else {}

    @property
    def children(self) -> List["ParsedBlock"]:
        inner = self.data.get("innerBlocks")
        if not isinstance(inner, (list, tuple)):
            return []
        return [ParsedBlock(block) for block in inner if isinstance(block, Mapping)]

    def iter_tree(self) -> Iterator["ParsedBlock"]:
        yield self
        for child in self.children:
            yield from child.iter_tree()

    def __repr__(self) -> str:
        return f"ParsedBlock({self.name!r})"


def named(block_name: str) -> Callable[[ParsedBlock], bool]:
    return lambda block: block.name == block_name


__all__ = ["Node", "find_blocks", "ParsedBlock", "named"]

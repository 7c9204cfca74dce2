"""Structured text nodes.

The assembler composes the output as a tree of nodes and serializes it once
at the end. Nodes carry their own indentation, so ``render()`` is a plain
concatenation.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol


class Node(Protocol):
    def render(self) -> str: ...


@dataclass(frozen=True, slots=True)
class Text:
    """Literal text."""

    value: str

    def render(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Lines:
    """Lines joined by newlines, each prefixed with ``indent``."""

    lines: Sequence[str]
    indent: str = ""

    def render(self) -> str:
        return "\n".join(f"{self.indent}{line}" for line in self.lines)


@dataclass(frozen=True, slots=True)
class Join:
    """Children joined by ``separator``."""

    children: Sequence[Node]
    separator: str = "\n"

    def render(self) -> str:
        return self.separator.join(child.render() for child in self.children)


@dataclass(frozen=True, slots=True)
class Block:
    """``opening`` line, body, ``closing`` line, one per line.

    An empty body still leaves its own (empty) line.
    """

    opening: str
    body: Node
    closing: str

    def render(self) -> str:
        return f"{self.opening}\n{self.body.render()}\n{self.closing}"


def lines_before(prefix: Sequence[str], node: Node, indent: str) -> Node:
    """Place comment lines above ``node``, both at the same indentation."""
    if not prefix:
        return node
    return Join([Lines(prefix, indent), node])

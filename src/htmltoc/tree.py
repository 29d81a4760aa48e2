"""Fold an ordered heading list into a nested heading tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from htmltoc.schemas import Heading, HeadingNode


@dataclass
class _ArenaEntry:
    heading: Heading
    children: list[int] = field(default_factory=list)


def build_heading_tree(headings: Iterable[Heading]) -> tuple[list[HeadingNode], int]:
    """Build a heading forest with a level-aware stack.

    A heading closes every open node whose level is greater than or equal to
    its own, then attaches under whatever remains on top of the stack. Equal
    levels therefore become siblings, never parent and child.

    Nodes are kept in a flat arena and the stack holds arena indices; the
    nested ``HeadingNode`` models are materialised once the pass is done.

    Returns:
        Tuple of (root nodes, number of headings folded into the tree).
    """
    arena: list[_ArenaEntry] = []
    roots: list[int] = []
    stack: list[int] = []

    for heading in headings:
        while stack and arena[stack[-1]].heading.level >= heading.level:
            stack.pop()

        arena.append(_ArenaEntry(heading=heading))
        position = len(arena) - 1

        if stack:
            arena[stack[-1]].children.append(position)
        else:
            roots.append(position)

        stack.append(position)

    return [_materialise(arena, position) for position in roots], len(arena)


def _materialise(arena: list[_ArenaEntry], position: int) -> HeadingNode:
    entry = arena[position]
    return HeadingNode(
        title=entry.heading.text,
        id=entry.heading.id,
        level=entry.heading.level,
        children=[_materialise(arena, child) for child in entry.children],
    )


def flatten_tree(nodes: list[HeadingNode], depth: int = 0) -> list[tuple[HeadingNode, int]]:
    """
    Flatten tree back to list with indent depth.

    Returns list of (node, depth) tuples in depth-first order.
    """
    result: list[tuple[HeadingNode, int]] = []
    for node in nodes:
        result.append((node, depth))
        result.extend(flatten_tree(node.children, depth + 1))
    return result


def count_nodes(nodes: Iterable[HeadingNode]) -> int:
    """Count total nodes in the tree."""
    total = 0
    for node in nodes:
        total += 1
        total += count_nodes(node.children)
    return total

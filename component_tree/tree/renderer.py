"""Markmap Markdown and JSON rendering for component trees."""

from __future__ import annotations

import json
from datetime import datetime, timezone

from ..models import UsageGraph

FRONT_MATTER = (
    "---\n"
    "title: Component Tree\n"
    "markmap:\n"
    "  colorFreezeLevel: 4\n"
    "---\n\n"
)


def render_markdown(graph: UsageGraph, roots: list[str]) -> str:
    """Render one section per root as a markmap-ready Markdown document."""
    sections = [FRONT_MATTER]
    for root in sorted(roots):
        sections.append(f"## {root}\n\n")
        sections.append(render_subtree(graph, root) + "\n")
    return "".join(sections)


def render_subtree(
    graph: UsageGraph,
    node: str,
    indent: int = 0,
    visited: set[str] | None = None,
) -> str:
    """Recursively render a node and its children as a nested list.

    visited holds the names on the path from the root only, so a node that
    reappears below itself is listed once more but not expanded.
    """
    if visited is None:
        visited = set()
    lines = "  " * indent + f"- {node}\n"
    if node in visited:
        return lines
    visited.add(node)

    for child in sorted(graph.get(node, ())):
        lines += render_subtree(graph, child, indent + 1, set(visited))
    return lines


def render_json(graph: UsageGraph, roots: list[str]) -> str:
    """Render the usage graph and its roots as a JSON string."""
    output = {
        "generated_at": datetime.now(timezone.utc).isoformat(timespec="seconds"),
        "total_components": len(graph),
        "roots": sorted(roots),
        "graph": {name: sorted(children) for name, children in sorted(graph.items())},
    }
    return json.dumps(output, indent=2)

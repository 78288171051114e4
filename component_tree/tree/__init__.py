"""Component discovery, usage graph building and tree rendering."""

from .discovery import (
    build_graph,
    build_usage_graph,
    collect_component_files,
    compute_in_degree,
    extract_component_name,
    find_roots,
)
from .renderer import render_json, render_markdown, render_subtree

__all__ = [
    "build_graph",
    "build_usage_graph",
    "collect_component_files",
    "compute_in_degree",
    "extract_component_name",
    "find_roots",
    "render_json",
    "render_markdown",
    "render_subtree",
]

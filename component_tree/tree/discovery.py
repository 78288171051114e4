"""Component discovery and usage graph building."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from pathlib import Path

from ..models import ComponentFile, ScanConfig, UsageGraph
from ..shared.jsx_parser import JsxParser
from ..utils.file_utils import find_component_files, get_file_content

_parser = JsxParser()


def collect_component_files(
    directory: Path, include_dirs: Iterable[str] = ()
) -> list[Path]:
    """Find component files under directory, or only under include_dirs."""
    main_dir = Path(directory).resolve()
    include_dirs = list(include_dirs)
    if not include_dirs:
        return find_component_files(main_dir)

    results: list[Path] = []
    for inc in include_dirs:
        target_dir = (main_dir / inc).resolve()
        if target_dir.is_dir():
            results.extend(find_component_files(target_dir))
        else:
            print(
                f"Warning: Include directory '{inc}' does not exist or is not a directory.",
                file=sys.stderr,
            )
    return results


def extract_component_name(file_path: Path) -> str:
    """Derive the component name from the file name."""
    return Path(file_path).stem


def build_usage_graph(
    components: Iterable[ComponentFile],
    ignore_libs: Iterable[str] = (),
    project_only: bool = False,
) -> UsageGraph:
    """Map each component to the set of components it renders.

    Components sharing a name collapse into one node; the last file wins.
    """
    components = list(components)
    ignore_libs = tuple(ignore_libs)
    known_names = {component.name for component in components}

    graph: UsageGraph = {}
    for component in components:
        content = get_file_content(component.path)
        used = _parser.extract_used_components(content, ignore_libs)
        if project_only:
            used = {name for name in used if name in known_names}
        graph[component.name] = used
    return graph


def build_graph(config: ScanConfig) -> UsageGraph | None:
    """Scan the configured directory and build its usage graph."""
    files = collect_component_files(config.directory, config.include_dirs)
    if not files:
        return None

    components = [
        ComponentFile(path=path, name=extract_component_name(path))
        for path in files
    ]
    return build_usage_graph(components, config.ignore_libs, config.project_only)


def compute_in_degree(graph: UsageGraph) -> dict[str, int]:
    """Count how many components render each node."""
    in_degree = {name: 0 for name in graph}
    for children in graph.values():
        for child in children:
            in_degree[child] = in_degree.get(child, 0) + 1
    return in_degree


def find_roots(graph: UsageGraph) -> list[str]:
    """Return the components no other component renders, sorted by name."""
    return sorted(
        name for name, degree in compute_in_degree(graph).items() if degree == 0
    )

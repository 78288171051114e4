#!/usr/bin/env python3
"""
Main entry point for component tree generation.

Usage:
    component-tree [directory] [--ignore-libs LIB ...] [--project-only] [--in DIR ...]
    python3 -m component_tree.main [directory]
"""

import argparse
import sys
from typing import List, Optional

from .models import DEFAULT_OUTPUT_FILE, OUTPUT_FORMATS, ScanConfig
from .tree.discovery import build_graph, find_roots
from .tree.renderer import render_json, render_markdown


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Generate a markmap outline of the React component hierarchy."
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Root directory of the React project (default: .)",
    )
    parser.add_argument(
        "--ignore-libs",
        nargs="+",
        default=[],
        metavar="LIB",
        help="List of library names to ignore components from",
    )
    parser.add_argument(
        "--project-only",
        action="store_true",
        help="Only include components defined in the project",
    )
    parser.add_argument(
        "--in",
        dest="include_dirs",
        nargs="+",
        default=[],
        metavar="DIR",
        help="List of directories to scan (relative to the project directory)",
    )
    parser.add_argument(
        "--output", "-o",
        default=DEFAULT_OUTPUT_FILE,
        help=f"Output file for the markmap document (default: {DEFAULT_OUTPUT_FILE})",
    )
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default="markmap",
        help="Output format; json is printed to stdout (default: markmap)",
    )
    return parser.parse_args(argv)


def run(config: ScanConfig) -> int:
    """Build the component graph and write the requested output. Returns the exit code."""
    if not config.directory.is_dir():
        print(f"Error: path '{config.directory}' does not exist", file=sys.stderr)
        return 1

    graph = build_graph(config)
    if graph is None:
        print("No component files found in the given directory.", file=sys.stderr)
        return 1

    roots = find_roots(graph)

    if config.output_format == "json":
        print(render_json(graph, roots))
        return 0

    try:
        with open(config.output, 'w', encoding='utf-8') as f:
            f.write(render_markdown(graph, roots))
    except OSError as e:
        print(f"Error: cannot write '{config.output}': {e}", file=sys.stderr)
        return 1
    print(f"Generated {config.output} ✅")
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for component tree generation."""
    args = parse_args(argv)
    sys.exit(run(ScanConfig.from_args(args)))


if __name__ == "__main__":
    main()

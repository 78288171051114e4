#!/usr/bin/env python3
"""
Data models for component tree generation.

Contains the data structures passed between the scanning, graph and
rendering steps.
"""

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Set, Tuple


COMPONENT_EXTENSIONS = (".jsx", ".tsx")
DEFAULT_OUTPUT_FILE = "componentsTree.mm.md"
OUTPUT_FORMATS = ("markmap", "json")

# Component name -> names of the components it renders
UsageGraph = Dict[str, Set[str]]


@dataclass(frozen=True)
class ComponentFile:
    """A component source file and the component name derived from it."""
    path: Path
    name: str


@dataclass(frozen=True)
class ScanConfig:
    """Settings for a single scan, built once from the command line."""
    directory: Path
    ignore_libs: Tuple[str, ...] = ()
    project_only: bool = False
    include_dirs: Tuple[str, ...] = ()
    output: Path = Path(DEFAULT_OUTPUT_FILE)
    output_format: str = "markmap"

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "ScanConfig":
        """Create a config record from parsed command-line arguments."""
        return cls(
            directory=Path(args.directory),
            ignore_libs=tuple(args.ignore_libs or ()),
            project_only=bool(args.project_only),
            include_dirs=tuple(args.include_dirs or ()),
            output=Path(args.output),
            output_format=args.format,
        )

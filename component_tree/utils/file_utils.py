#!/usr/bin/env python3
"""
File utility functions for component scanning.

Handles file reading and the recursive search for component sources.
"""

from pathlib import Path
from typing import List

from ..models import COMPONENT_EXTENSIONS


def get_file_content(file_path: Path) -> str:
    """Get file content, replacing undecodable bytes with U+FFFD."""
    try:
        with open(file_path, 'r', encoding='utf-8', errors='replace') as f:
            return f.read()
    except OSError:
        return ""


def is_component_file(file_path: Path) -> bool:
    """Check if file is a JSX/TSX component source."""
    return file_path.is_file() and file_path.name.endswith(COMPONENT_EXTENSIONS)


def find_component_files(directory: Path) -> List[Path]:
    """Find all component files in directory tree."""
    files = []

    for entry in sorted(directory.iterdir()):
        if entry.is_dir():
            files.extend(find_component_files(entry))
        elif is_component_file(entry):
            files.append(entry)

    return files

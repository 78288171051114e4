"""Utility modules for component scanning."""

from .file_utils import find_component_files, get_file_content, is_component_file

__all__ = [
    "find_component_files",
    "get_file_content",
    "is_component_file",
]

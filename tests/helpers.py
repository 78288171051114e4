"""Helpers for building throwaway React projects in tests."""

import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator


@contextmanager
def create_test_project(files: Dict[str, str]) -> Iterator[Path]:
    """Write files (relative path -> content) into a temp dir and yield its path."""
    with tempfile.TemporaryDirectory() as tmp:
        project_path = Path(tmp)
        for relative_path, content in files.items():
            file_path = project_path / relative_path
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(content, encoding="utf-8")
        yield project_path

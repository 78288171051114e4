#!/usr/bin/env python3
"""
Lexical JSX/TSX parsing utilities.

Finds component tags and import statements in React source files with
regular expressions. Nothing here builds a syntax tree: tag-like text inside
strings or comments is matched like any other text.
"""

import re
from dataclasses import dataclass
from typing import Iterable, List, Set


@dataclass
class Import:
    """Represents an imported binding by its exported name."""
    name: str
    from_path: str


class JsxParser:
    """
    Regex-based scanner for React component usages.

    A usage is any capitalized identifier directly after a '<'. Components
    imported from ignored libraries are removed from the usage set by their
    exported name only.
    """

    tag_pattern = re.compile(r'<([A-Z][a-zA-Z0-9_]*)')
    default_import_pattern = re.compile(
        r'import\s+([A-Z][a-zA-Z0-9_]*)\s+from\s+[\'"]([^\'"]+)[\'"]'
    )
    named_import_pattern = re.compile(
        r'import\s*\{([^}]+)\}\s*from\s*[\'"]([^\'"]+)[\'"]'
    )

    def extract_tag_names(self, content: str) -> Set[str]:
        """Extract capitalized JSX tag names from file content."""
        return set(self.tag_pattern.findall(content))

    def extract_imports(self, content: str) -> List[Import]:
        """Extract default and named imports from file content."""
        imports = []

        for match in self.default_import_pattern.finditer(content):
            imports.append(Import(name=match.group(1), from_path=match.group(2)))

        # Named imports may span several lines: import { A, B as C } from 'lib'
        for match in self.named_import_pattern.finditer(content):
            imports_str = match.group(1)
            from_path = match.group(2)

            for import_name in imports_str.split(','):
                # "B as C" is recorded as B; the local alias is dropped
                name = import_name.strip().split(' as ')[0].strip()
                if name:
                    imports.append(Import(name=name, from_path=from_path))

        return imports

    def extract_ignored_components(self, content: str, ignore_libs: Iterable[str]) -> Set[str]:
        """Return names imported from any of the ignored libraries.

        Only the exported name is recorded, so an aliased import such as
        ``import { Button as Btn } from 'antd'`` ignores ``Button`` and
        leaves ``<Btn />`` in place.
        """
        ignore_libs = set(ignore_libs)
        if not ignore_libs:
            return set()

        return {
            imp.name
            for imp in self.extract_imports(content)
            if imp.from_path in ignore_libs
        }

    def extract_used_components(self, content: str, ignore_libs: Iterable[str] = ()) -> Set[str]:
        """Extract rendered component names, minus those from ignored libraries."""
        used = self.extract_tag_names(content)
        return used - self.extract_ignored_components(content, ignore_libs)

#!/usr/bin/env python3
"""
Shared utilities for React source analysis.

This module provides the lexical tag and import scanning used to detect
which components a file renders.
"""

from .jsx_parser import JsxParser, Import

__all__ = [
    "JsxParser",
    "Import",
]

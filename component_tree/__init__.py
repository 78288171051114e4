"""Component tree generation package."""

from .models import ComponentFile, ScanConfig, UsageGraph

__all__ = [
    "ComponentFile",
    "ScanConfig",
    "UsageGraph",
]

"""Data models for license report generation."""

from .component import Component, License, grouping_key
from .dependency import DependencyGraph, DependencyNode
from .report import LicenseReport, LicenseReportDependency

__all__ = [
    "Component",
    "License",
    "grouping_key",
    "DependencyGraph",
    "DependencyNode",
    "LicenseReport",
    "LicenseReportDependency",
]

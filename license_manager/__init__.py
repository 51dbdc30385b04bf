"""License manager package for dependency license reports.

Collects the manifests of a build's third-party dependencies, extracts their
license metadata and writes HTML, JSON and CSV reports plus a license summary
that fails the run when a blocked license is found.
"""

from .config import LicenseManagerSettings
from .exceptions import (
    BlockedLicenseError,
    DecodeError,
    DirectoryError,
    FetchError,
    LicenseManagerError,
    ParseError,
    ResolutionError,
)
from .models import Component, License
from .services.report_generator import LicenseReportGenerator, ReportRun

__all__ = [
    "LicenseManagerSettings",
    "LicenseManagerError",
    "ParseError",
    "DirectoryError",
    "FetchError",
    "DecodeError",
    "BlockedLicenseError",
    "ResolutionError",
    "Component",
    "License",
    "LicenseReportGenerator",
    "ReportRun",
]

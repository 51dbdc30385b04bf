"""Exceptions for license report generation."""

from pathlib import Path
from typing import Optional


class LicenseManagerError(Exception):
    """Base class for license manager errors."""


class ParseError(LicenseManagerError):
    """Error raised when a manifest document cannot be parsed."""

    def __init__(self, source: str, reason: str) -> None:
        """Initialize the error.

        Args:
            source: Identifier of the manifest (path or coordinate)
            reason: Reason for the failure
        """
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to parse manifest '{source}': {reason}")


class DirectoryError(LicenseManagerError):
    """Error raised when an output directory cannot be created."""

    def __init__(self, path: Path, reason: str) -> None:
        """Initialize the error.

        Args:
            path: Directory that could not be created
            reason: Reason for the failure
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to create output directory '{path}': {reason}")


class FetchError(LicenseManagerError):
    """Error raised when the remote invalid-licenses list cannot be downloaded."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to download invalid licenses from '{url}': {reason}")


class DecodeError(LicenseManagerError):
    """Error raised when an invalid-licenses document is not a JSON array of strings."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid licenses list '{source}' is malformed: {reason}")


class BlockedLicenseError(LicenseManagerError):
    """Error raised when a dependency uses a blocked license."""

    def __init__(
        self,
        license_name: Optional[str],
        block_list_entry: str,
        report_path: Optional[Path] = None,
    ) -> None:
        """Initialize the error.

        Args:
            license_name: Name of the offending license
            block_list_entry: Blocklist entry that matched the license name
            report_path: Summary report listing the affected dependencies
        """
        self.license_name = license_name
        self.block_list_entry = block_list_entry
        self.report_path = report_path
        message = f"[{license_name}] is an INVALID license (matched '{block_list_entry}')."
        if report_path is not None:
            message += f" See {report_path}"
        super().__init__(message)


class ResolutionError(LicenseManagerError):
    """Error raised when the dependency graph cannot be loaded."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Dependency resolution failed: {reason}")

"""Tests for license manager exceptions."""

from pathlib import Path

from license_manager.exceptions import (
    BlockedLicenseError,
    DecodeError,
    DirectoryError,
    FetchError,
    LicenseManagerError,
    ParseError,
    ResolutionError,
)


def test_parse_error():
    """Test parse error."""
    error = ParseError("g:a:1", "not well-formed")
    assert str(error) == "Failed to parse manifest 'g:a:1': not well-formed"
    assert error.source == "g:a:1"
    assert isinstance(error, LicenseManagerError)


def test_directory_error():
    """Test directory error."""
    error = DirectoryError(Path("out"), "Permission denied")
    assert str(error) == "Failed to create output directory 'out': Permission denied"
    assert isinstance(error, LicenseManagerError)


def test_fetch_error():
    """Test fetch error."""
    error = FetchError("https://example.com/x.json", "HTTP 404")
    assert str(error) == "Failed to download invalid licenses from 'https://example.com/x.json': HTTP 404"


def test_decode_error():
    """Test decode error."""
    error = DecodeError("cache.json", "bad json")
    assert str(error) == "Invalid licenses list 'cache.json' is malformed: bad json"


def test_blocked_license_error():
    """Test blocked license error names license, entry and report."""
    error = BlockedLicenseError("GNU GPL v3", "GPL", Path("/tmp/license-summary.html"))
    assert error.license_name == "GNU GPL v3"
    assert error.block_list_entry == "GPL"
    assert "[GNU GPL v3] is an INVALID license" in str(error)
    assert "'GPL'" in str(error)
    assert str(error).endswith("See /tmp/license-summary.html")


def test_blocked_license_error_without_report():
    """Test blocked license error without a report path."""
    error = BlockedLicenseError("AGPL", "AGPL")
    assert "See" not in str(error)


def test_error_inheritance():
    """Test error class inheritance."""
    for cls in (ParseError, DirectoryError, FetchError, DecodeError, BlockedLicenseError, ResolutionError):
        assert issubclass(cls, LicenseManagerError)

"""Test configuration and fixtures."""

from typing import Dict, List, Optional

import pytest

from license_manager.config import LicenseManagerSettings
from license_manager.models import DependencyNode


def make_pom(
    artifact_id: Optional[str] = None,
    group_id: Optional[str] = None,
    version: Optional[str] = None,
    name: Optional[str] = None,
    url: Optional[str] = None,
    licenses=(),
) -> bytes:
    """Build a POM document with the given fields."""
    parts = ['<project xmlns="http://maven.apache.org/POM/4.0.0">']
    for tag, value in (
        ("groupId", group_id),
        ("artifactId", artifact_id),
        ("version", version),
        ("name", name),
        ("url", url),
    ):
        if value is not None:
            parts.append(f"  <{tag}>{value}</{tag}>")
    if licenses:
        parts.append("  <licenses>")
        for license_name, license_url in licenses:
            parts.append("    <license>")
            if license_name is not None:
                parts.append(f"      <name>{license_name}</name>")
            if license_url is not None:
                parts.append(f"      <url>{license_url}</url>")
            parts.append("    </license>")
        parts.append("  </licenses>")
    parts.append("</project>")
    return "\n".join(parts).encode("utf-8")


class FakeResolver:
    """In-memory resolver keyed by scope and coordinate."""

    def __init__(self, graph: Dict[str, List[DependencyNode]], manifests: Dict[str, bytes]):
        self.graph = graph
        self.manifests = manifests

    def root_dependencies(self, scope: str) -> List[DependencyNode]:
        return self.graph.get(scope, [])

    def read_manifest(self, node: DependencyNode) -> bytes:
        try:
            return self.manifests[node.coordinate]
        except KeyError:
            raise FileNotFoundError(node.coordinate)


@pytest.fixture
def settings_factory(tmp_path):
    """Build settings rooted in a temporary project directory."""
    def _factory(**overrides) -> LicenseManagerSettings:
        values = {
            "project_dir": tmp_path,
            "output_dirs": [tmp_path / "licenses"],
            "summary_dirs": [tmp_path / "summary"],
            "invalid_licenses_working_dir": tmp_path / "working",
        }
        values.update(overrides)
        return LicenseManagerSettings(**values)
    return _factory


@pytest.fixture
def pom_factory():
    """Provide the POM document builder."""
    return make_pom


@pytest.fixture
def resolver_factory():
    """Provide the in-memory resolver class."""
    return FakeResolver

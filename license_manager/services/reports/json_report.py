"""JSON report with one record per dependency."""

from pathlib import Path
from typing import Iterable

from license_manager.models import Component, LicenseReport, LicenseReportDependency
from .formatting import format_url, write_report


def build_license_report(components: Iterable[Component]) -> LicenseReport:
    """Build the report model, using the first license of each component."""
    dependencies = []
    for component in components:
        license = component.first_license
        dependencies.append(
            LicenseReportDependency(
                moduleName=component.display_name,
                moduleUrl=format_url(component.url),
                moduleGroupId=component.group_id,
                moduleArtifactId=component.artifact_id,
                moduleVersion=component.version,
                moduleLicense=license.name if license else None,
                moduleLicenseUrl=format_url(license.url) if license else None,
            )
        )
    return LicenseReport(dependencies=dependencies)


def render_json_report(components: Iterable[Component]) -> str:
    """Render the pretty-printed JSON report; absent values are ``null``."""
    return build_license_report(components).model_dump_json(indent=4)


def write_json_report(path: Path, components: Iterable[Component]) -> Path:
    return write_report(path, render_json_report(components))

"""CSV report with one line per dependency."""

from pathlib import Path
from typing import Iterable

from license_manager.models import Component
from .formatting import format_csv_field, format_url, write_report


def render_csv_line(component: Component) -> str:
    """Render ``name,url,groupId,artifactId,version,licenseName,licenseUrl``.

    Only the name and license name are quoted (when they contain a comma);
    no other escaping is applied.
    """
    license = component.first_license
    fields = [
        format_csv_field(component.display_name),
        format_url(component.url) or "",
        component.group_id or "",
        component.artifact_id or "",
        component.version or "",
        format_csv_field(license.name if license else None),
        (format_url(license.url) if license else None) or "",
    ]
    return ",".join(fields)


def render_csv_report(components: Iterable[Component]) -> str:
    return "".join(render_csv_line(component) + "\n" for component in components)


def write_csv_report(path: Path, components: Iterable[Component]) -> Path:
    return write_report(path, render_csv_report(components))

"""License summary report grouping dependencies by license."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from license_manager.models import Component, License, grouping_key
from .formatting import format_url, html_page, html_text, write_report

SUMMARY_FILENAME = "license-summary.html"
UNKNOWN_LICENSE = "UNKNOWN LICENSE"


@dataclass
class LicenseSummary:
    """Components grouped by license.

    ``keys`` holds the grouping keys in first-seen order. Each key maps to
    the first license seen for it and to the components declaring it.
    Components without a usable license are kept apart in ``unknown``.
    """
    keys: List[str] = field(default_factory=list)
    licenses: Dict[str, License] = field(default_factory=dict)
    members: Dict[str, List[Component]] = field(default_factory=dict)
    unknown: List[Component] = field(default_factory=list)

    def add(self, key: str, license: License, component: Component) -> None:
        if key not in self.licenses:
            self.keys.append(key)
            self.licenses[key] = license
            self.members[key] = []
        self.members[key].append(component)

    def entries(self) -> Iterator[Tuple[Optional[License], List[Component]]]:
        """Groups in report order; the unknown group comes last."""
        for key in self.keys:
            yield self.licenses[key], self.members[key]
        if self.unknown:
            yield None, self.unknown

    @property
    def distinct_licenses(self) -> List[License]:
        return [self.licenses[key] for key in self.keys]


def group_by_license(components: Iterable[Component]) -> LicenseSummary:
    """Group components by the https-normalized license URL, or the license name."""
    summary = LicenseSummary()
    for component in components:
        keys = set()
        for license in component.licenses:
            key = grouping_key(license)
            if key is None or key in keys:
                continue
            keys.add(key)
            summary.add(key, license, component)
        if not keys:
            summary.unknown.append(component)
    return summary


def _member_line(component: Component) -> str:
    coordinate = html_text(f"{component.group_id}:{component.artifact_id}")
    if component.name and component.name.strip():
        return f"<li>{coordinate} ({html_text(component.name)})</li>"
    return f"<li>{coordinate}</li>"


def render_group(license: Optional[License], components: List[Component]) -> str:
    """Render the block of one license group."""
    name = license.name if license and license.name else UNKNOWN_LICENSE
    lines = ["<p>", f"    <strong>{html_text(name)}</strong><br/>"]
    if license and license.url:
        lines.append(f"    {html_text(format_url(license.url))}<br/>")
    lines.append(f"count: {len(components)}")
    lines.append("<ul>")
    lines.extend(_member_line(component) for component in components)
    lines.extend(["</ul>", "</p>", "<hr/>"])
    return "\n".join(lines) + "\n"


def render_summary_report(summary: LicenseSummary) -> str:
    return html_page("".join(render_group(license, members) for license, members in summary.entries()))


def write_summary_report(path: Path, summary: LicenseSummary) -> Path:
    return write_report(path, render_summary_report(summary))

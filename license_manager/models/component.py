"""Component type definitions for license reports."""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class License:
    """A license declared by a component manifest."""

    name: Optional[str] = None
    url: Optional[str] = None


@dataclass(frozen=True)
class Component:
    """Normalized license-relevant metadata of one third-party dependency."""

    name: Optional[str] = None
    group_id: Optional[str] = None
    artifact_id: Optional[str] = None
    version: Optional[str] = None
    url: Optional[str] = None
    licenses: Tuple[License, ...] = ()

    @property
    def display_name(self) -> Optional[str]:
        """Name shown in reports, falling back to the artifact id."""
        return self.name or self.artifact_id

    @property
    def first_license(self) -> Optional[License]:
        """The representative license, if any."""
        return self.licenses[0] if self.licenses else None

    @property
    def identity(self) -> Tuple[Optional[str], Optional[str], Optional[str]]:
        return (self.group_id, self.artifact_id, self.version)


def grouping_key(license: License) -> Optional[str]:
    """Key used to aggregate components in the license summary.

    The license URL is preferred, with plain ``http`` upgraded to ``https`` so
    that both spellings of the same license page share one entry. Licenses
    without a URL are keyed by name; a license with neither has no key.
    """
    if license.url:
        if license.url.startswith("http:"):
            return "https:" + license.url[len("http:"):]
        return license.url
    return license.name

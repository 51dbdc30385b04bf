"""Manifest parser turning POM documents into components."""

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from loguru import logger

from license_manager.exceptions import ParseError
from license_manager.models import Component, License

logger = logger.bind(name=__name__)


@dataclass
class ParseFailure:
    """A manifest that could not be turned into a component."""
    source: str
    error: ParseError


@dataclass
class ParseBatch:
    """Result of parsing a batch of manifests."""
    components: List[Component] = field(default_factory=list)
    failures: List[ParseFailure] = field(default_factory=list)


def _local_name(tag: str) -> str:
    # '{http://maven.apache.org/POM/4.0.0}artifactId' -> 'artifactId'
    return tag.rsplit("}", 1)[-1]


def _child(element: ET.Element, name: str) -> Optional[ET.Element]:
    for child in element:
        if isinstance(child.tag, str) and _local_name(child.tag) == name:
            return child
    return None


def _children(element: ET.Element, name: str) -> List[ET.Element]:
    return [
        child for child in element
        if isinstance(child.tag, str) and _local_name(child.tag) == name
    ]


def _text(element: ET.Element, name: str) -> Optional[str]:
    child = _child(element, name)
    if child is None or child.text is None:
        return None
    return child.text.strip() or None


class ManifestParser:
    """Parses POM manifests into normalized components.

    Only the elements needed for license reports are read; everything else,
    including ``<parent>`` inheritance, is ignored.
    """

    def parse(self, content: bytes, source: str = "<manifest>") -> Component:
        """Parse one manifest document.

        Args:
            content: Raw manifest bytes
            source: Identifier used in error messages

        Returns:
            Component: Normalized component

        Raises:
            ParseError: If the document is not well-formed XML or its encoding is unsupported
        """
        try:
            root = ET.fromstring(content)
        except (ET.ParseError, LookupError, ValueError) as e:
            # LookupError: unknown declared encoding, ValueError: multi-byte encoding
            raise ParseError(source, str(e))

        licenses: List[License] = []
        licenses_element = _child(root, "licenses")
        if licenses_element is not None:
            for license_element in _children(licenses_element, "license"):
                licenses.append(
                    License(
                        name=_text(license_element, "name"),
                        url=_text(license_element, "url"),
                    )
                )

        return Component(
            name=_text(root, "name"),
            group_id=_text(root, "groupId"),
            artifact_id=_text(root, "artifactId"),
            version=_text(root, "version"),
            url=_text(root, "url"),
            licenses=tuple(licenses),
        )

    def parse_all(self, manifests: Iterable[Tuple[str, bytes]]) -> ParseBatch:
        """Parse several manifests, keeping going past individual failures.

        Args:
            manifests: ``(source, content)`` pairs

        Returns:
            ParseBatch: Parsed components and the manifests that failed
        """
        batch = ParseBatch()
        for source, content in manifests:
            logger.debug(f"Parsing manifest: {source}")
            try:
                batch.components.append(self.parse(content, source))
            except ParseError as e:
                logger.warning(f"{e}... skipping...")
                batch.failures.append(ParseFailure(source=source, error=e))
        return batch

"""Formatting helpers shared by the report renderers."""

from html import escape
from pathlib import Path
from typing import Optional

from loguru import logger

logger = logger.bind(name=__name__)

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
    <style>
        a {{ word-wrap: break-word;}}
        strong {{ word-wrap: break-word;}}
    </style>
    <body>
        {body}
    </body>
</html>
"""


def format_url(url: Optional[str]) -> Optional[str]:
    """Strip the fragment from a URL.

    Fragments break links in some embedded report viewers and only point at
    an anchor of the page anyway.
    """
    if url is None:
        return None
    return url.split("#", 1)[0]


def format_csv_field(value: Optional[str]) -> str:
    """Quote a CSV field when it contains a comma."""
    if value is None:
        return ""
    if "," in value:
        return f'"{value}"'
    return value


def html_text(value: Optional[str]) -> str:
    return escape(value) if value is not None else ""


def html_link(url: str) -> str:
    url = html_text(format_url(url))
    return f"<a href='{url}'>{url}</a>"


def html_page(body: str) -> str:
    """Wrap report blocks in the report page."""
    return PAGE_TEMPLATE.format(body=body)


def write_report(path: Path, content: str) -> Path:
    """Write a report, replacing any existing file."""
    path = Path(path)
    path.write_text(content, encoding="utf-8")
    logger.debug(f"Wrote report {path}")
    return path

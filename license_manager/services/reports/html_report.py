"""HTML report listing every dependency and its licenses."""

from pathlib import Path
from typing import Iterable, List

from license_manager.models import Component, License
from .formatting import html_link, html_page, html_text, write_report


def _license_line(license: License) -> str:
    line = f"    <strong>License: </strong>{html_text(license.name)}"
    if license.url:
        line += f" - {html_link(license.url)}"
    return line


def render_component(component: Component) -> str:
    """Render the block of one dependency."""
    lines = ["<p>", f"    <strong>{html_text(component.display_name)}</strong><br/>"]
    if component.url:
        lines.append(f"    <strong>URL: </strong>{html_link(component.url)}<br/>")
    if component.licenses:
        lines.append("<br/>\n".join(_license_line(license) for license in component.licenses))
    lines.extend(["</p>", "<hr/>"])
    return "\n".join(lines) + "\n"


def render_custom_text(text: str) -> str:
    """Render a configured preamble block; the text is inserted as is."""
    return f"<p>\n{text}\n</p>\n<hr/>\n"


def render_html_report(components: Iterable[Component], custom_texts: Iterable[str] = ()) -> str:
    """Render the per-dependency HTML report.

    Args:
        components: Filtered and sorted components
        custom_texts: Literal HTML blocks placed before the dependencies

    Returns:
        str: HTML document
    """
    blocks: List[str] = [render_custom_text(text) for text in custom_texts]
    blocks.extend(render_component(component) for component in components)
    return html_page("".join(blocks))


def write_html_report(path: Path, components: Iterable[Component], custom_texts: Iterable[str] = ()) -> Path:
    return write_report(path, render_html_report(components, custom_texts))

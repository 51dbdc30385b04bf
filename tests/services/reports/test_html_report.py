"""Tests for the per-dependency HTML report."""

from license_manager.models import Component, License
from license_manager.services.reports import render_html_report, write_html_report


def test_render_component_block():
    """Test the block of a dependency with URL and licenses."""
    component = Component(
        name="Okio",
        artifact_id="okio",
        url="https://github.com/square/okio#readme",
        licenses=(
            License(name="Apache-2.0", url="https://www.apache.org/licenses/LICENSE-2.0#text"),
            License(name="MIT"),
        ),
    )
    html = render_html_report([component])

    assert "<strong>Okio</strong><br/>" in html
    assert "<strong>URL: </strong><a href='https://github.com/square/okio'>https://github.com/square/okio</a><br/>" in html
    assert (
        "<strong>License: </strong>Apache-2.0 - "
        "<a href='https://www.apache.org/licenses/LICENSE-2.0'>https://www.apache.org/licenses/LICENSE-2.0</a>"
    ) in html
    assert "<strong>License: </strong>MIT\n" in html
    assert "#" not in html.split("<body>")[1]
    assert html.count("<hr/>") == 1


def test_component_without_url_or_license():
    """Test that absent URL and licenses produce no lines."""
    html = render_html_report([Component(artifact_id="lib-b")])
    assert "<strong>lib-b</strong><br/>" in html
    assert "URL:" not in html
    assert "License:" not in html


def test_custom_texts_come_first_unescaped():
    """Test the literal preamble blocks."""
    html = render_html_report([Component(artifact_id="lib")], ["<em>Fonts</em> by someone"])
    assert html.index("<em>Fonts</em> by someone") < html.index("<strong>lib</strong>")
    assert html.count("<hr/>") == 2


def test_component_text_is_escaped():
    """Test escaping of manifest values."""
    html = render_html_report([Component(name="A <b> & C")])
    assert "A &lt;b&gt; &amp; C" in html


def test_write_html_report(tmp_path):
    """Test writing the report."""
    path = write_html_report(tmp_path / "licenses.html", [Component(name="A")])
    assert path.read_text(encoding="utf-8").startswith("<!DOCTYPE html>")

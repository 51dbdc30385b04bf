"""Tests for the CSV report."""

from license_manager.models import Component, License
from license_manager.services.reports import render_csv_report
from license_manager.services.reports.csv_report import render_csv_line


def test_csv_column_order():
    """Test the fixed column order."""
    component = Component(
        name="Okio",
        group_id="com.squareup.okio",
        artifact_id="okio",
        version="3.4.0",
        url="https://github.com/square/okio#readme",
        licenses=(License(name="Apache-2.0", url="https://www.apache.org/licenses/LICENSE-2.0"),),
    )
    assert render_csv_line(component) == (
        "Okio,https://github.com/square/okio,com.squareup.okio,okio,3.4.0,"
        "Apache-2.0,https://www.apache.org/licenses/LICENSE-2.0"
    )


def test_csv_quotes_names_with_commas():
    """Test quoting of name and license name."""
    line = render_csv_line(Component(name="Foo, Inc.", licenses=(License(name="BSD, 3-clause"),)))
    assert line == '"Foo, Inc.",,,,,"BSD, 3-clause",'


def test_csv_plain_name_unquoted():
    """Test that names without commas stay unquoted."""
    assert render_csv_line(Component(name="Foo")) == "Foo,,,,,,"


def test_csv_falls_back_to_artifact_id():
    """Test the name fallback."""
    assert render_csv_line(Component(artifact_id="lib-b", group_id="g2")) == "lib-b,,g2,lib-b,,,"


def test_csv_one_line_per_component():
    """Test line layout of the report."""
    text = render_csv_report([Component(name="A"), Component(name="B")])
    assert text.splitlines() == ["A,,,,,,", "B,,,,,,"]
    assert text.endswith("\n")

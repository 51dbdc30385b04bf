"""Tests for component filtering and ordering."""

from license_manager.models import Component
from license_manager.services.filters import (
    deduplicate_components,
    filter_components,
    restrict_to_direct,
    sort_components,
)

COMPONENTS = [
    Component(group_id="g1", artifact_id="a"),
    Component(group_id="g2", artifact_id="b"),
    Component(group_id="g1", artifact_id="c"),
    Component(group_id="g3", artifact_id="d"),
    Component(artifact_id="e"),
]


def test_filter_excludes_groups_and_artifacts():
    """Test that exactly the excluded components are dropped."""
    result = filter_components(COMPONENTS, exclude_groups=["g1"], exclude_artifact_ids=["d"])
    assert [c.artifact_id for c in result] == ["b", "e"]


def test_filter_without_exclusions():
    """Test that nothing is dropped without exclusions."""
    assert filter_components(COMPONENTS) == COMPONENTS


def test_restrict_to_direct():
    """Test the first-level restriction."""
    components = [
        Component(group_id="g", artifact_id="a", version="1"),
        Component(group_id="g", artifact_id="a", version="2"),
        Component(group_id="g", artifact_id="b", version="1"),
    ]
    result = restrict_to_direct(components, ["g:a:1", "g:b:1"])
    assert result == [components[0], components[2]]


def test_sort_uses_name_then_artifact_id():
    """Test ordering by name with artifact id fallback."""
    result = sort_components([Component(name="B"), Component(artifact_id="A")])
    assert [c.display_name for c in result] == ["A", "B"]


def test_sort_is_ordinal():
    """Test that upper case sorts before lower case."""
    result = sort_components([Component(name="apache"), Component(name="Zed")])
    assert [c.name for c in result] == ["Zed", "apache"]


def test_sort_unnamed_components_first_and_stable():
    """Test that components without name or artifact id sort first, keeping input order."""
    first = Component(version="1")
    second = Component(version="2")
    result = sort_components([Component(name="a"), first, second])
    assert result == [first, second, Component(name="a")]


def test_deduplicate_keeps_first():
    """Test dropping repeated coordinates."""
    first = Component(name="First", group_id="g", artifact_id="a", version="1")
    duplicate = Component(name="Second", group_id="g", artifact_id="a", version="1")
    other_version = Component(group_id="g", artifact_id="a", version="2")
    assert deduplicate_components([first, duplicate, other_version]) == [first, other_version]


def test_deduplicate_keeps_anonymous_components():
    """Test that components without coordinates are not merged."""
    anonymous = Component(name="x")
    assert deduplicate_components([anonymous, anonymous]) == [anonymous, anonymous]

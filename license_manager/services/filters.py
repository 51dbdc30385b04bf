"""Filtering, ordering and de-duplication of components."""

from typing import Iterable, List

from license_manager.models import Component


def filter_components(
    components: Iterable[Component],
    exclude_groups: Iterable[str] = (),
    exclude_artifact_ids: Iterable[str] = (),
) -> List[Component]:
    """Drop components whose group id or artifact id is excluded."""
    groups = set(exclude_groups)
    artifact_ids = set(exclude_artifact_ids)
    return [
        component for component in components
        if component.group_id not in groups and component.artifact_id not in artifact_ids
    ]


def restrict_to_direct(components: Iterable[Component], direct_coordinates: Iterable[str]) -> List[Component]:
    """Keep only components matching a first-level ``group:artifact:version``."""
    direct = set(direct_coordinates)
    return [
        component for component in components
        if f"{component.group_id}:{component.artifact_id}:{component.version}" in direct
    ]


def sort_key(component: Component) -> str:
    return component.name or component.artifact_id or ""


def sort_components(components: Iterable[Component]) -> List[Component]:
    """Order components by display name.

    Components with neither a name nor an artifact id sort as the empty
    string, i.e. first. The sort is stable, so ties keep their input order.
    """
    return sorted(components, key=sort_key)


def deduplicate_components(components: Iterable[Component]) -> List[Component]:
    """Drop repeated ``(groupId, artifactId, version)`` entries, keeping the first.

    Components without any of the three identifiers cannot be told apart and
    are always kept.
    """
    seen = set()
    unique: List[Component] = []
    for component in components:
        identity = component.identity
        if identity == (None, None, None):
            unique.append(component)
            continue
        if identity in seen:
            continue
        seen.add(identity)
        unique.append(component)
    return unique

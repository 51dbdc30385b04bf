"""Dependency graph traversal and manifest lookup."""

import json
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Protocol, Sequence

from loguru import logger
from pydantic import ValidationError

from license_manager.exceptions import ResolutionError
from license_manager.models import DependencyGraph, DependencyNode

logger = logger.bind(name=__name__)


class DependencyResolver(Protocol):
    """Source of resolved dependencies and their manifests."""

    def root_dependencies(self, scope: str) -> Sequence[DependencyNode]:
        """First-level dependencies of a scope, empty if the scope is unknown."""
        ...

    def read_manifest(self, node: DependencyNode) -> bytes:
        """Raw manifest of a resolved artifact.

        Raises:
            OSError: If the manifest cannot be read
        """
        ...


def collect_artifacts(roots: Iterable[DependencyNode]) -> List[DependencyNode]:
    """Flatten dependency trees into the artifacts they resolve to.

    Local sub-projects (unspecified version) are not artifacts themselves, so
    they are skipped and their children are walked instead. Every artifact is
    returned once, in the order it was first reached.

    Args:
        roots: First-level dependencies

    Returns:
        List[DependencyNode]: All artifacts, transitive ones included
    """
    artifacts: Dict[str, DependencyNode] = {}
    visited = set()
    pending = list(roots)
    pending.reverse()

    while pending:
        node = pending.pop()
        if node.coordinate in visited:
            continue
        visited.add(node.coordinate)

        if not node.is_local_project:
            artifacts[node.coordinate] = node
        else:
            logger.debug(f"Skipping local project {node.coordinate}, walking its dependencies")

        pending.extend(reversed(node.children))

    return list(artifacts.values())


def direct_coordinates(roots: Iterable[DependencyNode]) -> List[str]:
    """Coordinates of first-level artifacts, looking through local sub-projects."""
    coordinates: List[str] = []
    for node in roots:
        if node.is_local_project:
            coordinates.extend(direct_coordinates(node.children))
        elif node.coordinate not in coordinates:
            coordinates.append(node.coordinate)
    return coordinates


class LocalRepositoryResolver:
    """Resolver backed by a Maven-layout repository and an exported graph."""

    def __init__(self, repository_dir: Path, graph: Optional[Mapping[str, Sequence[DependencyNode]]] = None):
        """Initialize the resolver.

        Args:
            repository_dir: Root of the local repository
            graph: Root dependencies per scope
        """
        self.repository_dir = Path(repository_dir)
        self.graph = dict(graph or {})

    @classmethod
    def from_graph_file(cls, repository_dir: Path, graph_file: Optional[Path]) -> "LocalRepositoryResolver":
        """Create a resolver from a JSON dependency graph document.

        The document maps scope names to lists of nodes, each node holding
        ``group``, ``name``, ``version`` and ``children``.

        Raises:
            ResolutionError: If the graph file cannot be read or is invalid
        """
        if graph_file is None:
            logger.info("No dependency graph configured")
            return cls(repository_dir)

        try:
            data = json.loads(Path(graph_file).read_text(encoding="utf-8"))
            graph = DependencyGraph(scopes=data)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            raise ResolutionError(f"Cannot load dependency graph {graph_file}: {str(e)}")

        return cls(repository_dir, graph.scopes)

    def root_dependencies(self, scope: str) -> Sequence[DependencyNode]:
        return self.graph.get(scope, [])

    def manifest_path(self, node: DependencyNode) -> Path:
        """Location of a node's POM in the repository layout."""
        return (
            self.repository_dir.joinpath(*node.group.split("."))
            / node.name
            / node.version
            / f"{node.name}-{node.version}.pom"
        )

    def read_manifest(self, node: DependencyNode) -> bytes:
        return self.manifest_path(node).read_bytes()

"""Dependency graph models supplied by the host build."""

from typing import Dict, List

from pydantic import BaseModel, Field

UNSPECIFIED_VERSION = "unspecified"


class DependencyNode(BaseModel):
    """A resolved dependency and its own dependencies."""
    group: str = Field(..., description="Group identifier")
    name: str = Field(..., description="Artifact identifier")
    version: str = Field(UNSPECIFIED_VERSION, description="Resolved version")
    children: List["DependencyNode"] = Field(default_factory=list)

    @property
    def is_local_project(self) -> bool:
        """Whether the node is a sub-project of the build rather than an artifact."""
        return self.version == UNSPECIFIED_VERSION

    @property
    def coordinate(self) -> str:
        return f"{self.group}:{self.name}:{self.version}"


class DependencyGraph(BaseModel):
    """Root dependencies of a build, keyed by scope name."""
    scopes: Dict[str, List[DependencyNode]] = Field(default_factory=dict)

    def roots(self, scope: str) -> List[DependencyNode]:
        return self.scopes.get(scope, [])

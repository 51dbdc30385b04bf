"""License manager configuration using Pydantic settings."""

from pathlib import Path
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SCOPES = ["compile", "api", "implementation"]


class LicenseManagerSettings(BaseSettings):
    """Settings for a license report run.

    Values come from keyword arguments, ``LICENSE_MANAGER_*`` environment
    variables or a ``.env`` file. List fields read from the environment are
    JSON encoded, e.g. ``LICENSE_MANAGER_EXCLUDE_GROUPS='["com.example"]'``.
    """

    # Filters
    exclude_artifact_ids: List[str] = Field(default_factory=list, description="Artifact ids left out of every report")
    exclude_groups: List[str] = Field(default_factory=list, description="Group ids left out of every report")
    direct_dependencies_only: bool = Field(False, description="Only report first-level dependencies")

    # Dependency resolution
    scopes: List[str] = Field(default_factory=lambda: list(DEFAULT_SCOPES), description="Dependency scopes to collect")
    variant_name: Optional[str] = Field(None, description="Build variant whose runtime classpath is collected too")
    repository_dir: Path = Field(Path.home() / ".m2" / "repository", description="Local repository holding manifests")
    dependency_graph_file: Optional[Path] = Field(None, description="JSON dependency graph exported by the build")

    # Reports
    project_dir: Path = Field(Path("."), description="Base for relative directories")
    output_dirs: List[Path] = Field(default_factory=lambda: [Path("build/licenses")])
    summary_dirs: List[Path] = Field(default_factory=list)
    output_filename: str = Field("licenses", description="Report file name without extension")
    create_html_report: bool = True
    create_json_report: bool = False
    create_csv_report: bool = False
    custom_licenses: List[str] = Field(default_factory=list, description="Literal HTML blocks placed before the dependencies")

    # License enforcement
    invalid_licenses: List[str] = Field(default_factory=list, description="Blocked license name substrings")
    invalid_licenses_working_dir: Path = Field(Path("build/invalid-licenses"), description="Cache directory for the remote list")
    invalid_licenses_url: Optional[str] = Field(None, description="URL of a JSON array of blocked license name substrings")

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="LICENSE_MANAGER_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    @field_validator("output_filename")
    def validate_output_filename(cls, v: str) -> str:
        """Validate that the report file name is usable."""
        if not v.strip():
            raise ValueError("output_filename must not be blank")
        return v

    @field_validator("invalid_licenses_url", "variant_name")
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        """Treat blank strings as unset."""
        if v is not None and not v.strip():
            return None
        return v

    @property
    def resolved_scopes(self) -> List[str]:
        """Configured scopes plus the variant runtime classpath, without duplicates."""
        scopes = list(self.scopes)
        if self.variant_name:
            scopes.append(f"{self.variant_name}RuntimeClasspath")
        return list(dict.fromkeys(scopes))

    def resolve_path(self, path: Path) -> Path:
        """Resolve a configured directory against the project directory."""
        path = Path(path).expanduser()
        return path if path.is_absolute() else self.project_dir / path

    @property
    def report_dirs(self) -> List[Path]:
        return [self.resolve_path(p) for p in self.output_dirs]

    @property
    def summary_report_dirs(self) -> List[Path]:
        return [self.resolve_path(p) for p in self.summary_dirs]

    @property
    def cache_dir(self) -> Path:
        return self.resolve_path(self.invalid_licenses_working_dir)

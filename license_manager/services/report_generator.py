"""Orchestration of a license report run."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from loguru import logger

from license_manager.config import LicenseManagerSettings
from license_manager.exceptions import DirectoryError, ParseError
from license_manager.models import Component
from .blocklist import BlocklistChecker
from .filters import deduplicate_components, filter_components, restrict_to_direct, sort_components
from .manifest_parser import ManifestParser, ParseBatch, ParseFailure
from .reports import (
    SUMMARY_FILENAME,
    group_by_license,
    write_csv_report,
    write_html_report,
    write_json_report,
    write_summary_report,
)
from .resolver import DependencyResolver, collect_artifacts, direct_coordinates

logger = logger.bind(name=__name__)


@dataclass
class ReportRun:
    """Outcome of a report run."""
    components: List[Component] = field(default_factory=list)
    failures: List[ParseFailure] = field(default_factory=list)
    reports: List[Path] = field(default_factory=list)
    summaries: List[Path] = field(default_factory=list)


def ensure_directory(path: Path) -> Path:
    """Create a directory if needed.

    Raises:
        DirectoryError: If the directory cannot be created
    """
    path = Path(path)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryError(path, str(e))
    if not path.is_dir():
        raise DirectoryError(path, "not a directory")
    return path


class LicenseReportGenerator:
    """Collects dependency licenses and writes the configured reports."""

    def __init__(
        self,
        settings: LicenseManagerSettings,
        resolver: DependencyResolver,
        blocklist_checker: Optional[BlocklistChecker] = None,
        parser: Optional[ManifestParser] = None,
    ):
        """Initialize the generator.

        Args:
            settings: Run configuration
            resolver: Source of dependencies and manifests
            blocklist_checker: License enforcement, built from settings if omitted
            parser: Manifest parser
        """
        self.settings = settings
        self.resolver = resolver
        self.parser = parser or ManifestParser()
        self.blocklist_checker = blocklist_checker or BlocklistChecker(
            local_list=settings.invalid_licenses,
            remote_url=settings.invalid_licenses_url,
            working_dir=settings.cache_dir,
        )

    def _roots(self):
        roots = []
        for scope in self.settings.resolved_scopes:
            scope_roots = self.resolver.root_dependencies(scope)
            logger.debug(f"Scope {scope}: {len(scope_roots)} root dependencies")
            roots.extend(scope_roots)
        return roots

    def _manifests(self, failures: List[ParseFailure]) -> Iterator[Tuple[str, bytes]]:
        artifacts = collect_artifacts(self._roots())
        logger.info(f"Found artifact dependencies count: {len(artifacts)}")
        for node in artifacts:
            try:
                yield node.coordinate, self.resolver.read_manifest(node)
            except OSError as e:
                error = ParseError(node.coordinate, f"cannot read manifest: {str(e)}")
                logger.warning(f"{error}... skipping...")
                failures.append(ParseFailure(source=node.coordinate, error=error))

    def collect(self) -> ParseBatch:
        """Resolve dependencies and parse their manifests."""
        read_failures: List[ParseFailure] = []
        batch = self.parser.parse_all(self._manifests(read_failures))
        batch.failures = read_failures + batch.failures
        return batch

    def prepare(self, components: List[Component]) -> List[Component]:
        """Filter, de-duplicate and sort components for reporting."""
        components = filter_components(
            components,
            exclude_groups=self.settings.exclude_groups,
            exclude_artifact_ids=self.settings.exclude_artifact_ids,
        )
        if self.settings.direct_dependencies_only:
            components = restrict_to_direct(components, direct_coordinates(self._roots()))
        return sort_components(deduplicate_components(components))

    def write_reports(self, components: List[Component]) -> List[Path]:
        """Write the enabled per-dependency reports to every output directory."""
        settings = self.settings
        written = []
        for directory in [ensure_directory(d) for d in settings.report_dirs]:
            if settings.create_html_report:
                written.append(write_html_report(directory / f"{settings.output_filename}.html", components, settings.custom_licenses))
            if settings.create_json_report:
                written.append(write_json_report(directory / f"{settings.output_filename}.json", components))
            if settings.create_csv_report:
                written.append(write_csv_report(directory / f"{settings.output_filename}.csv", components))
        return written

    def write_summaries(self, components: List[Component]) -> List[Path]:
        """Write the license summary to every summary directory and enforce the blocklist.

        Raises:
            BlockedLicenseError: If a dependency uses a blocked license
        """
        summary = group_by_license(components)
        written = []
        for directory in [ensure_directory(d) for d in self.settings.summary_report_dirs]:
            path = write_summary_report(directory / SUMMARY_FILENAME, summary)
            written.append(path)
            self.blocklist_checker.check(summary.distinct_licenses, path.resolve())
        return written

    def generate(self) -> ReportRun:
        """Run the whole pipeline.

        Returns:
            ReportRun: Components reported, parse failures and written files

        Raises:
            LicenseManagerError: On any fatal error
        """
        batch = self.collect()
        components = self.prepare(batch.components)
        logger.info(
            f"Reporting {len(components)} dependencies ({len(batch.failures)} manifests skipped)"
        )
        run = ReportRun(components=components, failures=batch.failures)
        run.reports = self.write_reports(components)
        run.summaries = self.write_summaries(components)
        return run

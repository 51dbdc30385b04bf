"""Entry point running a license report with settings from the environment."""

import sys

from loguru import logger
from pydantic import ValidationError

from license_manager.config import LicenseManagerSettings
from license_manager.exceptions import LicenseManagerError
from license_manager.services.report_generator import LicenseReportGenerator
from license_manager.services.resolver import LocalRepositoryResolver


def main() -> int:
    """Generate the configured license reports.

    Returns:
        int: Process exit status
    """
    try:
        settings = LicenseManagerSettings()
    except ValidationError as e:
        logger.error(f"ERROR: Invalid configuration: {str(e)}")
        return 1

    logger.remove()
    logger.add(sys.stderr, level=settings.log_level)

    try:
        resolver = LocalRepositoryResolver.from_graph_file(
            settings.repository_dir, settings.dependency_graph_file
        )
        run = LicenseReportGenerator(settings, resolver).generate()
    except LicenseManagerError as e:
        logger.error(f"ERROR: {str(e)}")
        return 1

    for path in run.reports + run.summaries:
        logger.info(f"Created {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

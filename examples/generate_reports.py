"""Example script generating license reports for a small in-memory build."""

import tempfile
from pathlib import Path

from license_manager.config import LicenseManagerSettings
from license_manager.models import DependencyNode
from license_manager.services.report_generator import LicenseReportGenerator
from license_manager.services.resolver import LocalRepositoryResolver

OKIO_POM = """<project xmlns="http://maven.apache.org/POM/4.0.0">
  <groupId>com.squareup.okio</groupId>
  <artifactId>okio</artifactId>
  <version>3.4.0</version>
  <name>Okio</name>
  <url>https://github.com/square/okio/</url>
  <licenses>
    <license>
      <name>The Apache Software License, Version 2.0</name>
      <url>http://www.apache.org/licenses/LICENSE-2.0.txt</url>
    </license>
  </licenses>
</project>
"""


def main():
    """Run the example."""
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        resolver = LocalRepositoryResolver(
            root / "repository",
            {"implementation": [DependencyNode(group="com.squareup.okio", name="okio", version="3.4.0")]},
        )
        pom_path = resolver.manifest_path(resolver.root_dependencies("implementation")[0])
        pom_path.parent.mkdir(parents=True)
        pom_path.write_text(OKIO_POM)

        settings = LicenseManagerSettings(
            project_dir=root,
            summary_dirs=[Path("build/licenses")],
            create_json_report=True,
            create_csv_report=True,
        )
        run = LicenseReportGenerator(settings, resolver).generate()

        for path in run.reports + run.summaries:
            print(f"\n{path.name}:")
            print("=" * 50)
            print(path.read_text())


if __name__ == "__main__":
    main()

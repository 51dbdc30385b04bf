"""JSON license report models."""

from typing import List, Optional

from pydantic import BaseModel, Field


class LicenseReportDependency(BaseModel):
    """One dependency entry of the JSON report."""
    moduleName: Optional[str] = None
    moduleUrl: Optional[str] = None
    moduleGroupId: Optional[str] = None
    moduleArtifactId: Optional[str] = None
    moduleVersion: Optional[str] = None
    moduleLicense: Optional[str] = None
    moduleLicenseUrl: Optional[str] = None


class LicenseReport(BaseModel):
    """JSON license report document."""
    dependencies: List[LicenseReportDependency] = Field(
        default_factory=list, description="Dependencies in report order"
    )

"""CheckReport data model - JSON body returned by the validation service."""

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import ParseFailure


class _WireModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class DiagnosticEntry(_WireModel):
    """One error, warning, or informational item found by the service."""

    title: str = Field(..., description="Short issue title")
    detail: str = Field(..., description="Human-readable issue description")
    link: str = Field(..., description="URL with more information")
    code: str | None = Field(None, description="Service-specific issue code")
    line: int | None = Field(None, description="1-based line in the manifest")
    column: int | None = Field(None, description="1-based column in the manifest")


class SupportedProduct(_WireModel):
    """A platform the add-in can run on."""

    title: str = Field(..., description="Platform name")


class ValidationReport(_WireModel):
    """Verdict and diagnostics for a submitted manifest."""

    result: str = Field(..., description="Raw result label (Passed, Failed, ...)")
    errors: list[DiagnosticEntry] = Field(default_factory=list)
    warnings: list[DiagnosticEntry] = Field(default_factory=list)
    infos: list[DiagnosticEntry] = Field(default_factory=list)


class ReportDetails(_WireModel):
    supported_products: list[SupportedProduct] = Field(
        default_factory=list,
        alias="supportedProducts",
        description="Only populated for a passing manifest",
    )


class CheckReport(_WireModel):
    """The checkReport object wrapping the validation verdict."""

    validation_report: ValidationReport = Field(..., alias="validationReport")
    details: ReportDetails | None = Field(None)

    @property
    def supported_products(self) -> list[SupportedProduct]:
        if self.details is None:
            return []
        return self.details.supported_products


class CheckReportEnvelope(_WireModel):
    check_report: CheckReport = Field(..., alias="checkReport")


def parse_check_report(body: str) -> CheckReport:
    """
    Parse a raw service body into a CheckReport.

    Args:
        body: JSON text, possibly padded with whitespace

    Returns:
        The validated CheckReport

    Raises:
        ParseFailure: If the body is not JSON or does not have the expected shape
    """
    try:
        return CheckReportEnvelope.model_validate_json(body.strip()).check_report
    except ValidationError as e:
        raise ParseFailure(f"Response body is not a valid check report: {e}") from e

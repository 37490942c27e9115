"""Service configuration for the add-in validation client."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_ENDPOINT = (
    "https://verificationservice.osi.office.net/ova/addincheckingagent.svc/api/addincheck"
)

# Fixed by the remote API contract.
MANIFEST_CONTENT_TYPE = "application/xml"


class ServiceConfig(BaseModel):
    """Immutable settings for one validation service client."""

    model_config = ConfigDict(frozen=True)

    endpoint: str = Field(DEFAULT_ENDPOINT, description="Validation service URI")
    chunk_size: int = Field(
        64 * 1024, gt=0, description="Bytes read from the manifest per streamed chunk"
    )
    timeout: float | None = Field(
        None, description="Request timeout in seconds (None waits indefinitely)"
    )

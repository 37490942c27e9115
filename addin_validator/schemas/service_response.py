"""ServiceResponse data model - raw transport result."""

from pydantic import BaseModel, ConfigDict, Field


class ServiceResponse(BaseModel):
    """Status code and body of one call to the validation service."""

    model_config = ConfigDict(frozen=True)

    status_code: int = Field(..., description="HTTP status code")
    body: str = Field("", description="Raw response body")

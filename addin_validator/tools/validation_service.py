"""Client for the remote add-in validation service."""

import asyncio
from pathlib import Path
from typing import AsyncIterator, BinaryIO, Protocol

import httpx
import structlog

from ..config import MANIFEST_CONTENT_TYPE, ServiceConfig
from ..errors import TransportFailure
from ..schemas import ServiceResponse

logger = structlog.get_logger()


class ValidationService(Protocol):
    """Anything that can submit a manifest and return the raw response."""

    async def submit(self, manifest_path: str | Path) -> ServiceResponse:
        ...


async def _stream_file(manifest: BinaryIO, chunk_size: int) -> AsyncIterator[bytes]:
    while True:
        chunk = await asyncio.to_thread(manifest.read, chunk_size)
        if not chunk:
            break
        yield chunk


class ValidationServiceClient:
    """Posts manifests to the validation service over HTTP."""

    def __init__(
        self,
        config: ServiceConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config or ServiceConfig()
        self._transport = transport

    async def submit(self, manifest_path: str | Path) -> ServiceResponse:
        """
        Stream a manifest file to the validation service.

        Args:
            manifest_path: Path to the manifest XML file

        Returns:
            ServiceResponse with whatever status code the service answered with

        Raises:
            TransportFailure: If the service cannot be reached
            OSError: If the manifest file cannot be opened
        """
        logger.info(
            "manifest_submission_started",
            manifest=str(manifest_path),
            endpoint=self.config.endpoint,
        )

        with open(manifest_path, "rb") as manifest:
            try:
                async with httpx.AsyncClient(
                    transport=self._transport,
                    timeout=httpx.Timeout(self.config.timeout),
                ) as client:
                    response = await client.post(
                        self.config.endpoint,
                        content=_stream_file(manifest, self.config.chunk_size),
                        headers={"Content-Type": MANIFEST_CONTENT_TYPE},
                    )
            except httpx.TransportError as e:
                logger.warning(
                    "validation_service_unreachable",
                    endpoint=self.config.endpoint,
                    error=str(e),
                )
                raise TransportFailure(
                    f"Cannot reach validation service at {self.config.endpoint}"
                ) from e

        logger.info(
            "validation_service_responded",
            status_code=response.status_code,
            body_length=len(response.text),
        )
        return ServiceResponse(status_code=response.status_code, body=response.text)

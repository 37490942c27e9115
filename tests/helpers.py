"""Payload builders and fakes shared by the tests."""

import io
import json

from addin_validator.schemas import ServiceResponse

SAMPLE_MANIFEST = b"""<?xml version="1.0" encoding="UTF-8"?>
<OfficeApp xmlns="http://schemas.microsoft.com/office/appforoffice/1.1" xsi:type="TaskPaneApp">
  <Id>5d5a9a5e-2d3c-4b8f-9d1e-0c9b2a8b7f10</Id>
  <Version>1.0.0.0</Version>
  <ProviderName>Contoso</ProviderName>
  <DefaultLocale>en-US</DefaultLocale>
  <DisplayName DefaultValue="Contoso Add-in" />
</OfficeApp>
"""


def make_entry(title="Schema", detail="Element is invalid.", link="https://aka.ms/schema", **extra):
    return {"title": title, "detail": detail, "link": link, **extra}


def make_body(result="Passed", errors=None, warnings=None, infos=None, products=None):
    check_report = {
        "validationReport": {
            "result": result,
            "errors": errors or [],
            "warnings": warnings or [],
            "infos": infos or [],
        }
    }
    if products is not None:
        check_report["details"] = {
            "supportedProducts": [{"title": title} for title in products]
        }
    return json.dumps({"checkReport": check_report})


def output_lines(buffer: io.StringIO) -> list[str]:
    return [line.rstrip() for line in buffer.getvalue().splitlines()]


class FakeValidationService:
    """Returns a canned response, or raises a canned exception."""

    def __init__(self, response: ServiceResponse | None = None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.submitted = []

    async def submit(self, manifest_path):
        self.submitted.append(manifest_path)
        if self.error is not None:
            raise self.error
        return self.response

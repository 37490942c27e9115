"""Shared fixtures for add-in validator tests."""

import io

import pytest
import structlog

from addin_validator.reporting import make_console
from tests.helpers import SAMPLE_MANIFEST


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def report_buffer():
    return io.StringIO()


@pytest.fixture
def console(report_buffer):
    return make_console(file=report_buffer, no_color=True)


@pytest.fixture
def manifest_file(tmp_path):
    path = tmp_path / "manifest.xml"
    path.write_bytes(SAMPLE_MANIFEST)
    return path

"""Tests for the command line interface."""

import click
import pytest
from click.testing import CliRunner

from addin_validator import main
from addin_validator.config import DEFAULT_ENDPOINT
from addin_validator.errors import TransportFailure
from addin_validator.schemas import ServiceResponse
from tests.helpers import FakeValidationService, make_body, make_entry


@pytest.fixture
def fake_service(monkeypatch):
    """Replace the HTTP client built by the CLI; records the config it got."""
    state = {"service": FakeValidationService(), "configs": []}

    def factory(config):
        state["configs"].append(config)
        return state["service"]

    monkeypatch.setattr(main, "ValidationServiceClient", factory)
    monkeypatch.delenv("ADDIN_VALIDATOR_ENDPOINT", raising=False)
    return state


@pytest.mark.parametrize(
    "response, exit_code, banner",
    [
        (ServiceResponse(status_code=200, body=make_body(result="Passed", products=["Excel"])), 0, "Validation: Passed"),
        (ServiceResponse(status_code=200, body=make_body(result="Failed", errors=[make_entry()])), 1, "Validation: Failed"),
        (ServiceResponse(status_code=400, body=""), 2, "  Error Code: 400"),
        (ServiceResponse(status_code=200, body=make_body(result="Pending")), 2, "Calling validation service"),
    ],
)
def test_validate_exit_codes(fake_service, manifest_file, response, exit_code, banner):
    """Test the exit code and banner for each outcome."""
    fake_service["service"].response = response

    result = CliRunner().invoke(main.cli, ["validate", str(manifest_file), "--no-color"])

    assert result.exit_code == exit_code
    assert banner in result.output


def test_validate_unreachable_service(fake_service, manifest_file):
    """Test the CLI when the service cannot be reached."""
    fake_service["service"].error = TransportFailure("down")

    result = CliRunner().invoke(main.cli, ["validate", str(manifest_file)])

    assert result.exit_code == 2
    assert "Error: Cannot reach service." in result.output


def test_validate_endpoint_option(fake_service, manifest_file):
    """Test that --endpoint reaches the client config."""
    fake_service["service"].response = ServiceResponse(status_code=200, body=make_body())

    CliRunner().invoke(
        main.cli,
        ["validate", str(manifest_file), "--endpoint", "http://localhost:9000/check"],
    )

    assert fake_service["configs"][0].endpoint == "http://localhost:9000/check"


def test_validate_endpoint_from_environment(fake_service, manifest_file, monkeypatch):
    """Test that the endpoint can come from the environment."""
    monkeypatch.setenv("ADDIN_VALIDATOR_ENDPOINT", "http://staging.example/check")
    fake_service["service"].response = ServiceResponse(status_code=200, body=make_body())

    CliRunner().invoke(main.cli, ["validate", str(manifest_file)])

    assert fake_service["configs"][0].endpoint == "http://staging.example/check"


def test_validate_default_endpoint(fake_service, manifest_file):
    """Test the default endpoint when nothing is configured."""
    fake_service["service"].response = ServiceResponse(status_code=200, body=make_body())

    CliRunner().invoke(main.cli, ["validate", str(manifest_file)])

    assert fake_service["configs"][0].endpoint == DEFAULT_ENDPOINT


def test_validate_requires_existing_file(fake_service, tmp_path):
    """Test that a missing manifest is rejected before submitting."""
    result = CliRunner().invoke(main.cli, ["validate", str(tmp_path / "missing.xml")])

    assert result.exit_code != 0
    assert fake_service["configs"] == []


def test_version_command():
    """Test the version command."""
    result = CliRunner().invoke(main.cli, ["version"])

    assert result.exit_code == 0
    assert "Add-in Validator" in result.output


def test_run_reports_interrupt(monkeypatch, capsys):
    """Test that Ctrl-C in the console script exits with 130."""
    def interrupted(*args, **kwargs):
        raise click.exceptions.Abort()

    monkeypatch.setattr(main.cli, "main", interrupted)

    with pytest.raises(SystemExit) as exc_info:
        main.run()

    assert exc_info.value.code == 130
    assert "Interrupted by user" in capsys.readouterr().out


def test_run_reports_usage_errors(monkeypatch, capsys):
    """Test that usage errors from the console script keep click's exit code."""
    monkeypatch.setattr("sys.argv", ["addin-validator", "validate"])

    with pytest.raises(SystemExit) as exc_info:
        main.run()

    assert exc_info.value.code == 2
    assert "Missing argument" in capsys.readouterr().err


def test_run_passes_through_command_exit(fake_service, manifest_file, monkeypatch):
    """Test that the console script exits with the validation exit code."""
    fake_service["service"].response = ServiceResponse(
        status_code=200, body=make_body(result="Failed", errors=[make_entry()])
    )
    monkeypatch.setattr("sys.argv", ["addin-validator", "validate", str(manifest_file)])

    with pytest.raises(SystemExit) as exc_info:
        main.run()

    assert exc_info.value.code == 1

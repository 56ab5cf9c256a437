"""
Configuration and fixtures for pytest testing suite.
Provides shared fixtures and test configuration for the division tool.
"""
import io
import uuid
import pytest

from division_tool.main import run
from division_tool.utils.config import Config
from division_tool.utils.logger import setup_logger


@pytest.fixture
def test_config():
    """Test configuration settings."""
    return {
        "APP_NAME": "division-tool-test",
        "APP_VERSION": "0.0.1",
        "ENVIRONMENT": "testing",
        "LOG_LEVEL": "CRITICAL",
        "LOG_FORMAT": "text",
        "APP_LANG": "en",
    }


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path, test_config):
    """Setup test environment variables and run every test inside a temp directory."""
    for key, value in test_config.items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv("RESULT_FILE_PATH", raising=False)
    monkeypatch.delenv("PAUSE_ON_EXIT", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def config():
    """Configuration built from the test environment."""
    return Config()


@pytest.fixture
def logger():
    """Isolated structured logger (unique name so handlers bind to this test's stderr)."""
    return setup_logger(f"tests.{uuid.uuid4().hex}", level="DEBUG", json_format=False)


@pytest.fixture
def run_tool(config, logger):
    """
    Run the tool with the given input lines.

    Returns a callable: run_tool(*lines, config=None) -> (outcome, stdout_text)
    """
    def _run(*lines, config=config):
        stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        stdout = io.StringIO()
        outcome = run(config, logger, input_stream=stdin, output_stream=stdout)
        return outcome, stdout.getvalue()

    return _run

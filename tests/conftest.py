import os
from pathlib import Path

import pytest
import requests
from typer.testing import CliRunner

from tests.helpers import FakeSession
from version_detector.cli import app

DETECTOR_ENV_VARS = (
    "GITHUB_OUTPUT",
    "FORCE_BUILD",
    "VERSION_DETECTOR_PACKAGE",
    "VERSION_DETECTOR_REGISTRY_URL",
    "VERSION_DETECTOR_VERSION_FILE",
    "VERSION_DETECTOR_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_env():
    # load_dotenv writes straight into os.environ, so snapshot and restore it
    saved = dict(os.environ)
    for name in DETECTOR_ENV_VARS:
        os.environ.pop(name, None)
    yield
    os.environ.clear()
    os.environ.update(saved)


@pytest.fixture
def fake_registry(monkeypatch):
    """Route every requests.Session.get through a FakeSession."""

    def _install(response=None, error=None):
        session = FakeSession(response, error)
        monkeypatch.setattr(
            requests.Session, "get", lambda self, url, **kw: session.get(url, **kw)
        )
        return session

    return _install


@pytest.fixture
def run_cli(monkeypatch):
    runner = CliRunner()

    def _run(cwd: Path, *args, check=False):
        monkeypatch.chdir(cwd)
        result = runner.invoke(app, list(args))
        if check:
            assert result.exit_code == 0, result.output
        return result

    return _run

import pytest
import requests

from tests.helpers import FakeSession, make_response
from version_detector.config import DetectorConfig
from version_detector.errors import (
    InvalidVersionFormatError,
    MalformedResponseError,
    RegistryTimeoutError,
    TransportError,
    VersionDetectorError,
)
from version_detector.registry import fetch_latest_version


def test_returns_version_and_sends_expected_request():
    session = FakeSession(make_response({"name": "locize-cli", "version": "9.1.0"}))
    assert fetch_latest_version(DetectorConfig(), session=session) == "9.1.0"
    call = session.calls[0]
    assert call["url"] == "https://registry.npmjs.org/locize-cli/latest"
    assert call["timeout"] == 10
    assert call["headers"]["User-Agent"].startswith("locize-cli-docker-version-detector/")


def test_custom_registry_and_package():
    config = DetectorConfig(package="left-pad", registry_url="https://npm.example.com/", timeout=2.5)
    session = FakeSession(make_response({"version": "1.3.0"}))
    fetch_latest_version(config, session=session)
    assert session.calls[0]["url"] == "https://npm.example.com/left-pad/latest"
    assert session.calls[0]["timeout"] == 2.5


def test_timeout_raises_registry_timeout():
    session = FakeSession(error=requests.exceptions.ReadTimeout("read timed out"))
    with pytest.raises(RegistryTimeoutError) as exc:
        fetch_latest_version(DetectorConfig(), session=session)
    assert "timed out" in str(exc.value)
    assert isinstance(exc.value, TimeoutError)


def test_connection_error_raises_transport_error():
    cause = requests.exceptions.ConnectionError("connection refused")
    session = FakeSession(error=cause)
    with pytest.raises(TransportError) as exc:
        fetch_latest_version(DetectorConfig(), session=session)
    assert exc.value.__cause__ is cause


def test_http_error_status_raises_transport_error():
    session = FakeSession(make_response({"error": "Not found"}, status_code=404))
    with pytest.raises(TransportError):
        fetch_latest_version(DetectorConfig(), session=session)


@pytest.mark.parametrize("body", ["<html>oops</html>", {"name": "locize-cli"}, ["9.1.0"], {"version": ""}])
def test_malformed_body(body):
    session = FakeSession(make_response(body))
    with pytest.raises(MalformedResponseError):
        fetch_latest_version(DetectorConfig(), session=session)


def test_invalid_version_names_offending_string():
    session = FakeSession(make_response({"version": "v9.1"}))
    with pytest.raises(InvalidVersionFormatError) as exc:
        fetch_latest_version(DetectorConfig(), session=session)
    assert exc.value.version == "v9.1"
    assert "v9.1" in str(exc.value)


def test_all_fetch_errors_share_base_class():
    for error_type in (TransportError, RegistryTimeoutError, MalformedResponseError, InvalidVersionFormatError):
        assert issubclass(error_type, VersionDetectorError)


@pytest.mark.parametrize("version", ["١.2.3", "１０.0.0", "1.2.3-βeta"])
def test_non_ascii_version_is_rejected(version):
    session = FakeSession(make_response({"version": version}))
    with pytest.raises(InvalidVersionFormatError):
        fetch_latest_version(DetectorConfig(), session=session)

"""Fakes shared by the unit and integration tests."""

import json
from pathlib import Path

import requests


def make_response(body, status_code=200, url="https://registry.npmjs.org/locize-cli/latest"):
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.reason = "OK" if status_code < 400 else "Not Found"
    if isinstance(body, (dict, list)):
        body = json.dumps(body)
    response._content = body.encode("utf-8")
    return response


class FakeSession:
    """Stands in for requests.Session; returns a canned response or raises."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        pass


def read_outputs(path: Path) -> dict:
    outputs = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        if "=" in line:
            name, value = line.split("=", 1)
            outputs[name] = value
    return outputs

"""Pytest configuration and fixtures."""

import json

import pytest

PXC_DIGEST = "a" * 64
PXC_OLD_DIGEST = "b" * 64
HAPROXY_DIGEST = "0123456789abcdef" * 4


class FakeResponse:
    def __init__(self, status_code=200, text="", payload=None):
        self.status_code = status_code
        self.text = text
        self._payload = payload

    def json(self):
        if self._payload is None:
            raise ValueError("no JSON body")
        return self._payload


class FakeSession:
    """Records GET calls and answers them from a url -> FakeResponse map."""

    def __init__(self, responses):
        self.responses = responses
        self.calls = []

    def get(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers or {}, "timeout": timeout})
        return self.responses[url]


@pytest.fixture
def release_notes_html():
    return f"""
    <html><body>
    <h2>Supported software</h2>
    <table>
      <thead><tr><th>Image</th><th>Digest</th></tr></thead>
      <tbody>
        <tr><td>Image</td><td>Digest</td></tr>
        <tr>
          <td><code>percona/percona-xtradb-cluster:8.0.42-33.1</code></td>
          <td><code>{PXC_DIGEST}</code></td>
        </tr>
        <tr>
          <td>percona/percona-xtradb-cluster:8.0.41-32.1</td>
          <td>{PXC_OLD_DIGEST}</td>
        </tr>
        <tr>
          <td>percona/haproxy:2.8.15 (default)</td>
          <td>{HAPROXY_DIGEST.upper()}</td>
        </tr>
        <tr><td>docker.io/library/busybox:1.36</td><td>{PXC_DIGEST}</td></tr>
      </tbody>
    </table>
    </body></html>
    """


@pytest.fixture
def renovate_config():
    return {
        "$schema": "https://docs.renovatebot.com/renovate-schema.json",
        "extends": ["config:recommended"],
        "packageRules": [
            {
                "matchDatasources": ["docker"],
                "matchPackageNames": ["/^percona//"],
                "pinDigests": True,
                "allowedVersions": "/^(0\\.0\\.1)$/",
            },
            {
                "matchPackageNames": ["percona/percona-xtradb-cluster"],
                "allowedVersions": "/^(8\\.0\\.36\\-28\\.1)$/",
                "replacementName": "percona/percona-xtradb-cluster",
                "replacementVersion": "8.0.36-28.1",
                "replacementDigest": "sha256:" + "c" * 64,
            },
            {
                "matchPackageNames": ["percona/pmm-client"],
                "allowedVersions": "/^(2\\.41\\.0)$/",
            },
            {
                "matchPackageNames": ["grafana/grafana"],
                "enabled": False,
            },
        ],
    }


@pytest.fixture
def config_dir(tmp_path, renovate_config):
    for name in ("percona-pxc-versions.json", "percona-postgresql-versions.json"):
        (tmp_path / name).write_text(json.dumps(renovate_config, indent=2), encoding="utf-8")
    return tmp_path

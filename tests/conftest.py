from __future__ import annotations

import pytest

from jhome import properties


@pytest.fixture(autouse=True)
def _isolate(monkeypatch, tmp_path):
    """Give every test an empty property registry and no user configuration."""

    monkeypatch.setattr(properties, "_properties", {})
    monkeypatch.setenv("JHOME_CONFIG", str(tmp_path / "jhome-config.json"))
    yield


@pytest.fixture
def windows(monkeypatch):
    from jhome import osinfo

    monkeypatch.setattr(osinfo, "os_name", lambda: "Windows 11")


@pytest.fixture
def unix(monkeypatch):
    from jhome import osinfo

    monkeypatch.setattr(osinfo, "os_name", lambda: "Linux")

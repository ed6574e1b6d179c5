from __future__ import annotations

import subprocess

import pytest

from wikidata_search.services import launcher
from wikidata_search.services.exceptions import LaunchError


def test_activation_url_prefixes_protocol():
    assert launcher.activation_url("https", "//www.wikidata.org/wiki/Q42") == (
        "https://www.wikidata.org/wiki/Q42"
    )


def test_xdg_open_spawns_without_shell(monkeypatch):
    spawned: list[tuple[list[str], dict]] = []

    def fake_popen(args, **kwargs):
        spawned.append((args, kwargs))

    monkeypatch.setattr(launcher.subprocess, "Popen", fake_popen)

    launcher.xdg_open("https://www.wikidata.org/wiki/Q42")

    args, kwargs = spawned[0]
    assert args == ["xdg-open", "https://www.wikidata.org/wiki/Q42"]
    assert kwargs["start_new_session"] is True
    assert kwargs["stdout"] is subprocess.DEVNULL


def test_xdg_open_missing_binary_raises_launch_error(monkeypatch):
    def fake_popen(args, **kwargs):
        raise FileNotFoundError(2, "No such file or directory", "xdg-open")

    monkeypatch.setattr(launcher.subprocess, "Popen", fake_popen)

    with pytest.raises(LaunchError):
        launcher.xdg_open("https://www.wikidata.org/wiki/Q42")

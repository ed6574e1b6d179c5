"""Open activated results in the desktop's default handler."""

from __future__ import annotations

import subprocess
from typing import Callable

from wikidata_search.services.exceptions import LaunchError

UrlOpener = Callable[[str], None]


def activation_url(protocol: str, url: str) -> str:
    """Entity urls are protocol-relative (``//www.wikidata.org/wiki/Q42``)."""

    return f"{protocol}:{url}"


def xdg_open(url: str) -> None:
    try:
        subprocess.Popen(
            ["xdg-open", url],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as exc:
        raise LaunchError(f"Failed to launch xdg-open: {exc}") from exc


__all__ = ["UrlOpener", "activation_url", "xdg_open"]

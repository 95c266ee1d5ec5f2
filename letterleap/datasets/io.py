from __future__ import annotations

from pathlib import Path

import requests

from letterleap.settings import REQUEST_TIMEOUT


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def read_bytes(source: Path | str, timeout: float = REQUEST_TIMEOUT) -> bytes:
    """
    Return the raw bytes of a local file or an http(s) resource.
    Raises FileNotFoundError for a missing path and requests.HTTPError for a
    non-2xx response.
    """
    s = str(source)
    if is_url(s):
        r = requests.get(s, timeout=timeout)
        r.raise_for_status()
        return r.content
    p = Path(s)
    if not p.exists():
        raise FileNotFoundError(p)
    return p.read_bytes()


def read_text(source: Path | str, timeout: float = REQUEST_TIMEOUT) -> str:
    """UTF-8 text of a file or URL; raises UnicodeDecodeError on bad bytes."""
    return read_bytes(source, timeout=timeout).decode("utf-8")

import re
from typing import Optional

import httpx

from raiblocks_py.shared.constants.node import DEFAULT_HOST, DEFAULT_PORT, DEFAULT_SCHEME

_HTTP_SCHEME = re.compile(r"^https?://", re.IGNORECASE)


def resolve_endpoint(url_base: Optional[str] = None) -> httpx.URL:
    """Resolve the configured base URL into the node endpoint.

    Args:
        url_base: "host", "host:port" or "scheme://host[:port][/path]". Empty means localhost.

    Returns:
        httpx.URL: The endpoint, always carrying an explicit port.

    Anything without an http(s) scheme is treated as a bare host: only the last
    path segment is kept, so local file paths are never loaded. A port equal to
    the scheme's default is normalised away by httpx and replaced with the node port.
    """
    url_base = (url_base or "").strip()
    if not url_base:
        url = httpx.URL(f"{DEFAULT_SCHEME}://{DEFAULT_HOST}")
    elif not _HTTP_SCHEME.match(url_base):
        host = url_base.rstrip("/").split("/")[-1] or DEFAULT_HOST
        url = httpx.URL(f"{DEFAULT_SCHEME}://{host}")
    else:
        url = httpx.URL(url_base)

    if url.port is None:
        url = url.copy_with(port=DEFAULT_PORT)
    # Re-render so an empty path shows as a trailing slash
    url = url.copy_with(path=url.path or "/")
    return url

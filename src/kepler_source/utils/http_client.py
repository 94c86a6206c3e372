import logging

import httpx

from .. import __version__

logger = logging.getLogger(__name__)

USER_AGENT = f"kepler-source/{__version__}"


def get_async_http_client(
    timeout: float = 10.0,
    connect_timeout: float = None,
    verify: bool = True,
) -> httpx.AsyncClient:
    """
    Returns a configured httpx.AsyncClient with:
    - Default timeouts (connect and read).
    - Standard User-Agent header.
    """
    c_timeout = connect_timeout if connect_timeout is not None else timeout
    http_timeout = httpx.Timeout(timeout, connect=c_timeout)

    headers = {"User-Agent": USER_AGENT}

    # No retries: a failed query aborts the fetch cycle and the next cycle tries again.
    return httpx.AsyncClient(
        timeout=http_timeout,
        headers=headers,
        verify=verify,
        follow_redirects=True,
    )

"""Bounded-time HEAD probes against a single URL."""

import asyncio
import logging

import httpx

REQUEST_TIMEOUT = 10.0

logger = logging.getLogger(__name__)


def build_client(timeout: float = REQUEST_TIMEOUT, max_connections: int | None = None) -> httpx.AsyncClient:
    """Create the shared client used for every probe in a run.

    The client-level timeout matches the per-request timeout so a stalled
    connect, read or TLS handshake can never outlive a probe.
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        limits=httpx.Limits(max_connections=max_connections),
        follow_redirects=True,
    )


async def probe_url(url: str, client: httpx.AsyncClient, timeout: float = REQUEST_TIMEOUT) -> int | None:
    """Send a HEAD request to ``url`` and return its status code if it is 2xx.

    Timeouts, connection errors, invalid URLs and non-2xx responses all
    return None. This function never raises.
    """
    try:
        response = await asyncio.wait_for(client.head(url), timeout=timeout)
    except TimeoutError:
        logger.debug("%s timed out after %ss", url, timeout)
        return None
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.debug("%s failed: %s", url, exc)
        return None
    except Exception as exc:
        logger.debug("%s failed unexpectedly: %r", url, exc)
        return None

    if not response.is_success:
        logger.debug("%s answered %s", url, response.status_code)
        return None
    return response.status_code

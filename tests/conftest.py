import io

import httpx
from rich.console import Console


def _capture_console() -> tuple[Console, io.StringIO]:
    """Create a Console that writes to a StringIO for test capturing."""
    buf = io.StringIO()
    return Console(file=buf, force_terminal=True, width=120), buf


def _mock_client(live: dict[str, set[str]]) -> httpx.AsyncClient:
    """Build a client whose hosts answer 200 only on the listed schemes.

    Args:
        live: Mapping of host -> schemes that answer, e.g. {"example.com": {"https"}}.
            Any other request fails with a connection error.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.scheme in live.get(request.url.host, set()):
            return httpx.Response(200)
        raise httpx.ConnectError("connection refused", request=request)

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))

"""Decide whether a single domain is live by probing HTTP, then HTTPS."""

import re
from dataclasses import dataclass
from enum import Enum

import httpx
from rich.console import Console
from rich.text import Text

from domain_checker.prober import REQUEST_TIMEOUT, probe_url
from domain_checker.sink import ResultSinks, SinkKind

SCHEMES = ("http", "https")

_HOST_RE = re.compile(r"^https?://([^/?#]+)")


class DomainStatus(Enum):
    LIVE = "live"
    DEAD = "dead"


@dataclass
class DomainVerdict:
    domain: str
    status: DomainStatus
    url: str | None = None
    status_code: int | None = None


STATUS_STYLES = {
    DomainStatus.LIVE: "green",
    DomainStatus.DEAD: "red",
}


def candidate_urls(domain: str) -> list[str]:
    """Return the URLs to probe for ``domain``, in probing order."""
    return [f"{scheme}://{domain}" for scheme in SCHEMES]


def extract_domain(url: str) -> str:
    """Strip the scheme and anything after the host from ``url``.

    Falls back to the full URL when it does not start with http:// or https://.
    """
    match = _HOST_RE.match(url)
    if match is None:
        return url
    return match.group(1)


def format_success(url: str, status_code: int, verbose: bool = False) -> str:
    if verbose:
        return f"✓ {url} - Active (Status: {status_code})"
    return f"✓ {url} - Active"


def format_failure(domain: str, verbose: bool = False) -> str:
    if verbose:
        return f"✗ {domain} - Failed (Tried both HTTP & HTTPS)"
    return f"✗ {domain} - Failed"


def format_verdict(verdict: DomainVerdict, verbose: bool = False) -> Text:
    """Render the one-line console status for a verdict."""
    if verdict.status == DomainStatus.LIVE:
        line = format_success(verdict.url, verdict.status_code, verbose)
    else:
        line = format_failure(verdict.domain, verbose)
    return Text(line, style=STATUS_STYLES[verdict.status])


async def check_domain(
    domain: str,
    client: httpx.AsyncClient,
    sinks: ResultSinks,
    *,
    timeout: float = REQUEST_TIMEOUT,
    verbose: bool = False,
    output_console: Console | None = None,
) -> DomainVerdict:
    """Probe ``domain`` over HTTP and then HTTPS, record and print the verdict.

    HTTPS is only tried when HTTP did not answer with a 2xx. A live domain is
    written to the live sink under its bare host; a dead one is written to the
    dead sink exactly as given.
    """
    verdict = DomainVerdict(domain=domain, status=DomainStatus.DEAD)
    for url in candidate_urls(domain):
        status_code = await probe_url(url, client, timeout)
        if status_code is not None:
            verdict = DomainVerdict(
                domain=domain,
                status=DomainStatus.LIVE,
                url=url,
                status_code=status_code,
            )
            break

    if verdict.status == DomainStatus.LIVE:
        await sinks.record(SinkKind.LIVE, extract_domain(verdict.url))
    else:
        await sinks.record(SinkKind.DEAD, domain)

    if output_console is not None:
        output_console.print(format_verdict(verdict, verbose), soft_wrap=True)
    return verdict

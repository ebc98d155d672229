"""Run domain checks concurrently behind a fixed-size admission limit."""

import asyncio
import logging
from collections.abc import Callable, Iterable

import httpx
from rich.console import Console

from domain_checker.checker import DomainVerdict, check_domain
from domain_checker.prober import REQUEST_TIMEOUT, build_client
from domain_checker.sink import ResultSinks

DEFAULT_CONCURRENCY = 100

logger = logging.getLogger(__name__)


async def check_domains(
    domains: Iterable[str],
    sinks: ResultSinks,
    *,
    concurrency: int = DEFAULT_CONCURRENCY,
    timeout: float = REQUEST_TIMEOUT,
    verbose: bool = False,
    client: httpx.AsyncClient | None = None,
    output_console: Console | None = None,
    on_result: Callable[[DomainVerdict], None] | None = None,
) -> list[DomainVerdict]:
    """Check every domain, with at most ``concurrency`` checks in flight.

    One task is started per domain, in input order. Each task waits for a
    slot before touching the network and holds it until its verdict has been
    recorded. A task that fails is logged and yields no verdict; it never
    stops the other tasks.

    Args:
        domains: Domain names to check. May be a lazy iterator over a file.
        sinks: Live/dead output files that verdicts are recorded to.
        concurrency: Maximum number of domain checks in flight at once.
        timeout: Per-request timeout in seconds.
        verbose: Include status codes and scheme details in console lines.
        client: HTTP client to probe with. One is created (and closed) if omitted.
        output_console: Console that receives one status line per domain.
        on_result: Optional callback invoked after each domain is checked.

    Returns:
        The verdicts, in input order, for every check that completed.
    """
    if concurrency < 1:
        raise ValueError(f"concurrency must be at least 1, got {concurrency}")

    owns_client = client is None
    if client is None:
        client = build_client(timeout, max_connections=concurrency)

    semaphore = asyncio.Semaphore(concurrency)

    async def _check_with_limit(domain: str) -> DomainVerdict:
        async with semaphore:
            verdict = await check_domain(
                domain,
                client,
                sinks,
                timeout=timeout,
                verbose=verbose,
                output_console=output_console,
            )
        if on_result is not None:
            on_result(verdict)
        return verdict

    try:
        tasks: list[tuple[str, asyncio.Task[DomainVerdict]]] = []
        for domain in domains:
            tasks.append((domain, asyncio.create_task(_check_with_limit(domain))))

        outcomes = await asyncio.gather(*(task for _, task in tasks), return_exceptions=True)
    finally:
        if owns_client:
            await client.aclose()

    verdicts: list[DomainVerdict] = []
    for (domain, _), outcome in zip(tasks, outcomes):
        if isinstance(outcome, BaseException):
            logger.error("Check for %s failed", domain, exc_info=outcome)
            continue
        verdicts.append(outcome)
    return verdicts

"""Domain Checker CLI - check which domains in a list are live or dead."""

import argparse
import asyncio
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.text import Text

from domain_checker import __version__
from domain_checker.checker import STATUS_STYLES, DomainStatus, DomainVerdict
from domain_checker.domain_list import open_domain_file, parse_domain_lines
from domain_checker.prober import REQUEST_TIMEOUT
from domain_checker.scheduler import DEFAULT_CONCURRENCY, check_domains
from domain_checker.sink import DEFAULT_DEAD_PATH, DEFAULT_LIVE_PATH, ResultSinks

console = Console()


def configure_logging(debug: bool = False, output_console: Console | None = None) -> None:
    """Route log records through rich, onto the same console as the status lines."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=output_console or console, show_path=False)],
        force=True,
    )
    # httpx logs every request at INFO/DEBUG; keep it out of the status lines.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def display_summary(verdicts: list[DomainVerdict], output_console: Console | None = None) -> None:
    """Print the live/dead totals for a finished run."""
    out = output_console or console
    live = sum(1 for v in verdicts if v.status == DomainStatus.LIVE)
    dead = sum(1 for v in verdicts if v.status == DomainStatus.DEAD)

    summary = Text()
    summary.append(f"Total: {len(verdicts)}", style="bold")
    summary.append(" | ")
    summary.append(f"Live: {live}", style=STATUS_STYLES[DomainStatus.LIVE])
    summary.append(" | ")
    summary.append(f"Dead: {dead}", style=STATUS_STYLES[DomainStatus.DEAD])
    out.print(summary, soft_wrap=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="domain-checker",
        description="Efficiently checks if domains are active or dead.",
    )
    parser.add_argument(
        "-f",
        "--file",
        required=True,
        metavar="FILE",
        help="Input file containing one domain per line",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show status codes in the per-domain lines",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log every failed probe (mixes log records into the output)",
    )
    parser.add_argument(
        "--concurrency",
        type=int,
        default=DEFAULT_CONCURRENCY,
        help=f"Max concurrent domain checks (default: {DEFAULT_CONCURRENCY})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=REQUEST_TIMEOUT,
        help=f"Per-request timeout in seconds (default: {REQUEST_TIMEOUT:g})",
    )
    parser.add_argument(
        "--live-output",
        metavar="FILE",
        default=DEFAULT_LIVE_PATH,
        help=f"File that live domains are written to (default: {DEFAULT_LIVE_PATH})",
    )
    parser.add_argument(
        "--dead-output",
        metavar="FILE",
        default=DEFAULT_DEAD_PATH,
        help=f"File that dead domains are written to (default: {DEFAULT_DEAD_PATH})",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.concurrency < 1:
        parser.error("--concurrency must be at least 1")
    if args.timeout <= 0:
        parser.error("--timeout must be greater than 0")

    configure_logging(args.debug)

    try:
        domain_file = open_domain_file(args.file)
    except OSError as exc:
        console.print(f"[bold red]Cannot read {escape(args.file)}:[/] {exc.strerror or exc}")
        return 1

    with domain_file:
        try:
            sinks = ResultSinks.open(args.live_output, args.dead_output)
        except OSError as exc:
            console.print(f"[bold red]Cannot create output file {escape(str(exc.filename))}:[/] {exc.strerror or exc}")
            return 1

        console.print("Checking domains...")
        with sinks:
            verdicts = asyncio.run(
                check_domains(
                    parse_domain_lines(domain_file),
                    sinks,
                    concurrency=args.concurrency,
                    timeout=args.timeout,
                    verbose=args.verbose,
                    output_console=console,
                )
            )

    display_summary(verdicts)
    console.print("Domain check completed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

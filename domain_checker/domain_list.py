"""Read candidate domains from a text file, one per line."""

from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import BinaryIO


def parse_domain_lines(lines: Iterable[bytes]) -> Iterator[str]:
    """Yield trimmed domains, skipping blank lines and lines that are not UTF-8."""
    for raw_line in lines:
        try:
            line = raw_line.decode("utf-8")
        except UnicodeDecodeError:
            continue
        domain = line.strip()
        if not domain:
            continue
        yield domain


def open_domain_file(path: str | Path) -> BinaryIO:
    """Open the domain list for lazy line-by-line reading.

    Raises:
        OSError: If the file cannot be opened.
    """
    return Path(path).open("rb")

"""Append-only, lock-guarded output files for live and dead domains."""

import asyncio
from enum import Enum
from pathlib import Path

DEFAULT_LIVE_PATH = "live.txt"
DEFAULT_DEAD_PATH = "dead.txt"


class SinkKind(Enum):
    LIVE = "live"
    DEAD = "dead"


class ResultSink:
    """A single output file that many tasks append lines to.

    The file is truncated when the sink is created. Each ``record`` call holds
    the lock for exactly one write-and-flush, so lines never interleave and
    every line is on disk before the next writer is admitted.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._file = self.path.open("w", encoding="utf-8")
        self._lock = asyncio.Lock()

    async def record(self, text: str) -> None:
        async with self._lock:
            self._file.write(f"{text}\n")
            self._file.flush()

    def close(self) -> None:
        self._file.close()

    @property
    def closed(self) -> bool:
        return self._file.closed


class ResultSinks:
    """The live/dead pair of sinks for one run."""

    def __init__(self, live: ResultSink, dead: ResultSink):
        self._sinks = {SinkKind.LIVE: live, SinkKind.DEAD: dead}

    @classmethod
    def open(
        cls,
        live_path: str | Path = DEFAULT_LIVE_PATH,
        dead_path: str | Path = DEFAULT_DEAD_PATH,
    ) -> "ResultSinks":
        """Create both output files, truncating any previous content.

        Raises:
            OSError: If either file cannot be created.
        """
        live = ResultSink(live_path)
        try:
            dead = ResultSink(dead_path)
        except OSError:
            live.close()
            raise
        return cls(live, dead)

    @property
    def live(self) -> ResultSink:
        return self._sinks[SinkKind.LIVE]

    @property
    def dead(self) -> ResultSink:
        return self._sinks[SinkKind.DEAD]

    async def record(self, kind: SinkKind, text: str) -> None:
        await self._sinks[kind].record(text)

    def close(self) -> None:
        for sink in self._sinks.values():
            sink.close()

    def __enter__(self) -> "ResultSinks":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

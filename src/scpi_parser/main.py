"""Line-oriented SCPI console.

Reads one query per line from stdin and writes the responses of each
query joined by ``;`` on a single line, the framing SCPI socket servers
use.  Unknown commands are reported as ``ERR "<path>"``.
"""

from __future__ import annotations

import logging
import os
import sys
import threading
from typing import Callable, Iterable, Sequence

from scpi_parser.dispatcher import ScpiParser
from scpi_parser.errors import MissingHandlerError

logger = logging.getLogger(__name__)


class DemoInstrument(ScpiParser):
    """Small simulated instrument with an identity and one variable."""

    IDENTITY = "scpi-parser,Demo Instrument,0,1.0"

    def __init__(self) -> None:
        super().__init__()
        self._lock = threading.Lock()
        self._x = 0
        self._errors: list[str] = []
        self.register("*IDN?", self.identify)
        self.register("*RST", self.reset)
        self.register("SYSTem:ERRor?", self.next_error)
        self.register("VAR:X", self.set_x)
        self.register("VAR:X?", self.get_x)

    def identify(self, args: Sequence[str]) -> str:
        return self.IDENTITY

    def reset(self, args: Sequence[str]) -> None:
        with self._lock:
            self._x = 0
            self._errors.clear()

    def next_error(self, args: Sequence[str]) -> str:
        with self._lock:
            if self._errors:
                return self._errors.pop(0)
        return '0,"No error"'

    def set_x(self, args: Sequence[str]) -> None:
        if not args:
            return None
        try:
            value = int(args[0])
        except ValueError:
            with self._lock:
                self._errors.append('-104,"Data type error"')
            return None
        with self._lock:
            self._x = value
        return None

    def get_x(self, args: Sequence[str]) -> str:
        with self._lock:
            return str(self._x)


def serve_lines(
    parser: ScpiParser, lines: Iterable[str], write: Callable[[str], object]
) -> None:
    """Answer each non-blank line of *lines* through *write*."""
    for line in lines:
        query = line.strip()
        if not query:
            continue
        try:
            results = parser.accept(query)
        except MissingHandlerError as exc:
            logger.info("Rejected query %r: no handler for %r", query, exc.path)
            write(f'ERR "{exc.path}"\n')
            continue
        responses = [result for result in results if result is not None]
        if responses:
            write(";".join(responses) + "\n")


def log_level_from_env(default: int = logging.WARNING) -> int:
    """Level named by ``SCPI_LOG_LEVEL``, or *default* when unset or unknown."""
    name = os.environ.get("SCPI_LOG_LEVEL", "").strip().upper()
    level = logging.getLevelName(name) if name else default
    return level if isinstance(level, int) else default


def main() -> None:
    logging.basicConfig(
        level=log_level_from_env(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    serve_lines(DemoInstrument(), sys.stdin, sys.stdout.write)
    sys.stdout.flush()


if __name__ == "__main__":
    main()

"""A child process that talks to its launcher over standard input and output."""

from __future__ import annotations

import argparse
import json
import sys
import threading
from typing import TextIO

PING_INTERVAL = 1.0

_REPLIES = {
    "quit": "bye\n",
    "ping": "pong\n",
}


def respond(line: str) -> str | None:
    """Return the reply the helper sends for a line from the launcher, if any."""
    return _REPLIES.get(line)


class _Output:
    """Serialises writes to a stream shared by several threads."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._lock = threading.Lock()

    def write(self, message: str) -> None:
        with self._lock:
            self._stream.write(message)
            self._stream.flush()


def _pinger(output: _Output, stop: threading.Event, interval: float) -> None:
    while not stop.wait(interval):
        try:
            output.write("ping\n")
        except (OSError, ValueError):
            return


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Helper process driven by a launcher.")
    parser.add_argument("-path", default=".", help="working path given by the launcher")
    parser.parse_args(argv)

    output = _Output(sys.stdout)
    stop = threading.Event()
    threading.Thread(target=_pinger, args=(output, stop, PING_INTERVAL), daemon=True).start()
    try:
        output.write("ready\n")
        for raw in sys.stdin:
            line = raw.rstrip("\r\n")
            print(f"launcher: {json.dumps(line, ensure_ascii=False)}", file=sys.stderr)
            reply = respond(line)
            if reply is not None:
                output.write(reply)
            if line == "quit":
                return 0
    finally:
        stop.set()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
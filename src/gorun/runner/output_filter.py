"""
Line filter placed between `go test` and the real stdout.
"""

import os
import sys
import threading
from typing import Optional, TextIO

from gorun.logging_config import logger


class GoTestOutputFilter:
    """
    Forward `go test` output line by line, dropping lines that start with a prefix.

    The prefix defaults to "ok" to hide the package summary line
    ("ok  \texample.com/pkg\t0.01s"). This is a heuristic: any other line
    starting with "ok" is dropped as well.

    Writes go into an OS pipe, so the write end can be handed to a
    subprocess as its stdout. A background thread drains the read end.
    close() must be called (or the filter used as a context manager) so the
    thread sees EOF; it returns only after every line was forwarded.
    """

    def __init__(self, sink: Optional[TextIO] = None, prefix: str = "ok"):
        self.sink = sink if sink is not None else sys.stdout
        self.prefix = prefix
        self._read_fd, self._write_fd = os.pipe()
        self._closed = False
        self._thread = threading.Thread(target=self._drain, name="go-test-output-filter", daemon=True)
        self._thread.start()

    def fileno(self) -> int:
        """Write end of the pipe, for use as a subprocess stdout."""
        return self._write_fd

    def write(self, data: bytes) -> int:
        """Feed raw output; always reports the whole buffer as consumed."""
        view = memoryview(data)
        while view:
            written = os.write(self._write_fd, view)
            view = view[written:]
        return len(data)

    def close(self) -> None:
        """Close the write end and wait until the drain thread is done."""
        if self._closed:
            return
        self._closed = True
        os.close(self._write_fd)
        self._thread.join()

    def __enter__(self) -> "GoTestOutputFilter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _drain(self) -> None:
        dropped = 0
        with os.fdopen(self._read_fd, "r", encoding="utf-8", errors="replace", newline="") as reader:
            for line in reader:
                text = line.rstrip("\r\n")
                # TODO: match the whole summary line ("ok<TAB>pkg<TAB>time") instead of a prefix
                if text.startswith(self.prefix):
                    dropped += 1
                    continue
                print(text, file=self.sink, flush=True)
        if dropped:
            logger.debug(f"Output filter dropped {dropped} line(s) starting with '{self.prefix}'")

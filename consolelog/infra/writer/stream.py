import sys
from typing import Optional, TextIO

from consolelog.core.ports.writer import Writer


class StreamWriter(Writer):
    """Writes text to a stream, flushing after every write.

    Without an explicit stream the process's current ``sys.stdout`` is looked
    up on each call, so redirections made after construction are honoured.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        if self._stream is None:
            return sys.stdout
        return self._stream

    def print(self, msg: str) -> None:
        stream = self.stream
        stream.write(msg)
        stream.flush()


class _StderrWriter(StreamWriter):
    def __init__(self) -> None:
        super().__init__()

    @property
    def stream(self) -> TextIO:
        return sys.stderr


def stdout_writer() -> StreamWriter:
    return StreamWriter()


def stderr_writer() -> StreamWriter:
    return _StderrWriter()

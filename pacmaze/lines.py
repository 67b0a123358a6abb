"""Line-by-line reading of map files."""

from __future__ import annotations

from typing import IO, AnyStr, Iterator

_CHUNK_SIZE = 4096


def iter_lines(stream: IO[AnyStr]) -> Iterator[AnyStr]:
    """Yield the lines of ``stream`` without their trailing newline.

    Lines are split on ``"\\n"`` alone. A final newline does not open an
    extra empty line, but empty lines in the middle are kept. Both text
    and binary streams are accepted; the items have the stream's type.
    """
    pending: AnyStr | None = None
    newline = None
    while True:
        chunk = stream.read(_CHUNK_SIZE)
        if not chunk:
            break
        if newline is None:
            newline = "\n" if isinstance(chunk, str) else b"\n"
        pending = chunk if pending is None else pending + chunk
        *complete, pending = pending.split(newline)
        yield from complete
    if pending:
        yield pending
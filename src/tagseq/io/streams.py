"""Open plain or gzip-compressed sources and destinations.

``"-"`` stands for standard input/output; those handles are never closed.
"""

from __future__ import annotations

import contextlib
import gzip
import io
import logging
import sys
from pathlib import Path
from typing import BinaryIO, Iterator

from ..constants import COMPRESS_LEVEL, GZIP_MAGIC, STDIO_PATH
from ..exc import OpenError

log = logging.getLogger("tagseq.io")


def _is_stdio(path: str | Path) -> bool:
    return isinstance(path, str) and path == STDIO_PATH


@contextlib.contextmanager
def open_input(path: str | Path) -> Iterator[BinaryIO]:
    """Yield a binary reader over *path*, decompressing gzip transparently.

    Raises
    ------
    OpenError
        The file does not exist or cannot be read.
    """
    with contextlib.ExitStack() as stack:
        if _is_stdio(path):
            raw = sys.stdin.buffer
            if not isinstance(raw, io.BufferedReader):
                # peek() needs a buffered reader; detach so stdin stays open
                raw = io.BufferedReader(raw)  # type: ignore[arg-type]
                stack.callback(raw.detach)
            name = '<stdin>'
        else:
            try:
                raw = stack.enter_context(open(path, 'rb'))
            except OSError as exc:
                raise OpenError(f"could not open file -> {path}: {exc}") from exc
            name = str(path)
        if raw.peek(2)[:2] == GZIP_MAGIC:
            log.debug("Opened %s (gzip)", name)
            yield stack.enter_context(gzip.GzipFile(fileobj=raw, mode='rb'))
        else:
            log.debug("Opened %s", name)
            yield raw


@contextlib.contextmanager
def open_output(
    path: str | Path,
    compress: bool = False,
    compresslevel: int = COMPRESS_LEVEL,
) -> Iterator[BinaryIO]:
    """Yield a binary writer to *path*, gzip-compressed if *compress*.

    Raises
    ------
    OpenError
        The destination cannot be created or written.
    """
    with contextlib.ExitStack() as stack:
        if _is_stdio(path):
            raw = sys.stdout.buffer
            stack.callback(raw.flush)
            name = '<stdout>'
        else:
            try:
                raw = stack.enter_context(open(path, 'wb'))
            except OSError as exc:
                raise OpenError(f"could not open file -> {path}: {exc}") from exc
            name = str(path)
        log.debug("Writing %s%s", name, " (gzip)" if compress else "")
        if compress:
            yield stack.enter_context(
                gzip.GzipFile(fileobj=raw, mode='wb', compresslevel=compresslevel)
            )
        else:
            yield raw

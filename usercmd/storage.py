import logging
import os
from pathlib import Path

from .errors import StorageError

logger = logging.getLogger(__name__)

DEFAULT_PERMISSIONS = 0o644


class Resource:
    """An open backing file. Reads and writes always cover the whole file.

    Nothing guards against another process writing the same file between
    `read_all` and `overwrite`; the last writer wins.
    """

    def __init__(self, path: Path, handle):
        self.path = path
        self._handle = handle

    @property
    def closed(self) -> bool:
        return self._handle.closed

    def read_all(self) -> bytes:
        try:
            self._handle.seek(0)
            return self._handle.read()
        except OSError as e:
            raise StorageError(str(self.path), e) from e

    def overwrite(self, data: bytes) -> None:
        try:
            self._handle.seek(0)
            self._handle.truncate()
            self._handle.write(data)
            self._handle.flush()
        except OSError as e:
            raise StorageError(str(self.path), e) from e
        logger.debug(f"Wrote {len(data)} bytes to {self.path}")

    def close(self) -> None:
        if not self._handle.closed:
            self._handle.close()

    def __enter__(self) -> "Resource":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def open_resource(name: str | Path, permissions: int = DEFAULT_PERMISSIONS) -> Resource:
    """Open `name` for reading and writing, creating it with `permissions` if absent."""
    path = Path(name)
    try:
        fd = os.open(path, os.O_RDWR | os.O_CREAT, permissions)
    except OSError as e:
        raise StorageError(str(path), e) from e

    try:
        handle = os.fdopen(fd, "r+b")
    except OSError as e:
        os.close(fd)
        raise StorageError(str(path), e) from e

    return Resource(path, handle)

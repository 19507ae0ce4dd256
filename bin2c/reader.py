from pathlib import Path

from .errors import ReadError


def read_binary_file(path: str | Path) -> bytes:
    """Read the whole content of *path* as raw bytes."""
    try:
        return Path(path).read_bytes()
    except OSError as err:
        raise ReadError(str(path), err.strerror or str(err)) from err

import os
import sys
import tempfile
from typing import TextIO

from .common import dprint, iprint
from .errors import WriteError


def print_lines(lines: list[str], stream: TextIO | None = None) -> None:
    """
    Write *lines* to *stream*. When it has a binary buffer, lines are encoded
    the same way as in write_lines_to_file() so that undecodable file names
    give the same bytes on stdout and in output files.
    """
    if stream is None:
        stream = sys.stdout

    binary = getattr(stream, 'buffer', None)
    if binary is None:
        for line in lines:
            stream.write(line)
        stream.flush()
        return

    stream.flush()
    for line in lines:
        binary.write(line.encode('utf-8', 'surrogateescape'))
    binary.flush()


def file_matches_lines(path: str, lines: list[str]) -> bool:
    """
    Check that the content of *path* is exactly the concatenation of *lines*.
    A missing file does not match.
    """
    try:
        with open(path, 'rb') as existing:
            for line in lines:
                expected = line.encode('utf-8', 'surrogateescape')
                if existing.read(len(expected)) != expected:
                    return False

            # the file must not be bigger
            return existing.read(1) == b''
    except OSError:
        return False


def _file_mode(path: str) -> int:
    try:
        return os.stat(path).st_mode & 0o777
    except FileNotFoundError:
        return 0o644


def write_lines_to_file(path: str, lines: list[str],
                        overwrite_always: bool = False) -> bool:
    """
    Write *lines* to *path* unless it already holds the same content.
    If *overwrite_always* is True the file is written in any case.

    Returns:
        True if the file has been written.

    Raises:
        WriteError: if the file cannot be written. The previous content of
            *path*, if any, is left untouched.
    """
    if not overwrite_always and file_matches_lines(path, lines):
        iprint(f"bin2c - No changes to file : '{path}'")
        return False

    # write through symlinks instead of replacing them
    target = os.path.realpath(path)
    outdir = os.path.dirname(target)
    try:
        fd, tmp_path = tempfile.mkstemp(dir=outdir, prefix='.bin2c-')
    except OSError as err:
        raise WriteError(path, err.strerror or str(err)) from err

    try:
        with open(fd, 'w', encoding='utf-8', errors='surrogateescape',
                  newline='\n') as outfile:
            for line in lines:
                outfile.write(line)
            outfile.flush()
        os.chmod(tmp_path, _file_mode(target))
        os.replace(tmp_path, target)
    except OSError as err:
        os.unlink(tmp_path)
        raise WriteError(path, err.strerror or str(err)) from err

    dprint(f"Wrote {len(lines)} lines to '{path}'")
    iprint(f"bin2c - Updating file : '{path}'")
    return True

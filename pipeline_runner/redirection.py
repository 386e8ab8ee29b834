"""Open and check the input and output files at the ends of a pipeline."""

from __future__ import annotations

import os
from dataclasses import dataclass

_OUTFILE_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
_OUTFILE_MODE = 0o777


class PipexError(Exception):
    """A pipeline could not be set up or one of its stages could not start."""


@dataclass
class IOFiles:
    """The two end files of a pipeline and their descriptors.

    A descriptor is None when the file could not be opened or has been closed.
    """

    infile: str
    outfile: str
    infile_fd: int | None = None
    outfile_fd: int | None = None

    def close(self) -> None:
        """Close whichever descriptors are still open."""
        for name in ("infile_fd", "outfile_fd"):
            fd = getattr(self, name)
            if fd is not None:
                try:
                    os.close(fd)
                except OSError:
                    pass
                setattr(self, name, None)

    def __enter__(self) -> IOFiles:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _try_open(path: str, flags: int, mode: int = 0o777) -> int | None:
    try:
        return os.open(path, flags, mode)
    except OSError:
        return None


def open_io_files(infile: str, outfile: str) -> IOFiles:
    """Open ``outfile`` for writing (created and truncated), then ``infile`` for reading.

    Failures are not raised here; they are reported by :func:`check_infile`
    and :func:`check_outfile` when a stage needs the file.
    """
    outfile_fd = _try_open(outfile, _OUTFILE_FLAGS, _OUTFILE_MODE)
    infile_fd = _try_open(infile, os.O_RDONLY)
    return IOFiles(infile, outfile, infile_fd, outfile_fd)


def _close_infile(files: IOFiles) -> None:
    if files.infile_fd is not None:
        os.close(files.infile_fd)
        files.infile_fd = None


def _close_outfile(files: IOFiles) -> None:
    if files.outfile_fd is not None:
        os.close(files.outfile_fd)
        files.outfile_fd = None


def check_infile(files: IOFiles) -> int:
    """Return the input descriptor, or raise PipexError if it cannot be read."""
    if files.infile_fd is None:
        raise PipexError("Error: Infile does not exist.")
    if not os.access(files.infile, os.F_OK):
        _close_infile(files)
        raise PipexError("Error: Infile does not exist.")
    if not os.access(files.infile, os.R_OK):
        _close_infile(files)
        raise PipexError("Error: No read permission for infile.")
    return files.infile_fd


def check_outfile(files: IOFiles) -> int:
    """Return the output descriptor, or raise PipexError if it cannot be written."""
    if files.outfile_fd is None:
        raise PipexError("Error: Unable to open outfile.")
    if not os.access(files.outfile, os.W_OK):
        _close_outfile(files)
        raise PipexError("Error: No write permission for outfile.")
    return files.outfile_fd
import os

import pytest

from pipeline_runner.redirection import (
    IOFiles,
    PipexError,
    check_infile,
    check_outfile,
    open_io_files,
)


def test_open_creates_and_truncates_outfile(tmp_path):
    infile = tmp_path / "in.txt"
    infile.write_text("data")
    outfile = tmp_path / "out.txt"
    outfile.write_text("old contents")
    with open_io_files(str(infile), str(outfile)) as files:
        assert files.outfile_fd is not None
        assert files.infile_fd is not None
    assert outfile.read_text() == ""


def test_open_creates_missing_outfile(tmp_path):
    outfile = tmp_path / "new.txt"
    files = open_io_files(str(tmp_path / "missing"), str(outfile))
    files.close()
    assert outfile.exists()


def test_check_infile_returns_readable_descriptor(tmp_path):
    infile = tmp_path / "in.txt"
    infile.write_text("hello")
    files = open_io_files(str(infile), str(tmp_path / "out.txt"))
    try:
        fd = check_infile(files)
        assert os.read(fd, 100) == b"hello"
    finally:
        files.close()


def test_check_infile_missing_raises(tmp_path):
    files = open_io_files(str(tmp_path / "missing"), str(tmp_path / "out.txt"))
    try:
        with pytest.raises(PipexError, match="Infile does not exist"):
            check_infile(files)
    finally:
        files.close()


def test_check_outfile_returns_writable_descriptor(tmp_path):
    outfile = tmp_path / "out.txt"
    files = open_io_files(str(tmp_path / "missing"), str(outfile))
    try:
        fd = check_outfile(files)
        os.write(fd, b"written")
    finally:
        files.close()
    assert outfile.read_bytes() == b"written"


def test_check_outfile_unopenable_raises(tmp_path):
    files = open_io_files(str(tmp_path / "missing"), str(tmp_path))
    try:
        assert files.outfile_fd is None
        with pytest.raises(PipexError, match="Unable to open outfile"):
            check_outfile(files)
    finally:
        files.close()


def test_close_clears_descriptors_and_is_repeatable(tmp_path):
    infile = tmp_path / "in.txt"
    infile.write_text("x")
    files = open_io_files(str(infile), str(tmp_path / "out.txt"))
    files.close()
    files.close()
    assert (files.infile_fd, files.outfile_fd) == (None, None)


def test_closed_files_fail_checks(tmp_path):
    files = IOFiles(str(tmp_path / "a"), str(tmp_path / "b"))
    with pytest.raises(PipexError):
        check_infile(files)
    with pytest.raises(PipexError):
        check_outfile(files)
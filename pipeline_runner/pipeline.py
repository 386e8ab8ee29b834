"""Run a chain of commands joined by pipes, reading a file and writing a file.

Usage: ``infile "cmd1 args" "cmd2 args" ... outfile``, which behaves like
``< infile cmd1 args | cmd2 args | ... > outfile``.
"""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from .redirection import PipexError, check_infile, check_outfile, open_io_files
from .splitting import split
from .textops import strjoin

_EXPLICIT_PREFIXES = ("./", "../", "/")
_FAILED = 1


def search_paths(env: Mapping[str, str]) -> list[str]:
    """Return the directories listed in the ``PATH`` entry of ``env``."""
    value = env.get("PATH")
    if value is None:
        return []
    return split(value, ":")


def join_path_command(path: str, command: str) -> str:
    """Return ``command`` placed inside directory ``path``."""
    return strjoin(path, strjoin("/", command))


def is_explicit_path(command: str) -> bool:
    """Return True when ``command`` names a file directly rather than a PATH lookup."""
    return command.startswith(_EXPLICIT_PREFIXES)


def _is_runnable(candidate: str) -> bool:
    return os.access(candidate, os.X_OK) and not os.path.isdir(candidate)


def resolve_command(command: str, paths: Sequence[str]) -> str | None:
    """Return the executable file that ``command`` refers to, or None.

    A command starting with ``./``, ``../`` or ``/`` is tried as given first;
    then each directory in ``paths`` is tried in order.
    """
    if is_explicit_path(command) and _is_runnable(command):
        return command
    for directory in paths:
        candidate = join_path_command(directory, command)
        if _is_runnable(candidate):
            return candidate
    return None


def parse_commands(args: Sequence[str]) -> list[list[str]]:
    """Split each command string on spaces into its argument list."""
    commands = []
    for arg in args:
        words = split(arg, " ")
        if not words:
            raise PipexError(f"Error: Empty command: {arg!r}.")
        commands.append(words)
    return commands


def _report(message: str) -> None:
    sys.stderr.write(message + "\n")
    sys.stderr.flush()


@dataclass
class Pipeline:
    """A chain of commands from ``infile`` to ``outfile``."""

    infile: str
    outfile: str
    commands: list[list[str]]
    paths: list[str] = field(default_factory=list)

    @classmethod
    def from_argv(cls, argv: Sequence[str], env: Mapping[str, str] | None = None) -> Pipeline:
        """Build a pipeline from ``[infile, command..., outfile]``."""
        if env is None:
            env = os.environ
        if not argv:
            raise PipexError("Error: No arguments provided.")
        if len(argv) < 2:
            raise PipexError("Error: Expected an infile, commands and an outfile.")
        return cls(
            infile=argv[0],
            outfile=argv[-1],
            commands=parse_commands(argv[1:-1]),
            paths=search_paths(env),
        )

    def _start(self, args: list[str], stdin_fd: int, stdout_fd: int) -> subprocess.Popen | None:
        executable = resolve_command(args[0], self.paths)
        if executable is None:
            return None
        try:
            return subprocess.Popen(
                args,
                executable=executable,
                stdin=stdin_fd,
                stdout=stdout_fd,
                env={},
            )
        except OSError:
            return None

    def run(self) -> list[int]:
        """Run every command and wait for all of them.

        Returns the exit status of each command in order; a command that
        could not be started counts as status 1.
        """
        files = open_io_files(self.infile, self.outfile)
        last = len(self.commands) - 1
        started: list[subprocess.Popen | None] = []
        previous_read: int | None = None
        try:
            for index, args in enumerate(self.commands):
                read_end, write_end = os.pipe() if index != last else (None, None)
                process = None
                try:
                    stdin_fd = check_infile(files) if index == 0 else previous_read
                    stdout_fd = check_outfile(files) if index == last else write_end
                    process = self._start(args, stdin_fd, stdout_fd)
                except PipexError as exc:
                    _report(str(exc))
                started.append(process)
                if previous_read is not None:
                    os.close(previous_read)
                if write_end is not None:
                    os.close(write_end)
                previous_read = read_end
        finally:
            if previous_read is not None:
                os.close(previous_read)
            files.close()
        return [_FAILED if process is None else process.wait() for process in started]


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point; returns the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        pipeline = Pipeline.from_argv(list(argv), os.environ)
    except PipexError as exc:
        _report(str(exc))
        return 1
    pipeline.run()
    return 0
"""Run a chain of commands from an input file to an output file.

This is the shell's ``< infile cmd1 | cmd2 | ... | cmdN > outfile``.
"""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Iterable, List, Mapping, Optional, Sequence, Union

from pipex.paths import find_command, get_path
from pipex.strings import split

INPUT_ERR = "Invalid number of arguments.\n"
PATH_ERR = "Path not found.\n"
CMD_ERR = "Command not found.\n"

COMMAND_NOT_FOUND = 127


class PipexError(Exception):
    """A failure that stops the pipeline, with the exit status to report."""

    def __init__(self, message: str, status: int = 1) -> None:
        super().__init__(message)
        self.status = status


_Stage = Union[subprocess.Popen, int]


def _report(message: str) -> None:
    sys.stderr.write(message)
    sys.stderr.flush()


def _close(fd: Optional[int]) -> None:
    if fd is not None:
        os.close(fd)


def _open_input(infile: str) -> Optional[int]:
    try:
        return os.open(infile, os.O_RDONLY)
    except OSError as exc:
        _report(f"Input: {os.strerror(exc.errno)}\n")
        return None


def _launch(
    command: str,
    in_fd: Optional[int],
    out_fd: int,
    path_dirs: Sequence[str],
    env: Mapping[str, str],
) -> _Stage:
    """Start one command, or return the status it would have exited with."""
    if in_fd is None:
        return 1
    args = split(command, " ")
    program = find_command(path_dirs, args[0]) if args else None
    if program is None:
        _report(CMD_ERR)
        return COMMAND_NOT_FOUND
    try:
        return subprocess.Popen(
            args, executable=program, stdin=in_fd, stdout=out_fd, env=dict(env)
        )
    except OSError as exc:
        _report(f"Execve: {os.strerror(exc.errno) if exc.errno else exc}\n")
        return 1


def _wait(stage: _Stage) -> int:
    if isinstance(stage, int):
        return stage
    code = stage.wait()
    # A process ended by a signal has no exit code of its own.
    return code if code >= 0 else 0


def run_pipeline(
    infile: str,
    commands: Iterable[str],
    outfile: str,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """Run ``commands`` as a pipeline from ``infile`` into ``outfile``.

    Returns the exit status of the last command. A command that cannot be
    found counts as exit status 127; when the input file cannot be opened
    the first command counts as exit status 1. Raises PipexError when a
    pipe or the output file cannot be opened.
    """
    command_list = list(commands)
    if len(command_list) < 2:
        raise PipexError(INPUT_ERR.rstrip("\n"), 1)
    environment = dict(os.environ if env is None else env)

    in_fd = _open_input(infile)
    path_value = get_path(environment)
    if path_value is None:
        _report(PATH_ERR)
        path_dirs: List[str] = []
    else:
        path_dirs = split(path_value, ":")

    stages: List[_Stage] = []
    try:
        for command in command_list[:-1]:
            try:
                read_fd, write_fd = os.pipe()
            except OSError as exc:
                raise PipexError(f"Pipe: {os.strerror(exc.errno)}", 1) from exc
            try:
                stages.append(_launch(command, in_fd, write_fd, path_dirs, environment))
            finally:
                os.close(write_fd)
                _close(in_fd)
                in_fd = read_fd
        try:
            out_fd = os.open(
                outfile, os.O_TRUNC | os.O_CREAT | os.O_RDWR, 0o644
            )
        except OSError as exc:
            raise PipexError(f"Output: {os.strerror(exc.errno)}", 1) from exc
        try:
            stages.append(
                _launch(command_list[-1], in_fd, out_fd, path_dirs, environment)
            )
        finally:
            os.close(out_fd)
    finally:
        _close(in_fd)
        statuses = [_wait(stage) for stage in stages]
    return statuses[-1]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry: ``infile cmd1 cmd2 ... outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 4:
        _report(INPUT_ERR)
        return 1
    try:
        return run_pipeline(args[0], args[1:-1], args[-1])
    except PipexError as exc:
        _report(f"{exc}\n")
        return exc.status


if __name__ == "__main__":
    sys.exit(main())
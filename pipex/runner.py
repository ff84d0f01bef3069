"""Run ``infile cmd1 | cmd2 > outfile`` as a two-stage pipeline."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from contextlib import ExitStack
from typing import IO, Any

from pipex.environment import find_executable
from pipex.text import split_words

USAGE = "./pipex infile cmd cmd outfile"


class UsageError(Exception):
    """Raised when the command line does not have exactly four operands."""

    def __init__(self, message: str = USAGE) -> None:
        super().__init__(message)


def open_file(path: str, for_output: bool) -> IO[bytes]:
    """Open ``path`` for reading, or create and truncate it for writing."""
    if for_output:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o777)
        return os.fdopen(fd, "wb")
    return open(path, "rb")


def _start(command: str, env: dict[str, str], stdin: Any, stdout: Any) -> subprocess.Popen | None:
    """Start one stage; report and return None when it cannot be executed."""
    argv = split_words(command, " ")
    path = find_executable(command, env)
    if "/" not in path:
        path = f"./{path}"
    try:
        return subprocess.Popen(
            argv or [path], executable=path, stdin=stdin, stdout=stdout, env=env
        )
    except OSError:
        name = argv[0] if argv else ""
        sys.stderr.write(f"pipex: command not found: {name}\n")
        sys.stderr.flush()
        return None


def _shell_status(returncode: int) -> int:
    return 128 - returncode if returncode < 0 else returncode


def run_pipeline(
    infile: str,
    first_command: str,
    second_command: str,
    outfile: str,
    env: Mapping[str, str] | None = None,
) -> int:
    """Feed ``infile`` through both commands into ``outfile``.

    Returns the exit status of the second command, or 0 when it could not
    run. An unreadable input file skips the first command; an unwritable
    output file skips the second.
    """
    environ = dict(os.environ if env is None else env)
    with ExitStack() as stack:
        try:
            source = stack.enter_context(open_file(infile, False))
        except OSError:
            source = None
        try:
            sink = stack.enter_context(open_file(outfile, True))
        except OSError:
            sink = None

        producer = None
        if source is not None:
            target = subprocess.PIPE if sink is not None else subprocess.DEVNULL
            producer = _start(first_command, environ, source, target)

        if sink is None:
            if producer is not None:
                producer.wait()
            return 0

        feed = producer.stdout if producer is not None else subprocess.DEVNULL
        consumer = _start(second_command, environ, feed, sink)
        if producer is not None:
            producer.stdout.close()
        status = _shell_status(consumer.wait()) if consumer is not None else 0
        if producer is not None:
            producer.wait()
    return status


def _parse(argv: Sequence[str]) -> tuple[str, str, str, str]:
    if len(argv) != 4:
        raise UsageError()
    infile, first, second, outfile = argv
    return infile, first, second, outfile


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``pipex infile cmd1 cmd2 outfile``."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        infile, first, second, outfile = _parse(args)
    except UsageError as error:
        sys.stderr.write(f"{error}\n")
        return 0
    return run_pipeline(infile, first, second, outfile, os.environ)


if __name__ == "__main__":
    sys.exit(main())
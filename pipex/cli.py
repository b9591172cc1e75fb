"""Run ``< infile cmd1 | cmd2 > outfile`` from four arguments."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping
from typing import Optional, Union

from pipex.output import put_endl
from pipex.resolve import CommandError, resolve_command

_FAILURE = 1

_Started = Union[subprocess.Popen, int]


def _report(name: str, exc: OSError) -> None:
    put_endl(f"{name}: {exc.strerror}", sys.stderr)


def _launch(command: str, stdin: int, stdout: int, env: Mapping[str, str]) -> _Started:
    """Start ``command``, or return the exit status it fails with."""
    try:
        resolved = resolve_command(command, env)
    except CommandError as exc:
        put_endl(str(exc), sys.stderr)
        return exc.exit_status
    try:
        return subprocess.Popen(
            resolved.argv,
            executable=resolved.program,
            stdin=stdin,
            stdout=stdout,
            env=dict(env),
        )
    except OSError:
        return _FAILURE


def _wait(started: _Started) -> int:
    if isinstance(started, subprocess.Popen):
        return started.wait()
    return started


def run_pipeline(
    infile: str,
    first: str,
    second: str,
    outfile: str,
    env: Optional[Mapping[str, str]] = None,
) -> tuple[int, int]:
    """Pipe ``first`` reading ``infile`` into ``second`` writing ``outfile``.

    Both stages run concurrently; failures are reported on standard error.
    Returns the exit status of each stage.
    """
    environment = dict(os.environ if env is None else env)
    read_fd, write_fd = os.pipe()

    try:
        try:
            in_fd = os.open(infile, os.O_RDONLY)
        except OSError as exc:
            _report(infile, exc)
            first_started: _Started = _FAILURE
        else:
            try:
                first_started = _launch(first, in_fd, write_fd, environment)
            finally:
                os.close(in_fd)
    finally:
        os.close(write_fd)

    try:
        try:
            out_fd = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
        except OSError as exc:
            _report(outfile, exc)
            second_started: _Started = _FAILURE
        else:
            try:
                second_started = _launch(second, read_fd, out_fd, environment)
            finally:
                os.close(out_fd)
    finally:
        os.close(read_fd)

    return _wait(first_started), _wait(second_started)


def main(argv: Optional[list[str]] = None) -> int:
    """Command entry point: ``pipex infile cmd1 cmd2 outfile``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 4:
        return 1
    infile, first, second, outfile = args
    run_pipeline(infile, first, second, outfile)
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Locating the program behind a command line, the way a shell would."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Optional

from pipex.textops import split


class CommandError(Exception):
    """A command that cannot be started; ``exit_status`` is what a shell reports."""

    exit_status = 1
    prefix = "command error"

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"{self.prefix}: {self.name}"


class CommandNotFoundError(CommandError):
    """No program of that name exists."""

    exit_status = 127
    prefix = "command not found"


class CommandPermissionError(CommandError):
    """The program exists but may not be executed."""

    exit_status = 126
    prefix = "Permission denied"


@dataclass(frozen=True)
class ResolvedCommand:
    """The program file to execute and the argument vector to give it."""

    program: str
    argv: list[str] = field(default_factory=list)


def get_path(env: Optional[Mapping[str, str]]) -> Optional[str]:
    """Return the ``PATH`` value of ``env``, or ``None`` if it has none."""
    if env is None:
        return None
    return env.get("PATH")


def check_executable(path: str) -> str:
    """Return ``path`` if it names an executable file, else raise a CommandError."""
    if not path or not os.access(path, os.F_OK):
        raise CommandNotFoundError(path)
    if not os.access(path, os.X_OK):
        raise CommandPermissionError(path)
    return path


def find_in_path(name: str, directories: list[str]) -> Optional[str]:
    """Return the first ``directory/name`` that exists, or ``None``."""
    for directory in directories:
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.F_OK):
            return candidate
    return None


def is_direct_path(
    cmd: str, path: Optional[str], env: Optional[Mapping[str, str]]
) -> bool:
    """True when ``cmd`` is used as a file name rather than looked up in ``PATH``."""
    return (
        cmd.startswith("./")
        or path is None
        or env is None
        or cmd.startswith("/")
        or not cmd
    )


def resolve_command(cmd: str, env: Optional[Mapping[str, str]]) -> ResolvedCommand:
    """Find the program a command line runs.

    A command used as a file name is checked as a whole, arguments included.
    Otherwise its first word is searched for in the directories of ``PATH``.
    """
    path = get_path(env)
    if is_direct_path(cmd, path, env):
        check_executable(cmd)
        return ResolvedCommand(cmd, split(cmd, " "))
    words = split(cmd, " ")
    if not words:
        raise CommandNotFoundError(cmd)
    found = find_in_path(words[0], split(path, ":"))
    if found is None:
        raise CommandNotFoundError(words[0])
    check_executable(found)
    return ResolvedCommand(found, words)
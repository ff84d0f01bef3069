"""Environment lookup and resolution of commands against PATH."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping

from pipex.text import split_words

Environment = Mapping[str, str] | Iterable[str]


def lookup_env(name: str, env: Environment) -> str | None:
    """Return the value of ``name`` in ``env``, or None when it is absent.

    ``env`` is either a mapping or a sequence of ``NAME=value`` entries; with
    entries the first one whose name matches wins.
    """
    if isinstance(env, Mapping):
        return env.get(name)
    for entry in env:
        key, _, value = entry.partition("=")
        if key == name:
            return value
    return None


def find_executable(command: str, env: Environment) -> str:
    """Resolve the first word of ``command`` against the PATH in ``env``.

    Returns the full path of the first executable match, or ``command``
    itself, unchanged, when nothing is found.
    """
    words = split_words(command, " ")
    search_path = lookup_env("PATH", env)
    if not words or search_path is None:
        return command
    program = words[0]
    for directory in split_words(search_path, ":"):
        candidate = f"{directory}/{program}"
        if os.access(candidate, os.F_OK | os.X_OK):
            return candidate
    return command
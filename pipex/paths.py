"""Locating the search path and resolving command names to executables."""

from __future__ import annotations

import os
from typing import Iterable, Mapping, Optional, Union

Environment = Union[Mapping[str, str], Iterable[str]]


def get_path(env: Optional[Environment]) -> Optional[str]:
    """Return the value of the first environment entry that starts with ``PATH``.

    ``env`` is either a mapping of names to values or a sequence of
    ``NAME=value`` strings. The match is on the first four characters of
    the entry, and the value is whatever follows the fifth character.
    Returns None when there is no environment or no such entry.
    """
    if env is None:
        return None
    if isinstance(env, Mapping):
        entries: Iterable[str] = (f"{name}={value}" for name, value in env.items())
    else:
        entries = env
    for entry in entries:
        if entry.startswith("PATH"):
            return entry[5:]
    return None


def find_command(path_dirs: Iterable[str], cmd: str) -> Optional[str]:
    """Resolve ``cmd`` to an executable file.

    ``cmd`` itself is used when it is executable as given; otherwise each
    directory is tried in order. Returns None when nothing is found.
    """
    if not cmd:
        return None
    if os.access(cmd, os.X_OK):
        return cmd
    for directory in path_dirs:
        candidate = f"{directory}/{cmd}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None
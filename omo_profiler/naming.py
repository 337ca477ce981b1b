# file: omo_profiler/naming.py
from __future__ import annotations

import re
from typing import Optional

from .errors import EmptyNameError, InvalidCharacterError
from .storage_paths import PROFILE_NAME_RE, StoragePaths
from . import profile_store

_DISALLOWED_RE = re.compile(r"[^A-Za-z0-9_-]")


def validate_name(name: str) -> None:
    """Raise EmptyNameError / InvalidCharacterError unless `name` is a strict identifier."""
    if not name:
        raise EmptyNameError()
    if not PROFILE_NAME_RE.fullmatch(name):
        raise InvalidCharacterError(name)


def sanitize_name(name: str) -> str:
    """
    Turn arbitrary user input into a filesystem-safe profile name.

    Examples:
      "My Config!"      -> "MyConfig"
      "---invalid---"   -> "invalid"
      "@@@"             -> ""   (caller must treat as "no usable name")

    Disallowed characters are deleted, not replaced.
    """
    cleaned = _DISALLOWED_RE.sub("", name or "")
    return cleaned.strip("-_")


def unique_name(base: str, paths: Optional[StoragePaths] = None) -> str:
    """Return `base`, or the first free `base-N` (N = 1, 2, ...) if it is taken."""
    candidate = base
    suffix = 1
    while profile_store.profile_exists(candidate, paths):
        candidate = f"{base}-{suffix}"
        suffix += 1
    return candidate

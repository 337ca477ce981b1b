# file: omo_profiler/errors.py
"""Exception taxonomy for omo-profiler."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class ProfilerError(Exception):
    """Base exception for all profile and backup errors."""


# ---------------------------------------------------------------------------
# Missing things
# ---------------------------------------------------------------------------


class NotFoundError(ProfilerError):
    """A named profile, backup or source file does not exist."""


class ProfileNotFoundError(NotFoundError):
    def __init__(self, name: str, path: Optional[Path] = None) -> None:
        self.name = name
        self.path = path
        super().__init__(f"profile not found: {name}")


class BackupNotFoundError(NotFoundError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"backup not found: {path}")


class SourceNotFoundError(NotFoundError):
    """A file to read from (import source, backup source) is missing."""

    def __init__(self, path: Path, message: Optional[str] = None) -> None:
        self.path = path
        super().__init__(message or f"file not found: {path}")


class BackupSourceNotFoundError(SourceNotFoundError):
    def __init__(self, path: Path) -> None:
        super().__init__(path, f"config file does not exist: {path}")


# ---------------------------------------------------------------------------
# Bad content / bad names
# ---------------------------------------------------------------------------


class ConfigParseError(ProfilerError):
    """A document expected to be a JSON config object could not be parsed."""

    def __init__(self, path: Optional[Path], details: str) -> None:
        self.path = path
        self.details = details
        where = f" in {path}" if path is not None else ""
        super().__init__(f"invalid config{where}: {details}")


class InvalidNameError(ProfilerError):
    """Profile name fails the naming rules."""


class EmptyNameError(InvalidNameError):
    def __init__(self) -> None:
        super().__init__("profile name cannot be empty")


class InvalidCharacterError(InvalidNameError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            "profile name must contain only letters, numbers, underscores, and hyphens"
        )


# ---------------------------------------------------------------------------
# Conflicts and I/O
# ---------------------------------------------------------------------------


class ProfileExistsError(ProfilerError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"profile '{name}' already exists")


class DestinationExistsError(ProfilerError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"destination file already exists: {path}. Use --force to overwrite"
        )


class StorageError(ProfilerError):
    """Filesystem read/write/permission failure (wraps the OSError)."""

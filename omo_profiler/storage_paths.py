# file: omo_profiler/storage_paths.py
"""
Where everything lives on disk.

    <base>/oh-my-opencode.json          active configuration
    <base>/.active-profile              last known active profile (hint)
    <base>/profiles/<name>.json         saved profiles
    <base>/profiles/oh-my-opencode.json.bak.<YYYY-MM-DD-HHMMSS>

Every function in this package takes an optional ``paths`` argument; None
means ``StoragePaths.default()``. Tests pass ``StoragePaths.at(tmp_path)``.
No other module builds these paths itself.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .errors import EmptyNameError, InvalidCharacterError, StorageError

PROFILE_DIR_NAME = "profiles"
CONFIG_FILE_NAME = "oh-my-opencode.json"
ACTIVE_HINT_FILE_NAME = ".active-profile"

PROFILE_NAME_RE = re.compile(r"[A-Za-z0-9_-]+")


def _default_base_dir() -> Path:
    return Path.home() / ".config" / "opencode"


@dataclass(frozen=True)
class StoragePaths:
    base_dir: Path

    @classmethod
    def default(cls) -> "StoragePaths":
        return cls(_default_base_dir())

    @classmethod
    def at(cls, base_dir: Union[str, Path]) -> "StoragePaths":
        return cls(Path(base_dir).expanduser())

    @property
    def profiles_dir(self) -> Path:
        return self.base_dir / PROFILE_DIR_NAME

    @property
    def config_file(self) -> Path:
        return self.base_dir / CONFIG_FILE_NAME

    @property
    def backup_dir(self) -> Path:
        return self.profiles_dir

    @property
    def active_hint_file(self) -> Path:
        return self.base_dir / ACTIVE_HINT_FILE_NAME

    def profile_file(self, name: str) -> Path:
        """
        Path of the saved profile called `name`.

        Raises EmptyNameError / InvalidCharacterError for names that are not
        strict identifiers, so a name can never point outside profiles/.
        """
        if not name:
            raise EmptyNameError()
        if not PROFILE_NAME_RE.fullmatch(name):
            raise InvalidCharacterError(name)
        return self.profiles_dir / f"{name}.json"

    def ensure_dirs(self) -> None:
        """
        Create base_dir and profiles/ if missing. Safe to call repeatedly.

        Raises StorageError when creation is blocked (permissions, or a
        regular file sitting where a directory should be).
        """
        for d in (self.base_dir, self.profiles_dir):
            try:
                d.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise StorageError(f"Could not create directory {d}: {exc}") from exc


def resolve_paths(paths: Optional[StoragePaths] = None) -> StoragePaths:
    return paths if paths is not None else StoragePaths.default()

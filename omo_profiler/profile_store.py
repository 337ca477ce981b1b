# file: omo_profiler/profile_store.py
"""
Named profiles stored as one JSON file each under <base>/profiles/.

The filename stem is the profile name, so names are unique by construction.
Every name is checked by StoragePaths.profile_file before any path is
built, so an invalid name raises InvalidNameError and touches nothing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .config_doc import Config, dump_config, parse_config
from .errors import InvalidNameError, ProfileNotFoundError, StorageError
from .storage_paths import StoragePaths, resolve_paths

logger = logging.getLogger(__name__)

PROFILE_SUFFIX = ".json"


@dataclass
class Profile:
    name: str
    config: Config = field(default_factory=dict)
    path: Optional[Path] = None


# ---------------------------------------------------------------------------
# Load / save
# ---------------------------------------------------------------------------


def load_profile(name: str, paths: Optional[StoragePaths] = None) -> Profile:
    """
    Load <profiles_dir>/<name>.json.

    Raises ProfileNotFoundError if the file is missing, ConfigParseError if
    it is not a JSON object, StorageError for any other read failure.
    """
    path = resolve_paths(paths).profile_file(name)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ProfileNotFoundError(name, path) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise StorageError(f"Failed to read profile {path}: {exc}") from exc

    return Profile(name=name, config=parse_config(text, path), path=path)


def save_profile(profile: Profile, paths: Optional[StoragePaths] = None) -> Path:
    """
    Write the profile to its canonical path and return that path.

    Creates the profiles directory if needed. On success profile.path is
    updated; on failure StorageError is raised and profile.path is untouched.
    """
    p = resolve_paths(paths)
    path = p.profile_file(profile.name)
    p.ensure_dirs()

    try:
        data = dump_config(profile.config)
    except (TypeError, ValueError) as exc:
        raise StorageError(f"Profile '{profile.name}' is not serializable: {exc}") from exc

    try:
        path.write_text(data, encoding="utf-8")
    except OSError as exc:
        raise StorageError(f"Failed to write profile {path}: {exc}") from exc

    profile.path = path
    logger.debug("saved profile %s to %s", profile.name, path)
    return path


def delete_profile(name: str, paths: Optional[StoragePaths] = None) -> None:
    path = resolve_paths(paths).profile_file(name)
    try:
        path.unlink()
    except FileNotFoundError as exc:
        raise ProfileNotFoundError(name, path) from exc
    except OSError as exc:
        raise StorageError(f"Failed to delete profile {path}: {exc}") from exc
    logger.debug("deleted profile %s", name)


# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------


def list_profiles(paths: Optional[StoragePaths] = None) -> List[str]:
    """
    Names of all saved profiles, in directory enumeration order.

    The order is whatever the OS yields; callers must not rely on it.
    A missing profiles directory is not an error: it simply has no profiles.
    """
    dir_path = resolve_paths(paths).profiles_dir
    try:
        entries = list(dir_path.iterdir())
    except FileNotFoundError:
        return []
    except OSError as exc:
        raise StorageError(f"Failed to list profiles in {dir_path}: {exc}") from exc

    names: List[str] = []
    for entry in entries:
        if not entry.is_file():
            continue
        if entry.name.endswith(PROFILE_SUFFIX):
            names.append(entry.name[: -len(PROFILE_SUFFIX)])
    return names


def profile_exists(name: str, paths: Optional[StoragePaths] = None) -> bool:
    try:
        resolve_paths(paths).profile_file(name).stat()
    except (InvalidNameError, OSError):
        return False
    return True

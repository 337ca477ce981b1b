# file: omo_profiler/profile_transfer.py
"""
Moving configs in and out of the profile store.

    import_profile        file on disk      -> new profile (collision-free name)
    export_profile        profile           -> file on disk
    create_from_template  existing profile  -> new profile
    switch_profile        profile           -> active config (after a backup)

These are the operations behind the CLI commands of the same names. They
never prompt or print; every failure is raised.

Schema validation of imported files is NOT done here. Callers that want it
validate the document before calling import_profile.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .active import set_active
from .backup import create_backup
from .config_doc import dump_config, parse_config
from .errors import (
    DestinationExistsError,
    EmptyNameError,
    ProfileExistsError,
    ProfileNotFoundError,
    SourceNotFoundError,
    StorageError,
)
from .naming import sanitize_name, unique_name
from .profile_store import (
    PROFILE_SUFFIX,
    Profile,
    load_profile,
    profile_exists,
    save_profile,
)
from .storage_paths import StoragePaths, resolve_paths

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImportResult:
    requested_name: str  # sanitized name before collision handling
    profile_name: str  # name actually saved under
    path: Path

    @property
    def renamed(self) -> bool:
        return self.requested_name != self.profile_name


def import_profile(
    source: Union[str, Path],
    name: Optional[str] = None,
    paths: Optional[StoragePaths] = None,
) -> ImportResult:
    """
    Save the JSON config at `source` as a new profile.

    The name comes from `name` if given (an empty string counts as not
    given), else from the file name minus a ".json" suffix; either way it
    is sanitized, so "team.v2.txt" becomes "teamv2txt". If that name is taken, "-1", "-2", ... is appended.
    Raises EmptyNameError when no usable name can be derived.
    """
    source = Path(source)
    try:
        text = source.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise SourceNotFoundError(source) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise StorageError(f"Failed to read {source}: {exc}") from exc

    cfg = parse_config(text, source)

    if name:
        raw_name = name
    elif source.name.endswith(PROFILE_SUFFIX):
        raw_name = source.name[: -len(PROFILE_SUFFIX)]
    else:
        raw_name = source.name
    base_name = sanitize_name(raw_name)
    if not base_name:
        raise EmptyNameError()

    p = resolve_paths(paths)
    final_name = unique_name(base_name, p)
    path = save_profile(Profile(name=final_name, config=cfg), p)

    logger.debug("imported %s as profile %s", source, final_name)
    return ImportResult(requested_name=base_name, profile_name=final_name, path=path)


def export_profile(
    name: str,
    dest: Union[str, Path],
    force: bool = False,
    paths: Optional[StoragePaths] = None,
) -> Path:
    dest = Path(dest)
    profile = load_profile(name, paths)

    if not force and dest.exists():
        raise DestinationExistsError(dest)

    try:
        dest.write_text(dump_config(profile.config), encoding="utf-8")
    except OSError as exc:
        raise StorageError(f"failed to write file: {exc}") from exc

    logger.debug("exported profile %s to %s", name, dest)
    return dest


def create_from_template(
    template: str,
    new_name: str,
    paths: Optional[StoragePaths] = None,
) -> Profile:
    """
    Copy an existing profile under a new (sanitized) name.

    Unlike import, an existing target name is an error rather than renamed.
    """
    p = resolve_paths(paths)
    template_path = p.profile_file(template)
    if not profile_exists(template, p):
        raise ProfileNotFoundError(template, template_path)

    target = sanitize_name(new_name)
    if not target:
        raise EmptyNameError()
    if profile_exists(target, p):
        raise ProfileExistsError(target)

    source = load_profile(template, p)
    created = Profile(name=target, config=copy.deepcopy(source.config))
    save_profile(created, p)
    return created


def switch_profile(name: str, paths: Optional[StoragePaths] = None) -> Optional[Path]:
    """
    Back up the current active config (if there is one), then activate `name`.

    Returns the backup path, or None when there was no active config to save.
    Nothing is backed up or written if the profile does not exist.
    """
    p = resolve_paths(paths)
    profile_path = p.profile_file(name)
    if not profile_exists(name, p):
        raise ProfileNotFoundError(name, profile_path)

    backup_path: Optional[Path] = None
    if p.config_file.exists():
        backup_path = create_backup(p.config_file, p)

    set_active(name, p)
    return backup_path

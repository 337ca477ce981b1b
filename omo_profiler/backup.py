# file: omo_profiler/backup.py
"""
Timestamped backups of the active config file.

Backups are raw byte copies named

    oh-my-opencode.json.bak.<YYYY-MM-DD-HHMMSS>

in StoragePaths.backup_dir. Timestamps have one-second resolution: two backups
taken in the same second share a name and the second silently replaces the
first.

Ordering comes from the timestamp parsed out of the filename, never from
directory listing order or file mtimes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

from .errors import BackupNotFoundError, BackupSourceNotFoundError, StorageError
from .storage_paths import CONFIG_FILE_NAME, StoragePaths, resolve_paths

logger = logging.getLogger(__name__)

BACKUP_PREFIX = f"{CONFIG_FILE_NAME}.bak."
TIMESTAMP_FORMAT = "%Y-%m-%d-%H%M%S"
DEFAULT_KEEP_LAST = 10


@dataclass(frozen=True)
class BackupInfo:
    path: Path
    timestamp: datetime
    filename: str


def _timestamp_now() -> str:
    """
    Return timestamp string used for backup filenames.
    Format: YYYY-MM-DD-HHMMSS, local time (e.g. 2025-01-16-142530)
    """
    return datetime.now().strftime(TIMESTAMP_FORMAT)


def _parse_backup_name(filename: str) -> Optional[datetime]:
    if not filename.startswith(BACKUP_PREFIX):
        return None
    try:
        return datetime.strptime(filename[len(BACKUP_PREFIX):], TIMESTAMP_FORMAT)
    except ValueError:
        return None


# ---------------------------------------------------------------------------
# Create / list
# ---------------------------------------------------------------------------


def create_backup(
    config_path: Union[str, Path],
    paths: Optional[StoragePaths] = None,
) -> Path:
    """
    Copy `config_path` byte-for-byte into a new timestamped backup file.

    Returns the backup path. Raises BackupSourceNotFoundError if there is
    nothing to back up, StorageError if the copy fails.
    """
    source = Path(config_path)
    try:
        data = source.read_bytes()
    except FileNotFoundError as exc:
        raise BackupSourceNotFoundError(source) from exc
    except OSError as exc:
        raise StorageError(f"failed to read config: {exc}") from exc

    p = resolve_paths(paths)
    p.ensure_dirs()
    backup_path = p.backup_dir / f"{BACKUP_PREFIX}{_timestamp_now()}"

    try:
        backup_path.write_bytes(data)
    except OSError as exc:
        raise StorageError(f"failed to write backup: {exc}") from exc

    logger.debug("backed up %s to %s", source, backup_path)
    return backup_path


def list_backups(paths: Optional[StoragePaths] = None) -> List[BackupInfo]:
    """
    All backups, most recent first.

    Files without the exact prefix or with an unparseable timestamp are
    ignored. A missing directory yields an empty list.
    """
    dir_path = resolve_paths(paths).backup_dir
    try:
        entries = list(dir_path.iterdir())
    except FileNotFoundError:
        return []
    except OSError as exc:
        raise StorageError(f"Failed to list backups in {dir_path}: {exc}") from exc

    backups: List[BackupInfo] = []
    for entry in entries:
        if entry.is_dir():
            continue
        ts = _parse_backup_name(entry.name)
        if ts is None:
            continue
        backups.append(BackupInfo(path=entry, timestamp=ts, filename=entry.name))

    backups.sort(key=lambda b: b.timestamp, reverse=True)
    return backups


# ---------------------------------------------------------------------------
# Restore / prune
# ---------------------------------------------------------------------------


def restore_backup(
    backup_path: Union[str, Path],
    paths: Optional[StoragePaths] = None,
) -> None:
    """Overwrite the active config file with the backup's bytes, verbatim."""
    source = Path(backup_path)
    try:
        data = source.read_bytes()
    except FileNotFoundError as exc:
        raise BackupNotFoundError(source) from exc
    except OSError as exc:
        raise StorageError(f"failed to read backup: {exc}") from exc

    config_path = resolve_paths(paths).config_file
    try:
        config_path.write_bytes(data)
    except OSError as exc:
        raise StorageError(f"failed to restore config: {exc}") from exc

    logger.debug("restored %s from %s", config_path, source)


def clean_backups(keep_last: int, paths: Optional[StoragePaths] = None) -> List[Path]:
    """
    Keep the `keep_last` most recent backups and delete the rest.

    Returns the deleted paths. The first failed deletion stops the run and
    raises StorageError; files already deleted stay deleted.
    """
    if keep_last < 0:
        raise ValueError(f"keep_last must be >= 0, got {keep_last}")

    backups = list_backups(paths)
    if len(backups) <= keep_last:
        return []

    removed: List[Path] = []
    for info in backups[keep_last:]:
        try:
            info.path.unlink()
        except OSError as exc:
            raise StorageError(f"failed to remove backup {info.filename}: {exc}") from exc
        removed.append(info.path)
        logger.debug("removed old backup %s", info.filename)

    return removed

# file: omo_profiler/active.py
"""
Which saved profile (if any) is the active configuration?

The active file is compared against every saved profile after normalisation
(see config_doc.normalize_for_comparison), so a differing or missing
``$schema`` never turns a real match into an orphan.

Result states
-------------
    ABSENT   no active config file
    MATCHED  equal to a saved profile; first match in list_profiles() order
    ORPHAN   present, but equal to no saved profile

A small hint file (<base>/.active-profile) remembers the last profile that was
switched to or matched. It only short-circuits the scan when the named
profile still matches; a stale or broken hint falls back to the full scan.
"""

from __future__ import annotations

import enum
import json
import logging
from dataclasses import dataclass, field
from typing import Optional

from .config_doc import Config, dump_config, normalize_for_comparison, parse_config
from .errors import InvalidNameError, ProfilerError, StorageError
from .naming import validate_name
from .profile_store import list_profiles, load_profile
from .storage_paths import StoragePaths, resolve_paths

logger = logging.getLogger(__name__)

ORPHAN_DISPLAY_NAME = "(custom)"


class ActiveStatus(enum.Enum):
    ABSENT = "absent"
    MATCHED = "matched"
    ORPHAN = "orphan"


@dataclass(frozen=True)
class ActiveState:
    status: ActiveStatus
    config: Optional[Config] = field(default=None, compare=False)
    profile_name: Optional[str] = None

    @property
    def exists(self) -> bool:
        return self.status is not ActiveStatus.ABSENT

    @property
    def is_orphan(self) -> bool:
        return self.status is ActiveStatus.ORPHAN

    @property
    def display_name(self) -> str:
        if self.status is ActiveStatus.MATCHED:
            return self.profile_name or ""
        if self.status is ActiveStatus.ORPHAN:
            return ORPHAN_DISPLAY_NAME
        return ""


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------


def matches_config(a: Config, b: Config) -> bool:
    """Logical equality under normalisation. Unserializable input is never equal."""
    try:
        a_bytes = normalize_for_comparison(a)
        b_bytes = normalize_for_comparison(b)
    except (TypeError, ValueError, AttributeError):
        return False
    return a_bytes == b_bytes


# ---------------------------------------------------------------------------
# Hint file
# ---------------------------------------------------------------------------


def _read_hint(p: StoragePaths) -> Optional[str]:
    try:
        data = json.loads(p.active_hint_file.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return None
    if not isinstance(data, dict):
        return None
    name = data.get("name")
    if not isinstance(name, str):
        return None
    try:
        validate_name(name)
    except InvalidNameError:
        return None
    return name


def _write_hint(p: StoragePaths, name: str) -> None:
    # Optimisation only: a failed write just means the next lookup scans.
    try:
        p.active_hint_file.write_text(json.dumps({"name": name}), encoding="utf-8")
    except OSError as exc:
        logger.debug("could not update active hint %s: %s", p.active_hint_file, exc)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def get_active(paths: Optional[StoragePaths] = None) -> ActiveState:
    """
    Classify the active config file as ABSENT, MATCHED or ORPHAN.

    Raises ConfigParseError if the file exists but is not a JSON object,
    StorageError if it cannot be read or the profiles cannot be listed.
    Profiles that fail to load are skipped, not reported.
    """
    p = resolve_paths(paths)
    config_path = p.config_file

    try:
        text = config_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return ActiveState(ActiveStatus.ABSENT)
    except (OSError, UnicodeDecodeError) as exc:
        raise StorageError(f"Failed to read active config {config_path}: {exc}") from exc

    cfg = parse_config(text, config_path)

    hinted = _read_hint(p)
    if hinted is not None:
        try:
            profile = load_profile(hinted, p)
        except ProfilerError:
            profile = None
        if profile is not None and matches_config(profile.config, cfg):
            return ActiveState(ActiveStatus.MATCHED, cfg, hinted)

    for name in list_profiles(p):
        try:
            profile = load_profile(name, p)
        except ProfilerError:
            continue
        if matches_config(profile.config, cfg):
            _write_hint(p, name)
            return ActiveState(ActiveStatus.MATCHED, cfg, name)

    return ActiveState(ActiveStatus.ORPHAN, cfg)


def set_active(name: str, paths: Optional[StoragePaths] = None) -> None:
    """
    Overwrite the active config file with the named profile's config.

    Raises ProfileNotFoundError if the profile does not exist. Does NOT take
    a backup; see profile_transfer.switch_profile for that.
    """
    p = resolve_paths(paths)
    profile = load_profile(name, p)
    p.ensure_dirs()

    try:
        data = dump_config(profile.config)
    except (TypeError, ValueError) as exc:
        raise StorageError(f"Profile '{name}' is not serializable: {exc}") from exc

    try:
        p.config_file.write_text(data, encoding="utf-8")
    except OSError as exc:
        raise StorageError(f"Failed to write active config {p.config_file}: {exc}") from exc

    logger.debug("activated profile %s", name)
    _write_hint(p, name)

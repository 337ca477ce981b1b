"""
omo-profiler: named configuration profiles for oh-my-opencode.

Saves, switches between, imports/exports and backs up the JSON config file
at ~/.config/opencode/oh-my-opencode.json.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .active import ActiveState, ActiveStatus, get_active, matches_config, set_active
from .backup import (
    BackupInfo,
    clean_backups,
    create_backup,
    list_backups,
    restore_backup,
)
from .config_doc import normalize_for_comparison
from .errors import (
    BackupNotFoundError,
    BackupSourceNotFoundError,
    ConfigParseError,
    DestinationExistsError,
    EmptyNameError,
    InvalidCharacterError,
    InvalidNameError,
    NotFoundError,
    ProfileExistsError,
    ProfileNotFoundError,
    ProfilerError,
    SourceNotFoundError,
    StorageError,
)
from .naming import sanitize_name, unique_name, validate_name
from .profile_store import (
    Profile,
    delete_profile,
    list_profiles,
    load_profile,
    profile_exists,
    save_profile,
)
from .profile_transfer import (
    ImportResult,
    create_from_template,
    export_profile,
    import_profile,
    switch_profile,
)
from .storage_paths import StoragePaths

__all__ = [
    "ActiveState",
    "ActiveStatus",
    "BackupInfo",
    "BackupNotFoundError",
    "BackupSourceNotFoundError",
    "ConfigParseError",
    "DestinationExistsError",
    "EmptyNameError",
    "ImportResult",
    "InvalidCharacterError",
    "InvalidNameError",
    "NotFoundError",
    "Profile",
    "ProfileExistsError",
    "ProfileNotFoundError",
    "ProfilerError",
    "SourceNotFoundError",
    "StorageError",
    "StoragePaths",
    "clean_backups",
    "create_backup",
    "create_from_template",
    "delete_profile",
    "export_profile",
    "get_active",
    "import_profile",
    "list_backups",
    "list_profiles",
    "load_profile",
    "matches_config",
    "normalize_for_comparison",
    "profile_exists",
    "restore_backup",
    "sanitize_name",
    "save_profile",
    "set_active",
    "switch_profile",
    "unique_name",
    "validate_name",
]

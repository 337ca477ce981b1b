"""
Command-line front end for omo-profiler.

Usage:
    python -m omo_profiler [--base-dir DIR] [-v] COMMAND ...

Commands:
    list                         List profiles, marking the active one
    current                      Print the active profile name
    switch NAME                  Back up the active config, then activate NAME
    create NEW --from TEMPLATE   Copy an existing profile
    import PATH [--name NAME]    Import a JSON config file as a profile
    export NAME PATH [--force]   Write a profile to a file
    delete NAME                  Delete a profile
    diff NAME [OTHER]            Diff a profile against OTHER or the active config
    backup create|list|restore|clean

This layer is the only place that prints. Everything below it raises
ProfilerError subclasses, which are turned into "Error: ..." on stderr and a
non-zero exit status here.

The storage root defaults to ~/.config/opencode; --base-dir or the
OMO_PROFILER_BASE_DIR environment variable override it.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from . import __version__
from .active import get_active
from .backup import (
    DEFAULT_KEEP_LAST,
    clean_backups,
    create_backup,
    list_backups,
    restore_backup,
)
from .errors import ProfilerError
from .profile_diff import diff_configs
from .profile_store import delete_profile, list_profiles, load_profile
from .profile_transfer import (
    create_from_template,
    export_profile,
    import_profile,
    switch_profile,
)
from .storage_paths import StoragePaths

BASE_DIR_ENV = "OMO_PROFILER_BASE_DIR"


def _error(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)


def _paths_from_args(args: argparse.Namespace) -> StoragePaths:
    base = args.base_dir or os.environ.get(BASE_DIR_ENV)
    return StoragePaths.at(base) if base else StoragePaths.default()


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_list(args: argparse.Namespace, paths: StoragePaths) -> int:
    names = list_profiles(paths)
    if not names:
        print("(No profiles found)")
        return 0

    active = get_active(paths)
    active_name = active.profile_name if active.exists and not active.is_orphan else None

    for name in names:
        if name == active_name:
            print(f"* {name} (active)")
        else:
            print(f"  {name}")
    return 0


def cmd_current(args: argparse.Namespace, paths: StoragePaths) -> int:
    active = get_active(paths)
    if not active.exists:
        print("(none)")
        return 1
    if active.is_orphan:
        print("(custom - unsaved)")
        return 0
    print(active.profile_name)
    return 0


def cmd_switch(args: argparse.Namespace, paths: StoragePaths) -> int:
    switch_profile(args.name, paths)
    print(f"Switched to profile: {args.name}")
    return 0


def cmd_create(args: argparse.Namespace, paths: StoragePaths) -> int:
    created = create_from_template(args.template, args.name, paths)
    print(f"Created profile '{created.name}' from template '{args.template}'")
    return 0


def cmd_import(args: argparse.Namespace, paths: StoragePaths) -> int:
    result = import_profile(args.path, name=args.name, paths=paths)
    if result.renamed:
        print(f'Profile "{result.requested_name}" exists, imported as "{result.profile_name}"')
    else:
        print(f"Imported profile: {result.profile_name}")
    return 0


def cmd_export(args: argparse.Namespace, paths: StoragePaths) -> int:
    dest = export_profile(args.name, args.path, force=args.force, paths=paths)
    print(f'Exported profile "{args.name}" to {dest}')
    return 0


def cmd_delete(args: argparse.Namespace, paths: StoragePaths) -> int:
    delete_profile(args.name, paths)
    print(f"Deleted profile: {args.name}")
    return 0


def cmd_diff(args: argparse.Namespace, paths: StoragePaths) -> int:
    left = load_profile(args.name, paths)
    if args.other:
        right_config = load_profile(args.other, paths).config
        right_label = args.other
    else:
        active = get_active(paths)
        if not active.exists:
            _error("no active config to compare against")
            return 1
        right_config = active.config or {}
        right_label = paths.config_file.name

    text = diff_configs(left.config, right_config, old_name=args.name, new_name=right_label)
    if text:
        sys.stdout.write(text)
    else:
        print("(no differences)")
    return 0


def cmd_backup_create(args: argparse.Namespace, paths: StoragePaths) -> int:
    path = create_backup(paths.config_file, paths)
    print(f"Created backup: {path}")
    return 0


def cmd_backup_list(args: argparse.Namespace, paths: StoragePaths) -> int:
    backups = list_backups(paths)
    if not backups:
        print("(No backups found)")
        return 0
    for info in backups:
        print(f"  {info.timestamp:%Y-%m-%d %H:%M:%S}  {info.filename}")
    return 0


def cmd_backup_restore(args: argparse.Namespace, paths: StoragePaths) -> int:
    target = args.backup
    if target is None:
        backups = list_backups(paths)
        if not backups:
            _error("no backups to restore")
            return 1
        target = str(backups[0].path)
    elif os.sep not in target:
        target = str(paths.backup_dir / target)

    restore_backup(target, paths)
    print(f"Restored {paths.config_file.name} from {os.path.basename(target)}")
    return 0


def cmd_backup_clean(args: argparse.Namespace, paths: StoragePaths) -> int:
    removed = clean_backups(args.keep, paths)
    print(f"Removed {len(removed)} old backup(s)")
    return 0


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def _non_negative_int(raw: str) -> int:
    value = int(raw)
    if value < 0:
        raise argparse.ArgumentTypeError("must be >= 0")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="omo-profiler",
        description="Manage oh-my-opencode configuration profiles.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--base-dir", help=f"storage root (default ~/.config/opencode, or ${BASE_DIR_ENV})")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="list all profiles").set_defaults(func=cmd_list)
    sub.add_parser("current", help="show the active profile").set_defaults(func=cmd_current)

    p = sub.add_parser("switch", help="activate a profile (backs up the current config)")
    p.add_argument("name")
    p.set_defaults(func=cmd_switch)

    p = sub.add_parser("create", help="create a profile from an existing one")
    p.add_argument("name")
    p.add_argument("-f", "--from", dest="template", required=True, help="template profile")
    p.set_defaults(func=cmd_create)

    p = sub.add_parser("import", help="import a profile from a JSON file")
    p.add_argument("path")
    p.add_argument("-n", "--name", help="name for the imported profile")
    p.set_defaults(func=cmd_import)

    p = sub.add_parser("export", help="export a profile to a file")
    p.add_argument("name")
    p.add_argument("path")
    p.add_argument("-f", "--force", action="store_true", help="overwrite destination if it exists")
    p.set_defaults(func=cmd_export)

    p = sub.add_parser("delete", help="delete a profile")
    p.add_argument("name")
    p.set_defaults(func=cmd_delete)

    p = sub.add_parser("diff", help="diff a profile against another or the active config")
    p.add_argument("name")
    p.add_argument("other", nargs="?")
    p.set_defaults(func=cmd_diff)

    backup = sub.add_parser("backup", help="manage backups of the active config")
    bsub = backup.add_subparsers(dest="backup_command", required=True)
    bsub.add_parser("create", help="back up the active config now").set_defaults(func=cmd_backup_create)
    bsub.add_parser("list", help="list backups, newest first").set_defaults(func=cmd_backup_list)
    b = bsub.add_parser("restore", help="restore a backup (default: the newest)")
    b.add_argument("backup", nargs="?", help="backup filename or path")
    b.set_defaults(func=cmd_backup_restore)
    b = bsub.add_parser("clean", help="delete all but the most recent backups")
    b.add_argument("-k", "--keep", type=_non_negative_int, default=DEFAULT_KEEP_LAST)
    b.set_defaults(func=cmd_backup_clean)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    paths = _paths_from_args(args)
    try:
        return args.func(args, paths)
    except ProfilerError as exc:
        _error(str(exc))
        return 1

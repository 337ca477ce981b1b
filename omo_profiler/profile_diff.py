# file: omo_profiler/profile_diff.py
from __future__ import annotations

import difflib

from .config_doc import Config, dump_config


def diff_configs(
    old: Config,
    new: Config,
    old_name: str = "a",
    new_name: str = "b",
    context: int = 3,
) -> str:
    """
    Unified line diff of two configs, as they would be written to disk.

    Returns "" when the serialized documents are identical. Note that
    ``$schema`` is compared here like any other field.
    """
    old_lines = dump_config(old).splitlines(keepends=True)
    new_lines = dump_config(new).splitlines(keepends=True)
    return "".join(
        difflib.unified_diff(
            old_lines, new_lines, fromfile=old_name, tofile=new_name, n=context
        )
    )

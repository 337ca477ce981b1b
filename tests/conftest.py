from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Dict

import pytest

from omo_profiler.config_doc import DEFAULT_SCHEMA
from omo_profiler.storage_paths import StoragePaths


# ---------------------------------------------------------------------------
# Minimal realistic config document for fixtures
# ---------------------------------------------------------------------------

# Mirrors the shape of a real oh-my-opencode.json; the package never looks
# inside it except for "$schema".
MINIMAL_CONFIG: Dict[str, Any] = {
    "$schema": DEFAULT_SCHEMA,
    "disabled_hooks": ["comment-checker"],
    "agents": {
        "oracle": {"model": "openai/gpt-5", "temperature": 0.1},
        "librarian": {"model": "anthropic/claude-haiku"},
    },
    "auto_update": False,
}


@pytest.fixture
def paths(tmp_path: Path) -> StoragePaths:
    """Isolated storage root under tmp_path (nothing created yet)."""
    return StoragePaths.at(tmp_path / "opencode")


@pytest.fixture
def make_config():
    """
    Factory returning a fresh copy of MINIMAL_CONFIG with optional overrides.

    Pass schema=None to drop "$schema" entirely.
    """
    def _make(schema: Any = DEFAULT_SCHEMA, **overrides: Any) -> Dict[str, Any]:
        data = copy.deepcopy(MINIMAL_CONFIG)
        if schema is None:
            data.pop("$schema")
        else:
            data["$schema"] = schema
        data.update(overrides)
        return data

    return _make


@pytest.fixture
def write_active(paths: StoragePaths):
    """Write a dict (or raw text) as the active config file."""
    def _write(data: Any) -> Path:
        paths.base_dir.mkdir(parents=True, exist_ok=True)
        text = data if isinstance(data, str) else json.dumps(data, indent=2)
        paths.config_file.write_text(text, encoding="utf-8")
        return paths.config_file

    return _write

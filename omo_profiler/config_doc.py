# file: omo_profiler/config_doc.py
"""
The Config document: an opaque JSON object owned by a profile.

The only field this package interprets is ``$schema``, which is excluded
when two documents are compared:

    normalize_for_comparison({"$schema": "x", "a": 1})
        == normalize_for_comparison({"a": 1})
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import ConfigParseError

Config = Dict[str, Any]

SCHEMA_FIELD = "$schema"

# Schema URL to add when creating new profiles.
DEFAULT_SCHEMA = (
    "https://raw.githubusercontent.com/code-yeongyu/oh-my-opencode/"
    "master/assets/oh-my-opencode.schema.json"
)


def parse_config(text: str, path: Optional[Path] = None) -> Config:
    """
    Parse JSON text into a Config document.

    Anything other than a JSON object is rejected with ConfigParseError;
    `path` is only used for the error message.
    """
    try:
        data = json.loads(text)
    except ValueError as exc:
        raise ConfigParseError(path, str(exc)) from exc

    if not isinstance(data, dict):
        raise ConfigParseError(
            path, f"expected a JSON object, got {type(data).__name__}"
        )
    return data


def dump_config(config: Config) -> str:
    """Stable indented serialization used for every file this package writes."""
    return json.dumps(config, indent=2, ensure_ascii=False) + "\n"


def normalize_for_comparison(config: Config) -> bytes:
    """
    Canonical bytes of `config` with the schema pointer removed.

    Keys are sorted at every level so logical equality does not depend on
    the order fields were written in. Raises TypeError/ValueError if the
    document holds something JSON cannot represent.
    """
    stripped = {k: v for k, v in config.items() if k != SCHEMA_FIELD}
    text = json.dumps(
        stripped,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )
    return text.encode("utf-8")


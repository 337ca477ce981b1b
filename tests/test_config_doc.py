# file: tests/test_config_doc.py
from __future__ import annotations

import json

import pytest

from omo_profiler.config_doc import (
    DEFAULT_SCHEMA,
    SCHEMA_FIELD,
    dump_config,
    normalize_for_comparison,
    parse_config,
)
from omo_profiler.errors import ConfigParseError


@pytest.mark.parametrize("schema", [DEFAULT_SCHEMA, "", "https://example.com/other.json", None])
def test_normalization_ignores_schema_field(make_config, schema) -> None:
    base = make_config(schema=None)
    variant = make_config(schema=schema)

    assert normalize_for_comparison(variant) == normalize_for_comparison(base)


def test_normalization_ignores_key_order() -> None:
    a = {"agents": {"x": {"model": "m", "temperature": 0.2}}, "auto_update": True}
    b = {"auto_update": True, "agents": {"x": {"temperature": 0.2, "model": "m"}}}

    assert normalize_for_comparison(a) == normalize_for_comparison(b)


def test_normalization_sees_real_differences(make_config) -> None:
    a = make_config()
    b = make_config(auto_update=True)

    assert normalize_for_comparison(a) != normalize_for_comparison(b)


def test_normalization_does_not_mutate_input(make_config) -> None:
    cfg = make_config()
    normalize_for_comparison(cfg)
    assert cfg[SCHEMA_FIELD] == DEFAULT_SCHEMA


def test_normalization_rejects_unserializable_values() -> None:
    with pytest.raises((TypeError, ValueError)):
        normalize_for_comparison({"bad": object()})
    with pytest.raises(ValueError):
        normalize_for_comparison({"bad": float("nan")})


def test_parse_config_accepts_objects_only(tmp_path) -> None:
    assert parse_config('{"a": 1}') == {"a": 1}

    with pytest.raises(ConfigParseError, match="expected a JSON object"):
        parse_config("[1, 2, 3]")

    with pytest.raises(ConfigParseError) as excinfo:
        parse_config("{not json", tmp_path / "x.json")
    assert excinfo.value.path == tmp_path / "x.json"


def test_dump_config_is_indented_and_keeps_key_order(make_config) -> None:
    cfg = make_config()
    text = dump_config(cfg)

    assert text.endswith("\n")
    assert text.startswith('{\n  "$schema"')
    assert json.loads(text) == cfg
    assert list(json.loads(text)) == list(cfg)

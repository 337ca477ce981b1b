# file: tests/test_active.py
from __future__ import annotations

import json

import pytest

from omo_profiler import active
from omo_profiler.active import ActiveState, ActiveStatus, get_active, matches_config, set_active
from omo_profiler.errors import ConfigParseError, ProfileNotFoundError
from omo_profiler.profile_store import Profile, save_profile


def test_absent_when_no_active_file(paths) -> None:
    state = get_active(paths)

    assert state == ActiveState(ActiveStatus.ABSENT)
    assert not state.exists
    assert state.display_name == ""


def test_matched_ignores_schema_difference(paths, make_config, write_active) -> None:
    save_profile(Profile("work", make_config(auto_update=True)), paths)
    save_profile(Profile("dev", make_config(schema=None)), paths)
    write_active(make_config(schema="https://example.com/other.json"))

    state = get_active(paths)

    assert state.status is ActiveStatus.MATCHED
    assert state.profile_name == "dev"
    assert state.display_name == "dev"
    assert state.config["$schema"] == "https://example.com/other.json"


def test_matched_ignores_key_order(paths) -> None:
    save_profile(Profile("dev", {"a": 1, "b": {"x": 1, "y": 2}}), paths)
    paths.config_file.write_text('{"b": {"y": 2, "x": 1}, "a": 1}')

    assert get_active(paths).profile_name == "dev"


def test_orphan_when_nothing_matches(paths, make_config, write_active) -> None:
    save_profile(Profile("dev", make_config()), paths)
    write_active(make_config(disabled_hooks=[]))

    state = get_active(paths)

    assert state.status is ActiveStatus.ORPHAN
    assert state.is_orphan
    assert state.profile_name is None
    assert state.display_name == "(custom)"
    assert state.config["disabled_hooks"] == []


def test_orphan_with_no_profiles_at_all(paths, write_active) -> None:
    write_active({"a": 1})
    assert get_active(paths).status is ActiveStatus.ORPHAN


def test_malformed_active_file_raises(paths, write_active) -> None:
    write_active("{ this is not json")

    with pytest.raises(ConfigParseError):
        get_active(paths)


def test_broken_profiles_are_skipped(paths, make_config, write_active) -> None:
    save_profile(Profile("good", make_config()), paths)
    paths.profile_file("broken").write_text("{ nope")
    write_active(make_config())

    assert get_active(paths).profile_name == "good"


def test_multiple_equal_profiles_return_one_of_them(paths, make_config, write_active) -> None:
    save_profile(Profile("a", make_config()), paths)
    save_profile(Profile("b", make_config(schema=None)), paths)
    write_active(make_config())

    assert get_active(paths).profile_name in {"a", "b"}


def test_scan_records_hint(paths, make_config, write_active) -> None:
    save_profile(Profile("dev", make_config()), paths)
    write_active(make_config())

    get_active(paths)

    assert json.loads(paths.active_hint_file.read_text()) == {"name": "dev"}


def test_stale_hint_does_not_produce_false_match(paths, make_config, write_active) -> None:
    save_profile(Profile("old", make_config(auto_update=True)), paths)
    save_profile(Profile("dev", make_config()), paths)
    write_active(make_config())
    paths.active_hint_file.write_text(json.dumps({"name": "old"}))

    assert get_active(paths).profile_name == "dev"


@pytest.mark.parametrize(
    "hint",
    ["not json", json.dumps(["dev"]), json.dumps({"name": "../../etc/passwd"}), json.dumps({"name": "gone"})],
)
def test_unusable_hint_falls_back_to_scan(paths, make_config, write_active, hint) -> None:
    save_profile(Profile("dev", make_config()), paths)
    write_active(make_config())
    paths.active_hint_file.write_text(hint)

    assert get_active(paths).profile_name == "dev"


def test_hint_short_circuits_scan(paths, make_config, write_active, monkeypatch) -> None:
    save_profile(Profile("dev", make_config()), paths)
    write_active(make_config())
    paths.active_hint_file.write_text(json.dumps({"name": "dev"}))

    def fail_list(*_args, **_kwargs):
        raise AssertionError("scan should not run")

    monkeypatch.setattr(active, "list_profiles", fail_list)

    assert get_active(paths).profile_name == "dev"


def test_matches_config_unserializable_is_false() -> None:
    assert matches_config({"a": 1}, {"a": 1})
    assert not matches_config({"a": object()}, {"a": object()})
    assert not matches_config({"a": float("nan")}, {"a": float("nan")})


def test_set_active_writes_profile_config(paths, make_config) -> None:
    cfg = make_config()
    save_profile(Profile("dev", cfg), paths)

    set_active("dev", paths)

    assert json.loads(paths.config_file.read_text()) == cfg
    assert paths.config_file.read_text() == paths.profile_file("dev").read_text()
    assert get_active(paths).profile_name == "dev"


def test_set_active_overwrites_existing_config(paths, make_config, write_active) -> None:
    save_profile(Profile("dev", make_config()), paths)
    write_active({"something": "else"})

    set_active("dev", paths)

    assert json.loads(paths.config_file.read_text()) == make_config()


def test_set_active_missing_profile_leaves_config_alone(paths, write_active) -> None:
    write_active({"keep": True})

    with pytest.raises(ProfileNotFoundError):
        set_active("nope", paths)

    assert json.loads(paths.config_file.read_text()) == {"keep": True}

import os

from insults.config import (
    DEFAULT_INSULTS_PATH,
    debug_enabled,
    log_level,
    resolve_insults_location,
    resolve_seed,
)


def test_location_defaults_to_shipped_data() -> None:
    assert resolve_insults_location({}) == os.path.normpath(DEFAULT_INSULTS_PATH)
    assert resolve_insults_location({}).endswith(os.path.join("data", "insults.json"))


def test_location_prefers_new_name_over_legacy() -> None:
    env = {"INSULTS_LOCATION": "https://example.com/i.json", "INSULTS_PATH": "/tmp/old.json"}
    assert resolve_insults_location(env) == "https://example.com/i.json"
    assert resolve_insults_location({"INSULTS_PATH": " /tmp/old.json "}) == "/tmp/old.json"


def test_location_reads_process_env(monkeypatch) -> None:
    monkeypatch.setenv("INSULTS_LOCATION", "/srv/insults.json")
    assert resolve_insults_location() == "/srv/insults.json"


def test_log_level() -> None:
    assert log_level({}) == "info"
    assert log_level({"INSULTS_LOG_LEVEL": " DEBUG "}) == "debug"
    assert debug_enabled({"INSULTS_LOG_LEVEL": "trace"})
    assert not debug_enabled({"INSULTS_LOG_LEVEL": "info"})


def test_seed() -> None:
    assert resolve_seed({}) is None
    assert resolve_seed({"INSULTS_SEED": "42"}) == 42
    assert resolve_seed({"INSULTS_SEED": "forty-two"}) is None

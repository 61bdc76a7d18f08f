# tests/test_general_utils.py
"""Tests for general utils (palette data-file loader, debug tracing) with cache/env handling."""

from __future__ import annotations

import importlib
import json

import pytest

# Import the submodules themselves: the package re-exports a `load_config` function.
LC = importlib.import_module("nearest_colors.general.utils.load_config")
LOG = importlib.import_module("nearest_colors.general.utils.log")

ConfigFileNotFound = LC.ConfigFileNotFound
ConfigParseError = LC.ConfigParseError
ConfigTypeError = LC.ConfigTypeError
load_config = LC.load_config
clear_config_cache = LC.clear_config_cache


def _as_is(d: dict) -> dict:
    return d


# ---------- Fixtures ----------
@pytest.fixture
def tmp_data_dir(tmp_path, monkeypatch):
    """Provide an isolated data/ dir and point the loader at it via NEAREST_COLORS_DATA_DIR."""
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.setenv(LC.DATA_DIR_ENV, str(data))
    clear_config_cache()
    return data


@pytest.fixture(autouse=True)
def _reset_env_and_cache(monkeypatch):
    """Reset debug topics and the data cache between tests."""
    monkeypatch.delenv(LOG.DEBUG_TOPICS_ENV, raising=False)
    clear_config_cache()
    LOG.reload_topics()
    yield
    clear_config_cache()
    LOG.reload_topics()


# ---------- load_config tests ----------
def test_package_data_dir_is_default(monkeypatch):
    monkeypatch.delenv(LC.DATA_DIR_ENV, raising=False)
    assert LC.data_dir() == LC.PACKAGE_DATA_DIR
    assert (LC.PACKAGE_DATA_DIR / "tailwind_colors.json").is_file()
    data = load_config("tailwind_colors", validator=_as_is)
    assert data["black"] == "#000"


def test_env_override_and_cache_hit(tmp_data_dir):
    p = tmp_data_dir / "palette.json"
    p.write_text(json.dumps({"red": "#f00"}), encoding="utf-8")

    calls = []

    def counting(d: dict) -> dict:
        calls.append(d)
        return d

    assert LC.data_dir() == tmp_data_dir.resolve()
    out1 = load_config("palette", validator=counting)
    assert out1 == {"red": "#f00"}
    assert load_config("palette.json", validator=counting) is out1  # cached
    assert len(calls) == 1

    p.write_text(json.dumps({"changed": "#000"}), encoding="utf-8")
    clear_config_cache()
    assert load_config("palette", validator=counting) == {"changed": "#000"}
    assert len(calls) == 2


def test_validator_output_is_returned(tmp_data_dir):
    (tmp_data_dir / "settings.json").write_text(json.dumps({"alpha": 1}), encoding="utf-8")

    def validator(d: dict) -> dict:
        d = dict(d)
        d["beta"] = "ok"
        return d

    assert load_config("settings", validator=validator) == {"alpha": 1, "beta": "ok"}


def test_validator_failure_raises_parse_error(tmp_data_dir):
    (tmp_data_dir / "settings.json").write_text(json.dumps({"alpha": 1}), encoding="utf-8")

    def failing(d: dict) -> dict:
        raise ValueError("nope")

    with pytest.raises(ConfigParseError, match="validator failed"):
        load_config("settings", validator=failing)


def test_non_object_json_raises_type_error(tmp_data_dir):
    (tmp_data_dir / "oops.json").write_text(json.dumps(["not", "a", "dict"]), encoding="utf-8")
    with pytest.raises(ConfigTypeError):
        load_config("oops", validator=_as_is)


def test_invalid_json_raises_parse_error(tmp_data_dir):
    (tmp_data_dir / "broken.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigParseError):
        load_config("broken", validator=_as_is)


def test_missing_file_raises_not_found(tmp_data_dir):
    with pytest.raises(ConfigFileNotFound):
        load_config("does_not_exist", validator=_as_is)


# ---------- log.debug tests ----------
def test_log_debug_silent_without_topics(capsys):
    assert LOG.is_enabled("search") is False
    LOG.debug("nobody listens", topic="search")
    assert "nobody listens" not in capsys.readouterr().err


def test_log_debug_respects_topics_env(monkeypatch, capsys):
    monkeypatch.setenv(LOG.DEBUG_TOPICS_ENV, "search")
    LOG.reload_topics()

    LOG.debug("hello on search", topic="search")
    LOG.debug("should be silent", topic="other")

    captured = capsys.readouterr()
    assert "hello on search" in captured.err
    assert "[search][DEBUG]" in captured.err
    assert "should be silent" not in captured.err


def test_log_debug_all_topics(monkeypatch, capsys):
    monkeypatch.setenv(LOG.DEBUG_TOPICS_ENV, "all")
    LOG.reload_topics()

    LOG.debug("m1", topic="foo")
    LOG.debug("m2", topic="bar", level="info")

    captured = capsys.readouterr()
    assert "m1" in captured.err and "m2" in captured.err
    assert "[bar][INFO]" in captured.err


def test_enable_topics_adds_to_env_topics(capsys):
    LOG.enable_topics("palettes")
    assert LOG.is_enabled("Palettes")
    LOG.debug("loaded", topic="palettes")
    assert "loaded" in capsys.readouterr().err


def test_reload_topics_drops_enabled_topics():
    LOG.enable_topics("all")
    LOG.reload_topics()
    assert LOG.is_enabled("search") is False


def test_search_traces_when_topic_enabled(capsys):
    from nearest_colors.search import nearest_colors

    LOG.enable_topics("search")
    nearest_colors("red", colors={"r": "red", "b": "blue"}, n=1)
    err = capsys.readouterr().err
    assert "[search][DEBUG]" in err
    assert "nearest: r=0.00" in err

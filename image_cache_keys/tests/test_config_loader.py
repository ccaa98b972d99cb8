from pathlib import Path

import pytest

from image_cache_keys.config.defaults import DEFAULTS
from image_cache_keys.config.loader import load_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    loaded = load_config(config_path)
    assert loaded == DEFAULTS
    assert loaded is not DEFAULTS  # caller can mutate safely


def test_load_config_without_path_returns_copy_of_defaults() -> None:
    loaded = load_config()
    loaded["cache_keys"]["separators"]["params"] = "_"
    assert DEFAULTS["cache_keys"]["separators"]["params"] == "+"


def test_load_config_merges_overrides(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text(
        """
        [cache_keys]
        digest = "sha256"

        [cache_keys.separators]
        params = "_"

        [logging]
        level = "debug"
        """,
        encoding="utf-8",
    )

    loaded = load_config(config_path)

    assert loaded["cache_keys"]["digest"] == "sha256"
    assert loaded["cache_keys"]["hash_length"] == DEFAULTS["cache_keys"]["hash_length"]
    assert loaded["cache_keys"]["separators"]["params"] == "_"
    assert loaded["cache_keys"]["separators"]["value"] == "-"
    assert loaded["logging"]["level"] == "debug"


def test_load_config_raises_value_error_on_bad_toml(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text("this is not valid toml", encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(config_path)


def test_load_config_rejects_directory(tmp_path: Path) -> None:
    with pytest.raises(IsADirectoryError):
        load_config(tmp_path)

import pytest

from secret_sharing.config.system import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_FILENAME,
    load_config,
    resolve_config_path,
)


def test_load_config_from_default_location(tmp_path, monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
    config_file = tmp_path / DEFAULT_CONFIG_FILENAME
    config_file.write_text('{"threshold": 4, "shares": 7}')

    cfg, path = load_config()

    assert path == config_file.resolve()
    assert cfg.threshold == 4
    assert cfg.shares == 7


def test_load_config_from_env_override(tmp_path, monkeypatch):
    override_path = tmp_path / "custom.json"
    override_path.write_text('{"encoding": "binary"}')
    monkeypatch.setenv(CONFIG_ENV_VAR, str(override_path))

    cfg, path = load_config()

    assert path == override_path
    assert cfg.encoding == "binary"


def test_explicit_path_wins_over_env(tmp_path, monkeypatch):
    explicit = tmp_path / "explicit.json"
    explicit.write_text('{"shares": 9}')
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "other.json"))

    assert resolve_config_path(explicit) == explicit.resolve()
    cfg, _ = load_config(explicit)
    assert cfg.shares == 9


def test_missing_default_config_yields_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)

    cfg, path = load_config()

    assert path == (tmp_path / DEFAULT_CONFIG_FILENAME).resolve()
    assert cfg.threshold == 3


def test_missing_explicit_config_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.json")


def test_load_config_invalid_json(tmp_path, monkeypatch):
    bad = tmp_path / "bad.json"
    bad.write_text("{invalid json")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(bad))

    with pytest.raises(ValueError):
        load_config()

from __future__ import annotations

import os

import pytest

from fourpc_cli import config


def _use_tmp_config_dir(tmp_path, monkeypatch) -> None:
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)


def test_load_config_defaults_when_missing(tmp_path, monkeypatch) -> None:
    _use_tmp_config_dir(tmp_path, monkeypatch)
    cfg = config.load_config()
    assert cfg.token == ""
    assert cfg.access == "beta"
    assert cfg.timeout_s == config.DEFAULT_TIMEOUT_S


def test_save_config_omits_none_profile_fields(tmp_path, monkeypatch) -> None:
    _use_tmp_config_dir(tmp_path, monkeypatch)
    cfg = config.AppConfig(
        token="tok",
        access="main",
        profiles={"alt": config.ProfileConfig(token="alt-tok", access=None, user_agent=None)},
    )

    path = config.save_config(cfg)
    contents = tmp_path.joinpath("config.toml").read_text(encoding="utf-8")

    assert path.endswith("config.toml")
    assert 'access = "main"' in contents
    assert "[profiles.alt]" in contents
    assert contents.count("user_agent =") == 1
    assert contents.count("access =") == 1
    if os.name == "posix":
        assert os.stat(path).st_mode & 0o777 == 0o600


def test_from_toml_falls_back_on_bad_values() -> None:
    cfg = config.from_toml({"token": " tok ", "access": "staging", "timeout_s": "soon"})
    assert cfg.token == "tok"
    assert cfg.access == "beta"
    assert cfg.timeout_s == config.DEFAULT_TIMEOUT_S


def test_apply_profile_overlays_values() -> None:
    cfg = config.from_toml(
        {
            "token": "default-token",
            "user_agent": "base-agent",
            "profiles": {"prod": {"token": "prod-token", "access": "main"}},
        }
    )

    prod = config.apply_profile(cfg, "prod")

    assert prod.token == "prod-token"
    assert prod.access == "main"
    assert prod.user_agent == "base-agent"
    assert config.apply_profile(cfg, None) is cfg


def test_apply_profile_unknown_name() -> None:
    with pytest.raises(KeyError):
        config.apply_profile(config.default_config(), "missing")


def test_apply_env_overrides_token_and_access(monkeypatch) -> None:
    monkeypatch.setenv(config.ENV_TOKEN, " env-token ")
    monkeypatch.setenv(config.ENV_ACCESS, "MAIN")
    cfg = config.apply_env(config.AppConfig(token="file-token"))
    assert cfg.token == "env-token"
    assert cfg.access == "main"


def test_apply_env_keeps_file_values_when_unset(monkeypatch) -> None:
    monkeypatch.delenv(config.ENV_TOKEN, raising=False)
    monkeypatch.delenv(config.ENV_ACCESS, raising=False)
    cfg = config.apply_env(config.AppConfig(token="file-token", access="main"))
    assert cfg.token == "file-token"
    assert cfg.access == "main"

import json

import pytest

from b58codec.config import CONFIG_ENV_VAR, CliConfig, load_config, resolve_config


def _write(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_load_config(tmp_path):
    path = _write(
        tmp_path / "b58.json",
        {"input_format": "HEX", "output_format": "hex", "log_level": "debug"},
    )
    assert load_config(path) == CliConfig(input_format="hex", output_format="hex", log_level="DEBUG")


def test_load_config_defaults(tmp_path):
    assert load_config(_write(tmp_path / "empty.json", {})) == CliConfig()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.json"))


def test_unknown_format(tmp_path):
    path = _write(tmp_path / "bad.json", {"input_format": "base64"})
    with pytest.raises(ValueError, match="input_format"):
        load_config(path)


def test_resolve_config_uses_env(tmp_path, monkeypatch):
    path = _write(tmp_path / "env.json", {"output_format": "hex"})
    monkeypatch.setenv(CONFIG_ENV_VAR, path)
    assert resolve_config().output_format == "hex"


def test_resolve_config_explicit_path_wins(tmp_path, monkeypatch):
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.json"))
    path = _write(tmp_path / "explicit.json", {"input_format": "hex"})
    assert resolve_config(path).input_format == "hex"


def test_resolve_config_without_path(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    assert resolve_config() == CliConfig()


@pytest.mark.parametrize("payload", [[], 5, "hex", None])
def test_non_object_config_is_rejected(tmp_path, payload):
    path = _write(tmp_path / "not_object.json", payload)
    with pytest.raises(ValueError, match="must be a JSON object"):
        load_config(path)


@pytest.mark.parametrize("level", [10, "BASIC_FORMAT", "verbose", ["DEBUG"]])
def test_unknown_log_level(tmp_path, level):
    path = _write(tmp_path / "level.json", {"log_level": level})
    with pytest.raises(ValueError, match="log_level"):
        load_config(path)


def test_log_level_is_normalized(tmp_path):
    path = _write(tmp_path / "level.json", {"log_level": "error"})
    assert load_config(path).log_level == "ERROR"

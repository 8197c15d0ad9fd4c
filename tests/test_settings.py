import pathlib

import pytest

from common.settings import load_settings

def test_config_file_exists_and_has_no_secrets():
    root = pathlib.Path(__file__).resolve().parents[1]
    cfg = root / "config.yaml"
    assert cfg.exists(), "config.yaml missing at project root"
    text = cfg.read_text(encoding="utf-8")
    forbidden = ["http://", "https://", "AKIA", "AIza", "secret:", "token:", "key:"]
    assert not any(bad in line for line in text.splitlines() for bad in forbidden)

def test_load_settings_from_file(tmp_path, monkeypatch):
    monkeypatch.delenv("NETWORK_OVERRIDE", raising=False)
    f = tmp_path / "config.yaml"
    f.write_text("network: base\nlogging:\n  level: debug\n")
    st = load_settings(str(f))
    assert st.network == "base"
    assert st.logging.level == "DEBUG"
    assert st.pool_mappings.file is None

def test_missing_file_is_an_error(tmp_path, monkeypatch):
    monkeypatch.delenv("NETWORK_OVERRIDE", raising=False)
    with pytest.raises(RuntimeError, match="absent.yaml"):
        load_settings(str(tmp_path / "absent.yaml"))

def test_no_default_network(tmp_path, monkeypatch):
    monkeypatch.delenv("NETWORK_OVERRIDE", raising=False)
    f = tmp_path / "config.yaml"
    f.write_text("logging:\n  level: info\n")
    st = load_settings(str(f))
    assert st.network is None
    assert st.logging.level == "INFO"

def test_bad_yaml_is_an_error(tmp_path, monkeypatch):
    monkeypatch.delenv("NETWORK_OVERRIDE", raising=False)
    f = tmp_path / "config.yaml"
    f.write_text("network: [unclosed\n")
    with pytest.raises(RuntimeError):
        load_settings(str(f))

def test_env_override(tmp_path, monkeypatch):
    f = tmp_path / "config.yaml"
    f.write_text("network: base\n")
    monkeypatch.setenv("NETWORK_OVERRIDE", "optimism")
    assert load_settings(str(f)).network == "optimism"

def test_bad_log_level(tmp_path, monkeypatch):
    monkeypatch.delenv("NETWORK_OVERRIDE", raising=False)
    f = tmp_path / "config.yaml"
    f.write_text("logging:\n  level: chatty\n")
    with pytest.raises(RuntimeError, match="Configuration error"):
        load_settings(str(f))

def test_unsupported_network_is_not_rejected_by_settings(tmp_path, monkeypatch):
    monkeypatch.delenv("NETWORK_OVERRIDE", raising=False)
    f = tmp_path / "config.yaml"
    f.write_text("network: goerli\n")
    assert load_settings(str(f)).network == "goerli"

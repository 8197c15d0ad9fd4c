import json

from chains.cli import main

def _config(tmp_path, body="network: base\n"):
    f = tmp_path / "config.yaml"
    f.write_text(body)
    return str(f)

def test_list(capsys):
    assert main(["--list"]) == 0
    out = capsys.readouterr().out
    assert "arbitrum-one" in out
    assert "42161" in out

def test_network_from_settings(tmp_path, monkeypatch, capsys):
    monkeypatch.delenv("NETWORK_OVERRIDE", raising=False)
    assert main(["--config", _config(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "factory_address: '0x33128a8fc17869897dce68ed026d694621f6fdfd'" in out

def test_network_flag_json(tmp_path, monkeypatch, capsys):
    monkeypatch.delenv("NETWORK_OVERRIDE", raising=False)
    assert main(["--config", _config(tmp_path), "--network", "mainnet", "--format", "json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["wrapped_native_address"] == "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"

def test_unsupported_network_exit_code(tmp_path, monkeypatch):
    monkeypatch.delenv("NETWORK_OVERRIDE", raising=False)
    assert main(["--config", _config(tmp_path), "--network", "unknown-network-xyz"]) == 2

def test_custom_pool_mappings_file(tmp_path, monkeypatch, capsys):
    monkeypatch.delenv("NETWORK_OVERRIDE", raising=False)
    mappings = tmp_path / "mappings.yaml"
    mappings.write_text('- ["0x' + "a" * 40 + '", "0x' + "b" * 40 + '"]\n')
    cfg = _config(tmp_path, f"network: optimism\npool_mappings:\n  file: {mappings}\n")
    assert main(["--config", cfg, "--format", "json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["pool_mappings"] == [["0x" + "a" * 40, "0x" + "b" * 40]]

def test_missing_config_file_exit_code(tmp_path, monkeypatch, capsys):
    monkeypatch.delenv("NETWORK_OVERRIDE", raising=False)
    assert main(["--config", str(tmp_path / "typo.yaml")]) == 2
    assert "factory_address" not in capsys.readouterr().out

def test_no_network_named_exit_code(tmp_path, monkeypatch, capsys):
    monkeypatch.delenv("NETWORK_OVERRIDE", raising=False)
    assert main(["--config", _config(tmp_path, "logging:\n  level: INFO\n")]) == 2
    assert "factory_address" not in capsys.readouterr().out

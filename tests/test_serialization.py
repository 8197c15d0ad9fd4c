from decimal import Decimal

import pytest

from chains.networks import Network
from chains.registry import get_config, resolve
from chains.serialization import config_from_dict, config_to_dict, dump_config, load_config

def test_yaml_round_trip_every_network():
    for net in Network:
        cfg = get_config(net)
        assert load_config(dump_config(cfg)) == cfg

def test_dict_is_plain_data():
    d = config_to_dict(resolve("bsc"))
    assert d["minimum_native_locked"] == "0.001"
    assert isinstance(d["whitelist_tokens"], list)
    assert config_from_dict(d).minimum_native_locked == Decimal("0.001")

def test_pool_mappings_survive_round_trip():
    cfg = resolve("optimism")
    back = load_config(dump_config(cfg))
    assert back.pool_mappings == cfg.pool_mappings
    assert isinstance(back.pool_mappings[0], tuple)

def test_load_config_rejects_invalid_document():
    text = dump_config(resolve("base")).replace("minimum_native_locked: '1'", "minimum_native_locked: '0'")
    with pytest.raises(ValueError):
        load_config(text)

def test_load_config_rejects_non_mapping():
    with pytest.raises(ValueError):
        load_config("- a\n- b\n")

def test_load_config_rejects_null_list():
    text = dump_config(resolve("base")) + "pools_to_skip: null\n"
    with pytest.raises(ValueError):
        load_config(text.replace("pools_to_skip: []\n", "", 1))

def test_load_config_rejects_unknown_key():
    with pytest.raises(ValueError):
        load_config(dump_config(resolve("base")) + "pool_to_skip: []\n")

def test_load_config_rejects_broken_yaml():
    with pytest.raises(ValueError):
        load_config("factory_address: [unclosed\n")

import importlib

def test_core_modules_and_symbols_exist():
    mods = [
        ("common.settings", ["load_settings"]),
        ("common.logging_setup", ["setup_logging"]),
        ("chains.networks", ["Network", "supported_network_names"]),
        ("chains.registry", ["resolve", "get_config", "build_registry", "validate_registry"]),
        ("chains.serialization", ["dump_config", "load_config"]),
        ("chains", ["resolve", "Network", "UnsupportedNetworkError"]),
    ]
    for mod_name, symbols in mods:
        mod = importlib.import_module(mod_name)
        for sym in symbols:
            assert hasattr(mod, sym), f"{mod_name} missing {sym}"

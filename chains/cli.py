import argparse
import json
import logging
import sys

from chains.errors import UnsupportedNetworkError
from chains.networks import Network, supported_network_names
from chains.pool_mappings import load_pool_mappings
from chains.registry import all_configs, build_registry, validate_registry
from chains.serialization import config_to_dict, dump_config
from common.logging_setup import setup_logging
from common.settings import load_settings

logger = logging.getLogger("chains.cli")


def main(argv=None) -> int:
    p = argparse.ArgumentParser(description="Show the indexer configuration for a network")
    p.add_argument("--network", default=None,
                   help="Runtime network name (default: from config file)")
    p.add_argument("--config", default="config.yaml", help="Path to settings YAML")
    p.add_argument("--format", choices=["yaml", "json"], default="yaml")
    p.add_argument("--list", action="store_true", help="List supported networks and exit")
    args = p.parse_args(argv)

    if args.list:
        for net in Network:
            print(f"{net.network_name:<18} {net.chain_id}")
        return 0

    try:
        st = load_settings(args.config)
    except RuntimeError as e:
        logger.error("%s", e)
        return 2
    setup_logging(st.logging.level)
    name = args.network or st.network
    if not name:
        logger.error("no network given: pass --network, set \"network\" in %s or $NETWORK_OVERRIDE", args.config)
        return 2

    table = all_configs()
    if st.pool_mappings.file:
        table = build_registry(load_pool_mappings(st.pool_mappings.file))
        validate_registry(table)

    try:
        cfg = table[Network.from_name(name)]
    except UnsupportedNetworkError as e:
        logger.error("%s (supported: %s)", e, ", ".join(supported_network_names()))
        return 2

    if args.format == "json":
        print(json.dumps(config_to_dict(cfg), indent=2))
    else:
        print(dump_config(cfg), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())

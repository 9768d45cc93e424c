"""
smartconfig core - options, configuration store, ledger ids and the
network resolution policy.
"""

from smartconfig.core.config import (
    CustomNetwork,
    NetworkConfig,
    ResourceKind,
    SmartConfigOptions,
    load_options,
    OPTIONS_KEY,
)
from smartconfig.core.ledger import LedgerId
from smartconfig.core.resolver import (
    NetworkResolver,
    compute_threshold,
    resolve_network_config,
    select_table_name,
    THRESHOLD_KEY,
)
from smartconfig.core.store import ConfigStore

__all__ = [
    "CustomNetwork",
    "NetworkConfig",
    "ResourceKind",
    "SmartConfigOptions",
    "load_options",
    "OPTIONS_KEY",
    "LedgerId",
    "NetworkResolver",
    "compute_threshold",
    "resolve_network_config",
    "select_table_name",
    "THRESHOLD_KEY",
    "ConfigStore",
]

"""
Client configuration assembly

Merges a properties file with explicit command-line overrides. Precedence,
lowest to highest: config file, --bootstrap-servers, --security-protocol.
"""

import logging
from typing import Dict, Optional

from .exceptions import ConfigError, ValidationError
from .properties import parse_properties_file

logger = logging.getLogger(__name__)

BOOTSTRAP_SERVERS = "bootstrap.servers"
SECURITY_PROTOCOL = "security.protocol"


def _set_key(config: Dict[str, str], key: str, value: str):
    """Set a config key, rejecting anything that is not a string pair"""
    if not isinstance(key, str) or not key:
        raise ConfigError(f"failed to set config key {key!r}: key must be a non-empty string")
    if not isinstance(value, str):
        raise ConfigError(f"failed to set config key {key!r}: value must be a string")
    config[key] = value


def build_kafka_config(
    bootstrap_servers: Optional[str] = None,
    config_file: Optional[str] = None,
    security_protocol: Optional[str] = None
) -> Dict[str, str]:
    """
    Build a validated client config

    Args:
        bootstrap_servers: Comma-separated broker list (overrides the file)
        config_file: Path to a properties file to seed the config from
        security_protocol: Security protocol (overrides the file)

    Returns:
        Config dictionary guaranteed to contain a non-empty bootstrap.servers

    Raises:
        ConfigError: The config file could not be read or a key could not be set
        ValidationError: No bootstrap.servers from either source
    """
    config = {}

    if config_file:
        try:
            props = parse_properties_file(config_file)
        except IOError as e:
            raise ConfigError(str(e)) from e

        logger.debug("Loaded %d properties from %s", len(props), config_file)
        for key, value in props.items():
            _set_key(config, key, value)

    if bootstrap_servers:
        _set_key(config, BOOTSTRAP_SERVERS, bootstrap_servers)

    if security_protocol:
        _set_key(config, SECURITY_PROTOCOL, security_protocol)

    if not config.get(BOOTSTRAP_SERVERS):
        raise ValidationError(
            "bootstrap.servers must be provided via --bootstrap-servers flag or in config file"
        )

    return config

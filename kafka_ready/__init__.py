"""
kafka-ready

Readiness probe for Kafka clusters: waits until a minimum number of brokers
is reported in cluster metadata.
"""

# Configuration
from .properties import parse_properties, parse_properties_file
from .config import build_kafka_config

# Polling
from .admin import AdminHandle, ConfluentAdminClient
from .retry import RetryPolicy, Deadline
from .poller import wait_for_kafka_ready
from .cli import check_kafka_ready

# Exceptions
from .exceptions import (
    KafkaReadyError,
    ConfigError,
    ValidationError,
    ClientCreationError,
    MetadataError,
    ReadinessTimeoutError
)

__version__ = "0.1.0"
__all__ = [
    # Configuration
    "parse_properties",
    "parse_properties_file",
    "build_kafka_config",
    # Polling
    "AdminHandle",
    "ConfluentAdminClient",
    "RetryPolicy",
    "Deadline",
    "wait_for_kafka_ready",
    "check_kafka_ready",
    # Exceptions
    "KafkaReadyError",
    "ConfigError",
    "ValidationError",
    "ClientCreationError",
    "MetadataError",
    "ReadinessTimeoutError"
]

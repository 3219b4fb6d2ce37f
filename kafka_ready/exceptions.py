"""
kafka-ready exceptions
"""


class KafkaReadyError(Exception):
    """Base exception for all kafka-ready errors"""
    pass


class ConfigError(KafkaReadyError):
    """Malformed properties file or a config key that could not be set"""
    pass


class ValidationError(KafkaReadyError):
    """Required setting missing or an argument out of range"""
    pass


class ClientCreationError(KafkaReadyError):
    """Admin client could not be constructed"""
    pass


class MetadataError(KafkaReadyError):
    """Error fetching cluster metadata"""
    pass


class ReadinessTimeoutError(KafkaReadyError, TimeoutError):
    """Cluster did not reach the expected broker count in time"""

    def __init__(self, expected: int, found: int):
        super().__init__(
            f"timeout waiting for kafka: expected {expected} brokers but found {found}"
        )
        self.expected = expected
        self.found = found

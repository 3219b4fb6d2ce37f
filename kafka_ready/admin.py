"""
Admin client used to read cluster metadata
"""

import logging
from typing import Dict, List

from confluent_kafka import KafkaException
from confluent_kafka.admin import AdminClient as KafkaAdminClient

from .exceptions import ClientCreationError, MetadataError

logger = logging.getLogger(__name__)


class AdminHandle:
    """
    Minimal admin capability the readiness poller depends on

    Subclasses return metadata as ``{"brokers": [...]}`` and release any
    resources in ``close()``.
    """

    def get_metadata(self, timeout_ms: int) -> Dict:
        """Fetch cluster metadata within timeout_ms milliseconds"""
        raise NotImplementedError

    def close(self):
        """Release the handle"""
        pass

    def __enter__(self):
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit"""
        self.close()


class ConfluentAdminClient(AdminHandle):
    """
    Admin handle backed by confluent-kafka

    Example:
        with ConfluentAdminClient({"bootstrap.servers": "localhost:9092"}) as admin:
            metadata = admin.get_metadata(timeout_ms=5000)
            print(f"Brokers: {metadata['brokers']}")
    """

    def __init__(self, config: Dict[str, str]):
        """
        Initialize admin client

        Args:
            config: librdkafka configuration properties

        Raises:
            ClientCreationError if the underlying client rejects the config
        """
        try:
            self._admin = KafkaAdminClient(dict(config))
        except (KafkaException, ValueError, TypeError) as e:
            raise ClientCreationError(f"failed to create admin client: {e}") from e

        self.bootstrap_servers = config.get("bootstrap.servers", "")
        logger.debug("Created admin client for %s", self.bootstrap_servers)

    def get_metadata(self, timeout_ms: int) -> Dict:
        """
        Get cluster metadata

        Args:
            timeout_ms: Request timeout in milliseconds

        Returns:
            Dictionary with brokers, controller_id and cluster_id
        """
        if self._admin is None:
            raise MetadataError("Admin client is closed")

        try:
            metadata = self._admin.list_topics(timeout=timeout_ms / 1000.0)
        except (KafkaException, RuntimeError) as e:
            raise MetadataError(f"Failed to get metadata: {e}") from e

        brokers = [
            {"id": broker.id, "host": broker.host, "port": broker.port}
            for _, broker in sorted(metadata.brokers.items())
        ]
        return {
            "brokers": brokers,
            "controller_id": metadata.controller_id,
            "cluster_id": metadata.cluster_id,
        }

    def list_brokers(self, timeout_ms: int) -> List[Dict]:
        """
        List all brokers in the cluster

        Returns:
            List of broker dictionaries with 'id', 'host' and 'port'
        """
        return self.get_metadata(timeout_ms)["brokers"]

    def close(self):
        """Release the underlying client"""
        if self._admin is not None:
            self._admin = None
            logger.debug("Closed admin client for %s", self.bootstrap_servers)

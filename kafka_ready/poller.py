"""
Cluster readiness polling
"""

import logging
import time
from contextlib import closing
from typing import Callable, Dict, Optional

from .admin import AdminHandle, ConfluentAdminClient
from .exceptions import ClientCreationError, MetadataError, ReadinessTimeoutError
from .retry import Deadline, RetryPolicy

logger = logging.getLogger(__name__)


def wait_for_kafka_ready(
    config: Dict[str, str],
    min_brokers: int,
    timeout_secs: int,
    client_factory: Callable[[Dict[str, str]], AdminHandle] = ConfluentAdminClient,
    policy: Optional[RetryPolicy] = None,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep
):
    """
    Block until the cluster reports at least ``min_brokers`` brokers

    Metadata errors are treated as "not ready yet" and retried until the
    timeout. The admin handle is closed on every exit path.

    Args:
        config: Client configuration passed to ``client_factory``
        min_brokers: Number of brokers required
        timeout_secs: Total time budget in seconds
        client_factory: Callable building an admin handle from ``config``
        policy: Backoff policy (uses default if None)
        clock: Monotonic clock returning seconds
        sleep: Sleep function taking seconds

    Raises:
        ClientCreationError: The admin handle could not be created
        ReadinessTimeoutError: The budget ran out before enough brokers appeared
    """
    if policy is None:
        policy = RetryPolicy()

    try:
        admin = client_factory(config)
    except ClientCreationError:
        raise
    except Exception as e:
        raise ClientCreationError(f"failed to create admin client: {e}") from e

    with closing(admin):
        deadline = Deadline(timeout_secs * 1000, clock=clock)
        broker_count = 0

        while True:
            remaining_ms = deadline.remaining_ms()
            if remaining_ms <= 0:
                raise ReadinessTimeoutError(min_brokers, broker_count)

            request_timeout_ms = policy.get_request_timeout_ms(remaining_ms)
            try:
                metadata = admin.get_metadata(request_timeout_ms)
            except MetadataError as e:
                logger.warning("Error getting metadata: %s. Retrying...", e)
            else:
                broker_count = len(metadata.get("brokers", []))
                if broker_count >= min_brokers:
                    logger.info(
                        "Kafka is ready: found %d brokers (expected %d)",
                        broker_count, min_brokers
                    )
                    return
                logger.info(
                    "Expected %d brokers but found only %d. Retrying...",
                    min_brokers, broker_count
                )

            sleep(policy.get_backoff_ms(remaining_ms) / 1000.0)

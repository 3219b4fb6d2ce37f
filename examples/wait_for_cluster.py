#!/usr/bin/env python3
"""
kafka-ready library example

Waits for a local cluster and prints its brokers once it is up.
"""

import logging
import sys
from kafka_ready import (
    ConfluentAdminClient,
    KafkaReadyError,
    build_kafka_config,
    wait_for_kafka_ready,
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")


def main():
    try:
        config = build_kafka_config(bootstrap_servers="localhost:9092")
        wait_for_kafka_ready(config, min_brokers=1, timeout_secs=30)
    except KafkaReadyError as e:
        print(f"✗ Error: {e}", file=sys.stderr)
        sys.exit(1)

    with ConfluentAdminClient(config) as admin:
        print("\nBrokers:")
        for broker in admin.list_brokers(timeout_ms=5000):
            print(f"  - {broker['id']} @ {broker['host']}:{broker['port']}")


if __name__ == "__main__":
    main()

"""
kafka-ready command line interface

Usage:
    kafka-ready [-b BOOTSTRAP_SERVERS] [-c CONFIG] [-s SECURITY_PROTOCOL] MIN_NUM_BROKERS TIMEOUT

Exits 0 once the cluster reports at least MIN_NUM_BROKERS brokers, 1 otherwise.
"""

import argparse
import logging
import re
import sys
from typing import List, Optional

from .config import build_kafka_config
from .exceptions import KafkaReadyError, ValidationError
from .poller import wait_for_kafka_ready

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with exit code 1"""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _parse_int(value: str, name: str) -> int:
    if not isinstance(value, str) or not INTEGER_RE.fullmatch(value):
        raise ValidationError(f"invalid {name} {value!r}: must be an integer")
    return int(value)


def check_kafka_ready(
    min_brokers: str,
    timeout: str,
    bootstrap_servers: Optional[str] = None,
    config_file: Optional[str] = None,
    security_protocol: Optional[str] = None,
    **poll_kwargs
):
    """
    Validate arguments, build the client config and wait for the cluster

    Numeric arguments are taken as strings so that bad input is reported
    before any file or network access.

    Args:
        min_brokers: Minimum number of brokers, as given on the command line
        timeout: Timeout in seconds, as given on the command line
        bootstrap_servers: Optional bootstrap servers override
        config_file: Optional properties file path
        security_protocol: Optional security protocol override
        **poll_kwargs: Passed through to wait_for_kafka_ready

    Raises:
        KafkaReadyError subclass describing why the cluster is not ready
    """
    expected = _parse_int(min_brokers, "min-num-brokers")
    if expected < 1:
        raise ValidationError(f"invalid min-num-brokers {min_brokers!r}: must be at least 1")

    timeout_secs = _parse_int(timeout, "timeout")
    if timeout_secs < 0:
        raise ValidationError(f"invalid timeout {timeout!r}: must not be negative")

    config = build_kafka_config(bootstrap_servers, config_file, security_protocol)
    logger.debug(
        "Waiting up to %ds for %d brokers at %s",
        timeout_secs, expected, config["bootstrap.servers"]
    )
    wait_for_kafka_ready(config, expected, timeout_secs, **poll_kwargs)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="kafka-ready",
        description="Check if Kafka is ready: wait until the cluster reports "
                    "a minimum number of brokers or the timeout expires."
    )
    parser.add_argument("min_num_brokers", metavar="MIN_NUM_BROKERS",
                        help="Minimum number of brokers to wait for")
    parser.add_argument("timeout", metavar="TIMEOUT",
                        help="Time in seconds to wait for the brokers")
    parser.add_argument("-b", "--bootstrap-servers", default="",
                        help="Comma-separated list of Kafka bootstrap servers")
    parser.add_argument("-c", "--config", default="",
                        help="Path to a client properties file")
    parser.add_argument("-s", "--security-protocol", default="",
                        help="Security protocol, overrides the config file")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
        stream=sys.stderr
    )

    try:
        check_kafka_ready(
            args.min_num_brokers,
            args.timeout,
            bootstrap_servers=args.bootstrap_servers,
            config_file=args.config,
            security_protocol=args.security_protocol
        )
    except KafkaReadyError as e:
        logger.error("%s", e)
        return 1

    return 0

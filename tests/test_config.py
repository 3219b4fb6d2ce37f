"""
Tests for client config assembly
"""
import pytest
from kafka_ready.config import build_kafka_config
from kafka_ready.exceptions import ConfigError, ValidationError


class TestBuildKafkaConfig:
    """Test config merge precedence and validation"""

    def test_bootstrap_from_flag(self):
        """Test bootstrap servers from flag alone"""
        config = build_kafka_config("localhost:9092", "", "")
        assert config == {"bootstrap.servers": "localhost:9092"}

    def test_bootstrap_and_security_from_flags(self):
        """Test both flags without a file"""
        config = build_kafka_config("localhost:9092", None, "SASL_SSL")
        assert config["bootstrap.servers"] == "localhost:9092"
        assert config["security.protocol"] == "SASL_SSL"

    def test_bootstrap_from_file(self, write_properties):
        """Test bootstrap servers from config file"""
        path = write_properties("bootstrap.servers=broker1:9092,broker2:9092")
        config = build_kafka_config("", path, "")
        assert config["bootstrap.servers"] == "broker1:9092,broker2:9092"

    def test_flag_overrides_file_bootstrap(self, write_properties):
        """Test --bootstrap-servers beats the file"""
        path = write_properties("bootstrap.servers=original:9092")
        config = build_kafka_config("override:9092", path, "")
        assert config["bootstrap.servers"] == "override:9092"

    def test_flag_overrides_file_security(self, write_properties):
        """Test --security-protocol beats the file"""
        path = write_properties("security.protocol=PLAINTEXT\nsasl.mechanism=PLAIN")
        config = build_kafka_config("h:9092", path, "SASL_SSL")
        assert config == {
            "bootstrap.servers": "h:9092",
            "security.protocol": "SASL_SSL",
            "sasl.mechanism": "PLAIN",
        }

    def test_missing_bootstrap(self):
        """Test no bootstrap servers anywhere"""
        with pytest.raises(ValidationError, match="bootstrap.servers must be provided"):
            build_kafka_config("", "", "")

    def test_file_without_bootstrap(self, write_properties):
        """Test a file that only sets security"""
        path = write_properties("security.protocol=PLAINTEXT")
        with pytest.raises(ValidationError):
            build_kafka_config("", path, "")

    def test_empty_bootstrap_in_file(self, write_properties):
        """Test an empty bootstrap.servers value fails validation"""
        path = write_properties("bootstrap.servers=")
        with pytest.raises(ValidationError):
            build_kafka_config(None, path, None)

    def test_missing_config_file(self, tmp_path):
        """Test unreadable config file raises ConfigError with the cause"""
        missing = str(tmp_path / "config.properties")
        with pytest.raises(ConfigError, match="config.properties") as exc_info:
            build_kafka_config("", missing, "")
        assert isinstance(exc_info.value.__cause__, IOError)

    def test_latin1_file(self, tmp_path):
        """Test a file with non-UTF-8 bytes still yields a config"""
        path = tmp_path / "client.properties"
        path.write_bytes(b"bootstrap.servers=h:9092\nx=\xff\xfe\n")

        config = build_kafka_config(None, str(path), None)
        assert config["bootstrap.servers"] == "h:9092"
        assert "x" in config

    def test_non_string_bootstrap(self):
        """Test a non-string bootstrap override raises ConfigError naming the key"""
        with pytest.raises(ConfigError, match="bootstrap.servers"):
            build_kafka_config(9092, None, None)

    def test_non_string_security_protocol(self):
        """Test a non-string security override raises ConfigError naming the key"""
        with pytest.raises(ConfigError, match="security.protocol"):
            build_kafka_config("h:9092", None, ["SSL"])

    def test_idempotent(self, write_properties):
        """Test identical inputs give equal, independent maps"""
        path = write_properties("bootstrap.servers=a:9092\nclient.id=readiness-check")
        first = build_kafka_config("b:9092", path, "SSL")
        second = build_kafka_config("b:9092", path, "SSL")
        assert first == second
        assert first is not second

"""
Pytest configuration and fixtures
"""
import pytest
import socket

from kafka_ready.admin import AdminHandle
from kafka_ready.exceptions import MetadataError


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: requires a broker on localhost:9092")


@pytest.fixture
def broker_address():
    """Default broker address for tests"""
    return "localhost:9092"


@pytest.fixture
def write_properties(tmp_path):
    """Write properties content to a temp file and return its path"""
    def _write(content, name="client.properties"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write


class FakeClock:
    """Clock whose time only moves when sleep() is called"""

    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


class FakeAdmin(AdminHandle):
    """
    Scripted metadata source

    Each script entry is a broker count or an exception to raise; the last
    entry repeats once the script is exhausted.
    """

    def __init__(self, script):
        self.script = list(script)
        self.calls = 0
        self.timeouts = []
        self.closed = False

    def get_metadata(self, timeout_ms):
        self.timeouts.append(timeout_ms)
        step = self.script[min(self.calls, len(self.script) - 1)]
        self.calls += 1
        if isinstance(step, Exception):
            raise step
        return {"brokers": [{"id": i, "host": "localhost", "port": 9092 + i} for i in range(step)]}

    def close(self):
        self.closed = True


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def fake_admin():
    """Factory for FakeAdmin instances"""
    def _make(*script):
        return FakeAdmin(script)
    return _make


@pytest.fixture
def metadata_error():
    return MetadataError("Broker transport failure")


def is_broker_available(host="localhost", port=9092, timeout=1):
    """Check if a Kafka broker is running"""
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        sock.settimeout(timeout)
        result = sock.connect_ex((host, port))
        sock.close()
        return result == 0
    except socket.error:
        return False


@pytest.fixture(scope="session")
def require_broker():
    """Skip tests if broker is not available"""
    if not is_broker_available():
        pytest.skip("Kafka broker not running on localhost:9092")

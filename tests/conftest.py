from datetime import datetime, timezone

import pytest

from consolelog.core.host import Base
from consolelog.infra.logging import ConsoleLogger, ConsoleLoggerConfig
from tests.fakes import FakeClock, FakeWriter
from tests.settings import get_test_settings

NOW = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def clock():
    return FakeClock(NOW)


@pytest.fixture
def base(clock):
    return Base(clock)


@pytest.fixture
def writer():
    return FakeWriter()


@pytest.fixture
def plain_logger(writer):
    logger = ConsoleLogger(ConsoleLoggerConfig(colorize=False))
    logger.set_writer(writer)
    return logger


@pytest.fixture
def test_settings():
    return get_test_settings()

from tests.fakes.clock import FakeClock
from tests.fakes.logger import FakeLogger
from tests.fakes.writer import FakeWriter

__all__ = [
    "FakeClock",
    "FakeLogger",
    "FakeWriter",
]

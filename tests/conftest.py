import datetime
import time

import pytest

from fstable.connector import Connector
from fstable.errors import AccessError
from fstable.utils.entry import FSEntry


NOW = datetime.datetime(2024, 3, 15, 12, 0, 0, tzinfo=datetime.timezone.utc)


class MemoryConnector(Connector):
    """In-memory directory reader keyed by path."""

    def __init__(self, listings):
        self.listings = listings

    def scandir(self, path):
        if path not in self.listings:
            raise AccessError(path, FileNotFoundError(2, 'No such file or directory'))
        return list(self.listings[path])


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def make_entry():
    def _make(name, type='file', size=0, age=datetime.timedelta(0)):
        return FSEntry(name, type, size, NOW - age)
    return _make


@pytest.fixture
def memory_connector():
    return MemoryConnector


@pytest.fixture
def new_york_tz(monkeypatch):
    if not hasattr(time, 'tzset'):
        pytest.skip('time.tzset is not available')
    monkeypatch.setenv('TZ', 'America/New_York')
    time.tzset()
    if 'EST' not in time.tzname:
        monkeypatch.undo()
        time.tzset()
        pytest.skip('America/New_York zone data is not installed')
    yield
    monkeypatch.undo()
    time.tzset()

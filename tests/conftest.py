"""Shared fixtures for formatter tests."""

import os
import time
from datetime import timezone

import pytest

from wowtime_app.date_formatter import DateFormatter


@pytest.fixture
def utc_formatter():
    return DateFormatter(timezone.utc)


@pytest.fixture
def utc_local_time(monkeypatch):
    """Pin host local time to UTC for the module-level formatter."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "UTC")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()

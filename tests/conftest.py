"""Shared fixtures: every test runs with a known local time zone."""

import time

import pytest


@pytest.fixture(autouse=True)
def utc_zone(monkeypatch):
    """Run in UTC unless a test switches zones with ``local_zone``."""
    if not hasattr(time, "tzset"):
        yield
        return
    monkeypatch.setenv("TZ", "UTC")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def local_zone(utc_zone, monkeypatch):
    """Switch the process's local zone, e.g. ``local_zone("Europe/Helsinki", "EET")``."""

    def switch(name: str, expected_abbreviation: str) -> None:
        if not hasattr(time, "tzset"):
            pytest.skip("time.tzset is not available")
        monkeypatch.setenv("TZ", name)
        time.tzset()
        if expected_abbreviation not in time.tzname:
            pytest.skip(f"zone data for {name} is not installed")

    return switch

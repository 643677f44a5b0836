"""Shared fixtures and markers for otpad tests."""

import io

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "cli: exercises the command-line front end")


@pytest.fixture
def feed_stdin(monkeypatch):
    """Replace stdin with the given text."""
    def _feed(text):
        monkeypatch.setattr("sys.stdin", io.StringIO(text))
    return _feed

"""Pytest configuration for conformance tests."""

import pytest
from tests.conformance.runners.library_runner import RecordsRunner, TextRunner


def get_available_runners():
    """Return list of available conformance runners."""
    runners = [TextRunner(), RecordsRunner()]
    return runners


@pytest.fixture(params=get_available_runners(), ids=lambda r: r.name)
def runner(request):
    """Provide conformance runner for testing.

    This fixture is parametrized to run tests against all available runners:
    - text: bowtielib decodes and aggregates the raw log
    - records: the log is decoded with json, then aggregated by bowtielib
    """
    return request.param

"""Pytest configuration for path setup and marker handling."""

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parent.parent))


def pytest_addoption(parser):
    parser.addoption(
        "--runslow", action="store_true", default=False, help="run tests marked as slow"
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: deep nesting stress tests")


def pytest_collection_modifyitems(config, items):
    skip_slow = not config.getoption("--runslow")

    for item in items:
        if skip_slow and "slow" in item.keywords:
            item.add_marker(pytest.mark.skip(reason="need --runslow to run slow tests"))

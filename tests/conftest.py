"""
Pytest configuration file.

Puts the project root on the Python path so tests can import lazy,
scenarios, models, utils and main without installing the package.
"""

import sys
from pathlib import Path

# Add the parent directory to the Python path
parent_dir = Path(__file__).parent.parent
if str(parent_dir) not in sys.path:
    sys.path.insert(0, str(parent_dir))

import pytest


@pytest.fixture
def names():
    """The demo names"""
    return ["Cristiano", "Michele", "Sergio", "Giuseppe", "Stefano"]


@pytest.fixture(autouse=True)
def clean_metrics():
    """Start every test with an empty performance registry"""
    from utils import clear_performance_metrics
    clear_performance_metrics()
    yield
    clear_performance_metrics()

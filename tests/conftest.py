"""
Pytest configuration and fixtures.
"""
import os

# Keep test runs from writing logs/simple_nat.log into the working tree
os.environ.setdefault("LOG_TO_FILE", "false")

import pytest
from fastapi.testclient import TestClient

from simple_nat.core.table_state import get_translation_table
from simple_nat.main import app
from simple_nat.services.translation_service import TranslationTable

SAMPLE_RULES = [
    "10.0.1.1:8080,192.168.0.1:80",
    "10.0.1.1:*,192.168.0.1:81",
    "*:8082,192.168.0.1:82",
    "10.0.1.2:*,192.168.0.1:83",
]


@pytest.fixture(scope="function")
def table():
    """An empty translation table."""
    return TranslationTable()


@pytest.fixture(scope="function")
def loaded_table():
    """A translation table holding SAMPLE_RULES."""
    t = TranslationTable()
    for rule in SAMPLE_RULES:
        assert t.define_rule(rule).ok, rule
    return t


@pytest.fixture(scope="function")
def client(loaded_table):
    """
    Create a test client whose translation table is loaded_table.

    The get_translation_table dependency is overridden so tests do not depend
    on a rule file in the working directory.
    """
    app.dependency_overrides[get_translation_table] = lambda: loaded_table

    yield TestClient(app)

    app.dependency_overrides.clear()

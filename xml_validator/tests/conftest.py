# Path: xml_validator/tests/conftest.py
"""
Shared fixtures: every test starts with a fresh configuration singleton and
no XML_VALIDATOR_* variables from the developer's environment.
"""

import os

import pytest

from xml_validator.core.config_loader import ConfigLoader


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    for key in list(os.environ):
        if key.startswith("XML_VALIDATOR_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XML_VALIDATOR_LOG_CONSOLE", "false")
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()

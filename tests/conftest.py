"""
Root pytest configuration for rupaul.

Bootstraps logging and keeps the developer's Vault login out of the tests.
"""

import pytest

from rupaul.config.logging import bootstrap_logging

bootstrap_logging()


@pytest.fixture(autouse=True)
def no_vault_token(monkeypatch):
    """Tests never see a real VAULT_TOKEN."""
    monkeypatch.delenv("VAULT_TOKEN", raising=False)
    yield

"""Shared fixtures: every test starts from the default profile and a clean environment."""

import pytest

from docpricing.config import reset_profile


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    monkeypatch.delenv("DOCPRICING_PROFILE", raising=False)
    monkeypatch.delenv("DOCPRICING_VAT_RATE", raising=False)
    reset_profile()
    yield
    reset_profile()

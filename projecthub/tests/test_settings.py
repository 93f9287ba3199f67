"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from projecthub.setting import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("PROJECT_PAGE_SIZE_DEFAULT", raising=False)
    monkeypatch.delenv("PROJECT_PAGE_SIZE_MAX", raising=False)
    settings = Settings()
    assert settings.project_page_size_default == 20
    assert settings.project_page_size_max == 100


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("PROJECT_PAGE_SIZE_DEFAULT", "15")
    monkeypatch.setenv("PROJECT_PAGE_SIZE_MAX", "30")
    monkeypatch.setenv("DATABASE_URL", "sqlite://")

    settings = Settings()
    assert settings.project_page_size_default == 15
    assert settings.project_page_size_max == 30
    assert settings.database_url == "sqlite://"


def test_default_cannot_exceed_max(monkeypatch):
    monkeypatch.setenv("PROJECT_PAGE_SIZE_DEFAULT", "50")
    monkeypatch.setenv("PROJECT_PAGE_SIZE_MAX", "10")

    with pytest.raises(ValidationError):
        Settings()

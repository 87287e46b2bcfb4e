"""Tests for environment-based settings."""

import logging

from bukukas.config import Settings


def test_defaults_from_empty_environment():
    settings = Settings.from_env({})

    assert settings == Settings()
    assert settings.db_path is None
    assert settings.log_level == "WARNING"
    assert (settings.years_before, settings.years_after) == (2, 2)


def test_values_from_environment():
    settings = Settings.from_env(
        {
            "BUKUKAS_DB_PATH": "/tmp/books.db",
            "BUKUKAS_LOG_LEVEL": "debug",
            "BUKUKAS_YEARS_BEFORE": "4",
            "BUKUKAS_YEARS_AFTER": "0",
        }
    )

    assert settings.db_path == "/tmp/books.db"
    assert settings.log_level == "DEBUG"
    assert settings.years_before == 4
    assert settings.years_after == 0


def test_bad_integers_fall_back_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="bukukas"):
        settings = Settings.from_env(
            {"BUKUKAS_YEARS_BEFORE": "many", "BUKUKAS_YEARS_AFTER": "-3"}
        )

    assert (settings.years_before, settings.years_after) == (2, 2)
    assert "BUKUKAS_YEARS_BEFORE" in caplog.text
    assert "BUKUKAS_YEARS_AFTER" in caplog.text

from __future__ import annotations

import logging

import pytest

from csc_teacher_helper.config import ConfigError, load_settings


def test_required_values():
    settings = load_settings({"CSC_SESSION_ID": "abc", "CSC_ME": "Maria Teacher"})
    assert settings.session_id == "abc"
    assert settings.me == "Maria Teacher"
    assert settings.log_level == logging.WARNING
    assert settings.log_file is None


@pytest.mark.parametrize(
    "environ",
    [
        {"CSC_ME": "Maria Teacher"},
        {"CSC_SESSION_ID": "abc"},
        {"CSC_SESSION_ID": "abc", "CSC_ME": "  "},
        {},
    ],
)
def test_missing_value_raises(environ):
    with pytest.raises(ConfigError):
        load_settings(environ)


def test_log_settings():
    settings = load_settings(
        {
            "CSC_SESSION_ID": "abc",
            "CSC_ME": "Maria Teacher",
            "CSC_LOG_LEVEL": "debug",
            "CSC_LOG_FILE": "/tmp/csc.log",
        }
    )
    assert settings.log_level == logging.DEBUG
    assert settings.log_file == "/tmp/csc.log"


def test_unknown_log_level():
    with pytest.raises(ConfigError, match="CSC_LOG_LEVEL"):
        load_settings({"CSC_SESSION_ID": "abc", "CSC_ME": "x", "CSC_LOG_LEVEL": "loud"})

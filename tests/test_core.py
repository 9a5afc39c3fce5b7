import logging

import formulary
from formulary.core import configure_logging, get_settings
from formulary.settings import Settings


def test_get_settings_cached():
    settings = get_settings()
    assert isinstance(settings, Settings)
    assert get_settings() is settings


def test_configure_logging_explicit_level(mocker):
    configure = mocker.patch("formulary.core._configure_logging")
    configure_logging(logging.WARNING)
    configure.assert_called_once_with(level=logging.WARNING)


def test_configure_logging_from_settings(mocker):
    configure = mocker.patch("formulary.core._configure_logging")
    mocker.patch("formulary.core.get_settings", return_value=Settings(debug=True))
    configure_logging()
    configure.assert_called_once_with(level=logging.DEBUG)

    configure.reset_mock()
    mocker.patch("formulary.core.get_settings", return_value=Settings(debug=False))
    configure_logging()
    configure.assert_called_once_with(level=logging.INFO)


def test_third_party_loggers_quiet():
    assert formulary.parse_forms is not None
    assert logging.getLogger("httpx").level == logging.WARNING

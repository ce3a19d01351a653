import logging

from geodistance.utils.logging import LOGGER, warn_once


def test_warn_once(caplog, monkeypatch):
    monkeypatch.setattr('geodistance.utils.logging._WARNINGS', set())

    with caplog.at_level(logging.WARNING, logger='geodistance'):
        assert warn_once('test', 'first %s', 'warning')
        assert not warn_once('test', 'second %s', 'warning')
        assert warn_once('other', 'third warning')

    assert 'first warning (this warning will not repeat)' in caplog.text
    assert 'second warning' not in caplog.text
    assert 'third warning' in caplog.text
    assert len(caplog.records) == 2


def test_logger():
    assert LOGGER.name == 'geodistance'
    assert LOGGER.level == logging.WARNING
    assert len(LOGGER.handlers) == 1

"""Tests for the logger setup."""
from __future__ import annotations

import logging

import pytest

from docstore_browser.log_helper import LOGGER_NAME, MUTED, NOTICE, set_stream_threshold, setup_logger


@pytest.fixture
def clean_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved = list(logger.handlers)
    yield logger
    for h in list(logger.handlers):
        if h not in saved:
            logger.removeHandler(h)
            h.close()


def test_file_gets_everything(clean_logger, tmp_path):
    path = tmp_path / "browser.log"

    logger = setup_logger(str(path))
    logger.debug("debug line")
    logger.notice("notice line")

    text = path.read_text()
    assert "DEBUG - docstore_browser - debug line" in text
    assert "NOTICE - docstore_browser - notice line" in text


def test_handlers_are_added_once(clean_logger, tmp_path):
    path = str(tmp_path / "browser.log")

    setup_logger(path)
    count = len(clean_logger.handlers)
    setup_logger(path)

    assert len(clean_logger.handlers) == count


def test_stream_threshold_round_trip(clean_logger):
    setup_logger(_stream_level=logging.INFO)

    previous = set_stream_threshold(clean_logger, MUTED)
    assert previous == logging.INFO
    assert set_stream_threshold(clean_logger, previous) == MUTED


def test_notice_level_name():
    assert logging.getLevelName(NOTICE) == "NOTICE"

"""
Filename:       log_helper.py
Author:         jole
Created:        02.10.2025

Description:    Logger setup for the browser. Everything goes to an optional log file, only NOTICE and above goes
                to the terminal, and the terminal output can be muted while curses owns the screen.

Notes:
"""

# --- Import section ---------------------------------------------------------------------------------------------------
import logging
import sys

from typing import Optional
# --- END OF Import section --------------------------------------------------------------------------------------------



# --- Custom level: NOTICE (between INFO=20 and WARNING=30)
NOTICE = 25
logging.addLevelName(NOTICE, "NOTICE")

# --- Above CRITICAL, used to silence the stream handler
MUTED = logging.CRITICAL + 10

LOGGER_NAME = "docstore_browser"


def notice(self: logging.Logger, message, *args, **kwargs):
    if self.isEnabledFor(NOTICE):
        self._log(NOTICE, message, args, **kwargs)

# Add as a real method on Logger
logging.Logger.notice = notice  # type: ignore[attr-defined]



def _has_file_handler(_logger: logging.Logger, _filename: str) -> bool:
    for h in _logger.handlers:
        if isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", None) == _filename:
            return True
    return False
# --- END OF _has_file_handler() ---------------------------------------------------------------------------------------



def _get_stream_handler(_logger: logging.Logger) -> Optional[logging.Handler]:
    for h in _logger.handlers:
        if isinstance(h, logging.StreamHandler) and getattr(h, "_is_dsb_stream", False):
            return h
    return None
# --- END OF _get_stream_handler() -------------------------------------------------------------------------------------



def setup_logger(_filename: Optional[str] = None,
                 *,
                 _file_level: int = logging.DEBUG,
                 _stream_level: int = NOTICE
                 ) -> logging.Logger:
    """
    Configure the package logger. When a filename is given, everything at _file_level and above is written there.
    Only _stream_level and above is emitted to stderr.

    :param _filename:       Log file path, or None for no file logging
    :param _file_level:     Threshold for the file handler
    :param _stream_level:   Threshold for the terminal handler

    :return:                The configured logger
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(min(_file_level, _stream_level, logging.DEBUG))

    # --- File handler: add once
    if _filename and not _has_file_handler(logger, _filename):
        fh = logging.FileHandler(_filename)
        fh.setLevel(_file_level)
        fh.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(name)s - %(message)s"))
        logger.addHandler(fh)

    # --- Stream handler: add once
    sh = _get_stream_handler(logger)
    if sh is None:
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(logging.Formatter("%(message)s"))
        # --- Mark so we can find it later
        setattr(sh, "_is_dsb_stream", True)
        logger.addHandler(sh)
    sh.setLevel(_stream_level)

    return logger
# --- END OF setup_logger() --------------------------------------------------------------------------------------------



def set_stream_threshold(_logger: logging.Logger, _level: int = NOTICE) -> int:
    """
    Change what goes to the terminal at runtime, without touching file logging.

    :return: The previous threshold, so the caller can restore it
    """

    sh = _get_stream_handler(_logger)
    if sh is None:
        return _level

    previous = sh.level
    sh.setLevel(_level)
    return previous
# --- END OF set_stream_threshold() ------------------------------------------------------------------------------------

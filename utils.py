"""
Logging setup and safe console output
"""
import logging
import os

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def setup_logging(level=LOG_LEVEL):
    """Call once at program start (app.py and main_cli.py)."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def get_logger(name):
    return logging.getLogger(name)


def safe_print(msg):
    """
    Print to console with fallback for unicode encoding errors.
    Needed on consoles with latin-1 encoding which can't handle card suit symbols.
    """
    try:
        print(msg)
    except UnicodeEncodeError:
        # Fallback: replace non-ASCII characters with '?'
        safe_msg = msg.encode('ascii', errors='replace').decode('ascii')
        print(safe_msg)

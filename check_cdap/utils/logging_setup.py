# check_cdap/utils/logging_setup.py
import logging
import os
import sys

DEFAULT_LEVEL = "WARNING"


def resolve_level(verbose: bool = False) -> str:
    if verbose:
        return "DEBUG"
    level = os.getenv("LOG_LEVEL", DEFAULT_LEVEL).strip().upper()
    # getLevelName returns a string for names it does not know
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_LEVEL
    return level


def setup_logging(verbose: bool = False) -> None:
    # stdout is reserved for the single plugin line Nagios reads
    level = resolve_level(verbose)
    fmt = '%(asctime)s level=%(levelname)s name=%(name)s msg="%(message)s"'
    logging.basicConfig(level=level, format=fmt, stream=sys.stderr)
    logging.getLogger().setLevel(level)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)

import logging
from typing import Literal

Level = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def level_from_flags(quiet: bool = False, verbose: bool = False, default: Level = "INFO") -> Level:
    """--verbose beats --quiet; neither keeps the default."""
    if verbose:
        return "DEBUG"
    if quiet:
        return "WARNING"
    return default


def setup_logging(level: Level = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=LOG_FORMAT,
    )

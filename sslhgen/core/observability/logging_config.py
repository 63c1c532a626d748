"""
Logging configuration — stderr only, tagged with the generator name.

The service manager forwards a generator's stderr to the kernel log or
the journal, which add their own timestamps but not the program name.
Every record is therefore prefixed with it:

    systemd-sslh-generator: No sslh config found, nothing to generate

Levels are resolved in precedence order:
    --debug / --verbose  >  SSLH_GENERATOR_LOG_LEVEL env var  >  WARNING
"""

from __future__ import annotations

import logging
import sys

DEFAULT_PROGRAM = "systemd-sslh-generator"

# ``{program}`` is filled in before the string reaches logging.Formatter
_FORMATS = {
    logging.DEBUG: "{program}: %(levelname)s %(name)s:%(lineno)d: %(message)s",
    logging.INFO: "{program}: [%(name)s] %(message)s",
    logging.WARNING: "{program}: %(message)s",
}


def setup_logging(level: str = "WARNING", program: str = DEFAULT_PROGRAM) -> None:
    """Send all logging to stderr, one prefixed line per record.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Unknown names fall back to WARNING.
        program: Name every line starts with.
    """
    numeric_level = _parse_level(level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(log_format(numeric_level, program)))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(numeric_level)

    logging.raiseExceptions = False


def log_format(level: int, program: str = DEFAULT_PROGRAM) -> str:
    """Format string used at a numeric level."""
    if level <= logging.DEBUG:
        template = _FORMATS[logging.DEBUG]
    elif level <= logging.INFO:
        template = _FORMATS[logging.INFO]
    else:
        template = _FORMATS[logging.WARNING]
    # A literal % in the name must survive %-style formatting
    return template.format(program=program.replace("%", "%%"))


def _parse_level(level: str | None) -> int:
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric

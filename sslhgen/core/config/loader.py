"""
Configuration loader — finds the sslh config and reads its ``listen`` list.

The file is libconfig syntax, parsed with ``libconf``. Only the
``listen`` setting matters here: a list of groups, each with string
``host`` and ``port`` fields.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

import libconf

from sslhgen.core.models.listen import ListenSpec
from sslhgen.core.models.settings import DEFAULT_CONFIG_CANDIDATES

logger = logging.getLogger(__name__)

LISTEN_SETTING = "listen"

INCOMPLETE_RECORD_MESSAGE = "Incomplete specification (hostname and port required)"

_POSITION_RE = re.compile(r"\brow (\d+), column \d+")
_INCLUDE_RE = re.compile(r'^[ \t]*@include[ \t]+"(.*)"[ \t]*$', re.MULTILINE)

_OPENERS = ("(", "[", "{")
_CLOSERS = (")", "]", "}")


class ConfigError(Exception):
    """Raised when the sslh configuration cannot be used.

    Attributes:
        path:    Config file the error refers to.
        line:    1-based source line, or None when unknown.
        message: Human-readable reason.
    """

    def __init__(self, message: str, path: Path | str | None = None, line: int | None = None):
        self.message = message
        self.path = str(path) if path is not None else None
        self.line = line
        super().__init__(str(self))

    def __str__(self) -> str:
        prefix = ""
        if self.path:
            prefix = f"{self.path}:"
            if self.line is not None:
                prefix += f"{self.line}:"
            prefix += " "
        elif self.line is not None:
            prefix = f"line {self.line}: "
        return f"{prefix}{self.message}"


class ConfigSyntaxError(ConfigError):
    """The config file is not valid libconfig."""


class IncompleteRecordError(ConfigError):
    """A ``listen`` entry lacks a string ``host`` or ``port``."""


def find_config_file(candidates: list[str] | None = None) -> Path | None:
    """Return the first candidate path that can be opened for reading.

    Each candidate is opened and closed again straight away; nothing is
    read. Missing, unreadable and directory paths are skipped.

    Args:
        candidates: Paths to try, in order of preference
            (default: the standard sslh locations).

    Returns:
        Path to the config file, or None if no candidate opens.
    """
    if candidates is None:
        candidates = DEFAULT_CONFIG_CANDIDATES

    for candidate in candidates:
        path = Path(candidate)
        try:
            with path.open("r", encoding="utf-8"):
                pass
        except OSError as e:
            logger.debug("Skipping config candidate %s: %s", path, e)
            continue
        logger.info("Using sslh config %s", path)
        return path

    logger.info("No sslh config found, nothing to generate")
    return None


def load_listen_specs(path: Path) -> list[ListenSpec]:
    """Read the ``listen`` records of an sslh config file.

    Args:
        path: Config file to parse.

    Returns:
        ListenSpec list in file order. Empty if ``listen`` is absent.

    Raises:
        ConfigSyntaxError: If the file is not valid libconfig.
        IncompleteRecordError: On the first record without host and port.
        ConfigError: If the file cannot be read or ``listen`` is not a list.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config: {e}", path=path) from e

    try:
        config = libconf.loads(text, filename=str(path), includedir=str(path.parent))
    except libconf.ConfigParseError as e:
        message = str(e)
        raise ConfigSyntaxError(
            _strip_filename(message, str(path)),
            path=path,
            line=_error_line(message, text),
        ) from e

    entries = config.get(LISTEN_SETTING)
    if entries is None:
        logger.info("%s has no '%s' setting", path, LISTEN_SETTING)
        return []

    if not isinstance(entries, (list, tuple)):
        raise ConfigError(f"'{LISTEN_SETTING}' must be a list of groups", path=path)

    specs: list[ListenSpec] = []
    for index, entry in enumerate(entries):
        host = entry.get("host") if isinstance(entry, dict) else None
        port = entry.get("port") if isinstance(entry, dict) else None

        if not (isinstance(host, str) and isinstance(port, str)):
            lines = _listen_record_lines(text, str(path))
            line = lines[index] if index < len(lines) else None
            raise IncompleteRecordError(INCOMPLETE_RECORD_MESSAGE, path=path, line=line)

        specs.append(ListenSpec(host=host, port=port))

    logger.debug("Read %d listen record(s) from %s", len(specs), path)
    return specs


def _error_line(message: str, text: str) -> int:
    """Line a libconf error refers to.

    Positions are read from the trailing ``row N, column M``; the file
    name in front of it may contain anything. A failed ``@include`` has
    no position and points at its directive. Other errors without a
    position happen at end of input, the last line of the file.
    """
    rows = _POSITION_RE.findall(message)
    if rows:
        return int(rows[-1])

    includes = list(_INCLUDE_RE.finditer(text))
    for match in includes:
        if match.group(1) and match.group(1) in message:
            return _line_of(text, match.start())
    if includes and "include" in message.lower():
        return _line_of(text, includes[0].start())

    return len(text.splitlines()) or 1


def _strip_filename(message: str, filename: str) -> str:
    """Drop libconf's `` in '<file>'`` so the path is reported once."""
    return message.replace(f" in {filename!r}", "")


def _line_of(text: str, offset: int) -> int:
    return text.count("\n", 0, offset) + 1


def _listen_record_lines(text: str, filename: str) -> list[int]:
    """Source line of each element of the top-level ``listen`` list.

    libconf keeps the last of repeated settings, so the last top-level
    ``listen`` is the one scanned.
    """
    # Blank out includes, line count unchanged
    text = _INCLUDE_RE.sub("", text)
    tokens = list(libconf.Tokenizer(filename).tokenize(text))

    start = None
    depth = 0
    for i, tok in enumerate(tokens):
        if (
            depth == 0
            and tok.text == LISTEN_SETTING
            and i + 2 < len(tokens)
            and tokens[i + 1].text in ("=", ":")
            and tokens[i + 2].text in ("(", "[")
        ):
            start = i + 3

        if tok.text in _OPENERS:
            depth += 1
        elif tok.text in _CLOSERS:
            depth -= 1

    if start is None:
        return []
    return _element_rows(tokens[start:])


def _element_rows(tokens: list) -> list[int]:
    rows: list[int] = []
    nested = 0
    expect_element = True
    for tok in tokens:
        if nested == 0:
            if tok.text in _CLOSERS:
                break
            if tok.text == ",":
                expect_element = True
                continue
            if expect_element:
                rows.append(tok.row)
                expect_element = False

        if tok.text in _OPENERS:
            nested += 1
        elif tok.text in _CLOSERS:
            nested -= 1
    return rows

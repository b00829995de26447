# src/taintinfo/source.py
# Reads the kernel taint word: one line holding an unsigned 64-bit decimal.

from __future__ import annotations

import logging
import re

from .config import TAINTED_PATH
from .decode import UINT64_MAX

log = logging.getLogger(__name__)

# Only the first line counts, and at most this many characters of it
MAX_LINE_CHARS = 63

_DECIMAL = re.compile(r"[0-9]+")


class TaintSourceError(Exception):
    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path


class SourceUnavailableError(TaintSourceError):
    def __init__(self, path: str):
        super().__init__(path, f'Cannot open input file "{path}"')


class SourceReadError(TaintSourceError):
    def __init__(self, path: str):
        super().__init__(path, f'Cannot read taint status from input file "{path}": I/O error')


class SourceFormatError(TaintSourceError):
    def __init__(self, path: str):
        super().__init__(path, f'Input file "{path}" contains unparsable data')


def parse_taint_status(text: str) -> int:
    """Strict unsigned 64-bit decimal: digits only, no sign, no whitespace."""
    if not _DECIMAL.fullmatch(text):
        raise ValueError(f"not an unsigned decimal: {text!r}")
    value = int(text)
    if value > UINT64_MAX:
        raise ValueError(f"out of 64-bit range: {text}")
    return value


def load_taint_status(path: str = TAINTED_PATH) -> int:
    try:
        f = open(path, "r", encoding="ascii", errors="replace")
    except OSError as e:
        log.debug("open(%s) failed: %s", path, e)
        raise SourceUnavailableError(path) from e
    with f:
        try:
            line = f.readline(MAX_LINE_CHARS)
        except OSError as e:
            raise SourceReadError(path) from e
    line = line.rstrip("\n")
    if not line:
        raise SourceReadError(path)
    try:
        value = parse_taint_status(line)
    except ValueError as e:
        raise SourceFormatError(path) from e
    log.debug("taint status from %s: %d", path, value)
    return value

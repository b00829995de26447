# src/taintinfo/decode.py
# Pure decoding over the flag table: bitmask -> report, table -> listing,
# flag letters -> bitmask. No I/O here; callers render and print.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .flags import (
    NO_LETTER, TAINT_FLAGS, FlagDefinition, Severity,
    flag_by_off_char, flag_by_on_char, fold_letter,
)

log = logging.getLogger(__name__)

UINT64_MAX = (1 << 64) - 1
NOT_TAINTED_NOTICE = "(Kernel is not tainted)"


def hex16(value: int) -> str:
    """Fixed-width 16 digit uppercase hex, no prefix: 1 -> '0000000000000001'."""
    return f"{value & UINT64_MAX:016X}"


def _check_uint64(value: int) -> int:
    if not (0 <= value <= UINT64_MAX):
        raise ValueError(f"taint status must be an unsigned 64-bit value, got {value}")
    return value


# ---------- decode ----------

@dataclass(frozen=True)
class Symbol:
    char: str
    # None means "print as-is, no emphasis" (the NO_LETTER placeholder)
    severity: Optional[Severity]


@dataclass(frozen=True)
class DetailLine:
    char: str
    description: str
    value: int
    severity: Severity
    unset: bool = False


@dataclass(frozen=True)
class TaintReport:
    value: int
    symbols: Tuple[Symbol, ...]
    details: Tuple[DetailLine, ...]

    @property
    def hex(self) -> str:
        return hex16(self.value)

    @property
    def tainted(self) -> bool:
        return self.value != 0

    @property
    def notice(self) -> Optional[str]:
        return None if self.tainted else NOT_TAINTED_NOTICE

    @property
    def symbol_string(self) -> str:
        return "".join(s.char for s in self.symbols)


def decode(bitmask: int) -> TaintReport:
    """
    Decode a taint word against TAINT_FLAGS.

    Set flags show their on-letter with their own severity. Unset flags show
    their off-letter at INFO, or NO_LETTER unstyled when they have none.
    Only set flags and unset flags carrying an off-description produce a
    detail line. Bits without a table entry are ignored.
    """
    _check_uint64(bitmask)
    symbols: List[Symbol] = []
    details: List[DetailLine] = []
    for flag in TAINT_FLAGS:
        if flag.is_set(bitmask):
            symbols.append(Symbol(flag.on_char, flag.severity))
            details.append(DetailLine(flag.on_char, flag.on_description, flag.value, flag.severity))
        elif flag.off_char is not None:
            symbols.append(Symbol(flag.off_char, Severity.INFO))
            if flag.off_description is not None:
                details.append(DetailLine(flag.off_char, flag.off_description, flag.value,
                                          Severity.INFO, unset=True))
        else:
            symbols.append(Symbol(NO_LETTER, None))
    return TaintReport(value=bitmask, symbols=tuple(symbols), details=tuple(details))


# ---------- list ----------

def list_flags() -> List[str]:
    lines: List[str] = []
    for flag in TAINT_FLAGS:
        if flag.off_char is not None and flag.off_description is not None:
            lines.append(f"- {flag.off_char}: {flag.off_description} ({flag.value} unset)")
        lines.append(f"- {flag.on_char}: {flag.on_description} ({flag.value})")
    return lines


# ---------- parse ----------

@dataclass(frozen=True)
class ParsedFlags:
    value: int
    unknown: Tuple[str, ...] = ()
    # One entry per input off-letter whose flag ended up set anyway
    conflicts: Tuple[FlagDefinition, ...] = ()

    def warnings(self) -> List[str]:
        out = [f"Unknown taint flag '{ch}' ignored." for ch in self.unknown]
        for flag in self.conflicts:
            out.append(
                f"Conflicting taint flags '{flag.on_char}' and '{flag.off_char}'\n"
                f"Using taint-enabling flag '{flag.on_char}'"
            )
        return out


def parse_flags(text: str) -> ParsedFlags:
    """
    Turn a string of flag letters (e.g. "POE") into a taint word.

    ASCII letters are case-insensitive. An on-letter sets its bit, an off-letter
    is accepted and contributes nothing, anything else is collected in
    `unknown`. If an off-letter appears while its flag was set by the
    on-letter, the on-letter wins and the clash is collected in `conflicts`.
    Never raises.
    """
    value = 0
    unknown: List[str] = []
    for raw in text:
        ch = fold_letter(raw)
        flag = flag_by_on_char(ch)
        if flag is not None:
            value |= flag.value
        elif flag_by_off_char(ch) is None:
            unknown.append(ch)

    # Letters are unique across the table (validate_table), so one lookup
    # per input letter visits the same entries as a full table scan.
    conflicts: List[FlagDefinition] = []
    for raw in text:
        flag = flag_by_off_char(raw)
        if flag is not None and flag.is_set(value):
            conflicts.append(flag)

    parsed = ParsedFlags(value=value, unknown=tuple(unknown), conflicts=tuple(conflicts))
    log.debug("parsed %r -> %d (%d unknown, %d conflicts)", text, value, len(unknown), len(conflicts))
    return parsed

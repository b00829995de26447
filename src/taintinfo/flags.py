# src/taintinfo/flags.py
# Static table of the kernel taint flags, in display order.
# Bit positions follow include/linux/panic.h (TAINT_PROPRIETARY_MODULE .. TAINT_RANDSTRUCT).

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

# Placeholder shown in the compact symbol line for an unset flag without a letter
NO_LETTER = "."

MAX_BIT = 63


class Severity(IntEnum):
    INFO = 0
    WARN = 1
    ALERT = 2


@dataclass(frozen=True)
class FlagDefinition:
    bit: int
    severity: Severity
    on_char: str
    on_description: str
    off_char: Optional[str] = None
    # No detail line is printed for the unset state when this is None
    off_description: Optional[str] = None

    @property
    def value(self) -> int:
        return 1 << self.bit

    def is_set(self, bitmask: int) -> bool:
        return (bitmask & self.value) == self.value


def _flag(bit, severity, on_char, on_description, off_char=None, off_description=None) -> FlagDefinition:
    return FlagDefinition(bit, severity, on_char, on_description, off_char, off_description)


TAINT_FLAGS: Tuple[FlagDefinition, ...] = (
    _flag(0,  Severity.INFO,  "P", "Proprietary modules were loaded",
          off_char="G", off_description="Only GPL modules were loaded"),
    _flag(1,  Severity.WARN,  "F", "Module was force loaded (e.g., insmod -f)"),
    _flag(2,  Severity.WARN,  "S", "SMP kernel oops on an officially SMP incapable processor"),
    _flag(3,  Severity.ALERT, "R", "Module was force unloaded (e.g., rmmod -f)"),
    _flag(4,  Severity.ALERT, "M", "Processor reported a Machine Check Exception (hardware error)"),
    _flag(5,  Severity.ALERT, "B", "Bad memory page referenced, or unexpected page flags encountered "
                                   "(possible hardware error)"),
    _flag(6,  Severity.WARN,  "U", "Taint requested by a userspace application"),
    _flag(7,  Severity.ALERT, "D", "Kernel OOPS or BUG triggered taint"),
    _flag(8,  Severity.WARN,  "A", "ACPI Differentiated System Description Table overriden by user"),
    _flag(9,  Severity.WARN,  "W", "Kernel warning triggered taint"),
    _flag(10, Severity.WARN,  "C", "Module from drivers/staging was loaded"),
    _flag(11, Severity.WARN,  "I", "Workaround for a bug in platform firmware was applied"),
    _flag(12, Severity.INFO,  "O", "Externally-built (out-of-tree) module was loaded"),
    _flag(13, Severity.INFO,  "E", "Unsigned module was loaded"),
    _flag(14, Severity.ALERT, "L", "Soft lockup occurred"),
    _flag(15, Severity.WARN,  "K", "Kernel was live-patched"),
    _flag(16, Severity.WARN,  "X", "Auxiliary taint (depending on Linux distribution)"),
    _flag(17, Severity.INFO,  "T", "Kernel was built with the struct randomization plugin"),
)


# ---------- Lookups ----------

def fold_letter(ch: str) -> str:
    """Upper-case ASCII only; anything else is returned unchanged ('ı' stays 'ı')."""
    return ch.upper() if ch.isascii() else ch


def flag_by_on_char(ch: str) -> Optional[FlagDefinition]:
    ch = fold_letter(ch)
    for flag in TAINT_FLAGS:
        if flag.on_char == ch:
            return flag
    return None


def flag_by_off_char(ch: str) -> Optional[FlagDefinition]:
    ch = fold_letter(ch)
    for flag in TAINT_FLAGS:
        if flag.off_char is not None and flag.off_char == ch:
            return flag
    return None


def validate_table(table: Tuple[FlagDefinition, ...]) -> None:
    """
    Check the invariants the decoder relies on:
      - bit positions unique and within 0..63
      - every flag has an on-description
      - no letter is used twice (on and off letters share one namespace)
    Raises ValueError on the first violation.
    """
    bits = set()
    letters = set()
    for flag in table:
        if not (0 <= flag.bit <= MAX_BIT):
            raise ValueError(f"bit {flag.bit} out of range 0..{MAX_BIT}")
        if flag.bit in bits:
            raise ValueError(f"duplicate bit {flag.bit}")
        bits.add(flag.bit)
        if not flag.on_description:
            raise ValueError(f"bit {flag.bit} has no on-description")
        for ch in (flag.on_char, flag.off_char):
            if ch is None:
                continue
            if len(ch) != 1 or ch == NO_LETTER:
                raise ValueError(f"bit {flag.bit}: invalid letter {ch!r}")
            if ch in letters:
                raise ValueError(f"bit {flag.bit}: letter {ch!r} already in use")
            letters.add(ch)


validate_table(TAINT_FLAGS)

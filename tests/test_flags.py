# tests/test_flags.py
import pytest

from taintinfo.flags import (
    TAINT_FLAGS, NO_LETTER, FlagDefinition, Severity,
    flag_by_on_char, flag_by_off_char, fold_letter, validate_table,
)

def test_table_shape():
    assert len(TAINT_FLAGS) == 18
    assert [f.bit for f in TAINT_FLAGS] == list(range(18))
    assert all(f.on_description for f in TAINT_FLAGS)

def test_only_proprietary_flag_has_off_letter():
    with_off = [f for f in TAINT_FLAGS if f.off_char is not None]
    assert len(with_off) == 1
    p = with_off[0]
    assert (p.bit, p.on_char, p.off_char) == (0, "P", "G")
    assert p.off_description == "Only GPL modules were loaded"

def test_known_severities():
    assert flag_by_on_char("P").severity is Severity.INFO
    assert flag_by_on_char("F").severity is Severity.WARN
    assert flag_by_on_char("D").severity is Severity.ALERT
    assert flag_by_on_char("T").severity is Severity.INFO

def test_lookups_are_case_insensitive():
    assert flag_by_on_char("w") is flag_by_on_char("W")
    assert flag_by_on_char("W").bit == 9
    assert flag_by_off_char("g").bit == 0
    # off-lookup never matches the placeholder or on-letters
    assert flag_by_off_char(NO_LETTER) is None
    assert flag_by_off_char("P") is None
    assert flag_by_on_char("Z") is None

def test_value_and_is_set():
    k = flag_by_on_char("K")
    assert k.value == 1 << 15 == 32768
    assert k.is_set(32768 | 1)
    assert not k.is_set(1)

def test_validate_rejects_bad_tables():
    ok = FlagDefinition(0, Severity.INFO, "P", "desc")
    with pytest.raises(ValueError):
        validate_table((ok, FlagDefinition(0, Severity.INFO, "Q", "dup bit")))
    with pytest.raises(ValueError):
        validate_table((FlagDefinition(64, Severity.INFO, "P", "too high"),))
    with pytest.raises(ValueError):
        validate_table((FlagDefinition(1, Severity.INFO, "P", ""),))
    with pytest.raises(ValueError):
        validate_table((ok, FlagDefinition(1, Severity.INFO, "Q", "x", off_char="P")))
    with pytest.raises(ValueError):
        validate_table((FlagDefinition(1, Severity.INFO, "Q", "x", off_char=NO_LETTER),))
    validate_table((ok, FlagDefinition(63, Severity.ALERT, "Q", "top bit")))

def test_fold_letter_ascii_only():
    assert fold_letter("p") == "P"
    assert fold_letter("?") == "?"
    assert fold_letter("ı") == "ı"
    assert fold_letter("ß") == "ß"
    assert flag_by_on_char("ı") is None

# tests/test_parse_flags.py
from taintinfo.decode import parse_flags
from taintinfo.flags import TAINT_FLAGS

def test_each_on_letter_sets_only_its_bit():
    for flag in TAINT_FLAGS:
        parsed = parse_flags(flag.on_char)
        assert parsed.value == flag.value
        assert parsed.unknown == () and parsed.conflicts == ()
        assert parse_flags(flag.on_char.lower()).value == flag.value

def test_combination():
    assert parse_flags("POE").value == 1 | 4096 | 8192
    assert parse_flags("poe").value == parse_flags("POE").value
    # repeats are harmless
    assert parse_flags("WWW").value == 512

def test_off_letter_alone_is_noop():
    parsed = parse_flags("G")
    assert parsed.value == 0
    assert parsed.warnings() == []

def test_conflict_on_letter_wins():
    for text in ("PG", "GP", "pg"):
        parsed = parse_flags(text)
        assert parsed.value == 1
        assert [f.on_char for f in parsed.conflicts] == ["P"]
        assert parsed.warnings() == [
            "Conflicting taint flags 'P' and 'G'\nUsing taint-enabling flag 'P'"
        ]

def test_conflict_reported_per_off_letter():
    parsed = parse_flags("GGP")
    assert parsed.value == 1
    assert len(parsed.conflicts) == 2

def test_unknown_letters_warn_and_continue():
    parsed = parse_flags("Z")
    assert parsed.value == 0
    assert parsed.unknown == ("Z",)
    assert parsed.warnings() == ["Unknown taint flag 'Z' ignored."]

    parsed = parse_flags("p?w1")
    assert parsed.value == 1 | 512
    assert parsed.unknown == ("?", "1")

def test_unknown_warnings_come_before_conflicts():
    msgs = parse_flags("GzP").warnings()
    assert msgs[0] == "Unknown taint flag 'Z' ignored."
    assert msgs[1].startswith("Conflicting taint flags 'P' and 'G'")

def test_empty_input():
    parsed = parse_flags("")
    assert parsed.value == 0 and parsed.warnings() == []

def test_only_ascii_letters_are_case_folded():
    # dotless i upper-cases to 'I' under Unicode rules; it is not a flag letter
    parsed = parse_flags("ı")
    assert parsed.value == 0
    assert parsed.unknown == ("ı",)
    assert parsed.warnings() == ["Unknown taint flag 'ı' ignored."]

    # 'ß' would become 'SS'; report the character as typed
    assert parse_flags("ß").warnings() == ["Unknown taint flag 'ß' ignored."]
    assert parse_flags("ßs").value == 1 << 2

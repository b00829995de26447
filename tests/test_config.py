# tests/test_config.py
from taintinfo.config import Settings, TAINTED_PATH

def test_defaults():
    s = Settings.from_env({})
    assert s.tainted_path == TAINTED_PATH == "/proc/sys/kernel/tainted"
    assert s.color == "auto"

def test_from_env_overrides():
    s = Settings.from_env({"TAINTINFO_TAINTED_PATH": "/tmp/t", "TAINTINFO_COLOR": "NEVER"})
    assert s == Settings(tainted_path="/tmp/t", color="never")

def test_from_env_ignores_bad_color():
    assert Settings.from_env({"TAINTINFO_COLOR": "rainbow"}) == Settings()

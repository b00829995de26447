# src/taintinfo/config.py
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

TAINTED_PATH = "/proc/sys/kernel/tainted"
COLOR_MODES = ("auto", "always", "never")


@dataclass(frozen=True)
class Settings:
    tainted_path: str = TAINTED_PATH
    color: str = "auto"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Defaults, overridden by TAINTINFO_TAINTED_PATH / TAINTINFO_COLOR when set."""
        env = os.environ if environ is None else environ
        s = cls()
        if env.get("TAINTINFO_TAINTED_PATH"):
            s = replace(s, tainted_path=env["TAINTINFO_TAINTED_PATH"])
        color = env.get("TAINTINFO_COLOR", "").lower()
        if color in COLOR_MODES:
            s = replace(s, color=color)
        return s

# src/taintinfo/render.py
# Terminal rendering (rich). Turns reports/listings into Text lines and owns
# the console setup; decode.py stays free of any styling.

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from rich.console import Console
from rich.text import Text

from .decode import TaintReport
from .flags import Severity

SEVERITY_STYLES: Dict[Severity, str] = {
    Severity.INFO: "green",
    Severity.WARN: "bold yellow",
    Severity.ALERT: "bold red",
}
LABEL_STYLE = "bold"

SYMBOLS_LABEL = "Taint flags:            "
NUMERIC_LABEL = "Numeric representation: "

USAGE_LINES = (
    "Syntax: {program} {{ current | list | taint=<flags> }}",
    "        current      Display information about the current taint status of the running kernel",
    "        list         List all known taint flags and their descriptions",
    "        taint=flags  Display information about the specified taint flags",
)


def make_console(color: str = "auto", stderr: bool = False) -> Console:
    """
    Console with rich's text munging turned off: no markup, no emoji,
    no number highlighting, and no re-wrapping of long descriptions.
    color: "auto" (detect terminal, honour NO_COLOR), "always" or "never".
    """
    kwargs = dict(stderr=stderr, markup=False, emoji=False, highlight=False, soft_wrap=True)
    if color == "always":
        kwargs.update(force_terminal=True, color_system="standard")
    elif color == "never":
        kwargs.update(no_color=True, color_system=None)
    elif color != "auto":
        raise ValueError(f"unknown color mode {color!r}")
    return Console(**kwargs)


def severity_style(severity: Optional[Severity]) -> str:
    return SEVERITY_STYLES[severity] if severity is not None else ""


def report_lines(report: TaintReport) -> List[Text]:
    lines: List[Text] = []

    line = Text()
    line.append(SYMBOLS_LABEL, style=LABEL_STYLE)
    for sym in report.symbols:
        line.append(sym.char, style=severity_style(sym.severity))
    lines.append(line)

    line = Text()
    line.append(NUMERIC_LABEL, style=LABEL_STYLE)
    line.append(f"{report.value} / 0x{report.hex}")
    lines.append(line)
    lines.append(Text())

    for d in report.details:
        line = Text("- ")
        line.append(d.char, style=severity_style(d.severity))
        suffix = f"{d.value} unset" if d.unset else f"{d.value}"
        line.append(f" {d.description} ({suffix})")
        lines.append(line)
    if report.notice:
        lines.append(Text(report.notice))
    lines.append(Text())
    return lines


def listing_lines(entries: Iterable[str]) -> List[Text]:
    return [Text(entry) for entry in entries]


def usage_lines(program: str) -> List[Text]:
    lines = [Text(USAGE_LINES[0].format(program=program))]
    lines.extend(Text(ln) for ln in USAGE_LINES[1:])
    lines.append(Text())
    return lines


def emit(console: Console, lines: Iterable[Text]) -> None:
    for line in lines:
        console.print(line)

# (c) 2025 Ricci Adams
# MIT License (or) 1-clause BSD License

from __future__ import annotations

import re
from typing import Optional


class WarningSearch:
    POINT  = "point"
    OUTPUT = "output"

    ALL = ( POINT, OUTPUT )


# Lines written by Default/exec.py when a build ends
FinishLineRegex    = re.compile(r"^\[Finished(?: in [^\]]*?)?(?: with exit code (-?\d+))?\]$")
CancelledLineRegex = re.compile(r"^\[Cancelled\]$")


class CompilationOutput:

    def __init__(self, text: str, point: int = 0, is_compilation: bool = True) -> None:
        self.text = text
        self.point = point
        self.is_compilation = is_compilation


    def __repr__(self) -> str:
        return f"CompilationOutput(point={self.point}, is_compilation={self.is_compilation}, length={len(self.text)})"


def is_success(status_text: str) -> bool:
    return "finished" in status_text


def has_warning(status_text: str, output: Optional[CompilationOutput], search: str = WarningSearch.POINT) -> bool:
    if "warning" in status_text:
        return True

    if not output or not output.text:
        return False

    if search == WarningSearch.OUTPUT:
        return "warning" in output.text

    # Forward search only, text before point is never looked at
    start = max(0, min(output.point, len(output.text)))
    return output.text.find("warning", start) >= 0


def status_from_finish_line(line: str) -> Optional[str]:
    line = line.strip()

    if CancelledLineRegex.match(line):
        return "interrupt\n"

    m = FinishLineRegex.match(line)
    if not m: return None

    exit_code = m.group(1)
    if exit_code is None or int(exit_code) == 0:
        return "finished\n"

    return f"exited abnormally with code {exit_code}\n"


def find_finish_line(text: str) -> Optional[str]:
    for line in reversed(text.splitlines()):
        if status_from_finish_line(line) is not None:
            return line.strip()

    return None

"""Output sinks that reporters write lines to."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Protocol, TextIO

from faultline.constants.reporting import (
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    ANSI_YELLOW,
    ERROR_LABEL,
    SUCCESS_LABEL,
    WARNING_LABEL,
)
from faultline.types import OutputKind

_LABELS: dict[OutputKind, str] = {
    "success": SUCCESS_LABEL,
    "warning": WARNING_LABEL,
    "error": ERROR_LABEL,
}

_COLORS: dict[OutputKind, str] = {
    "success": ANSI_GREEN,
    "warning": ANSI_YELLOW,
    "error": ANSI_RED,
}


class Output(Protocol):
    """Line-oriented sink a reporter writes to."""

    def plain_line(self, text: str) -> None: ...

    def warning_line(self, text: str) -> None: ...

    def error_line(self, text: str) -> None: ...

    def success_line(self, text: str) -> None: ...

    def blank_line(self) -> None: ...


def _styled(kind: OutputKind, text: str) -> str:
    label = _LABELS.get(kind)
    return f"{label} {text}" if label else text


@dataclass(frozen=True)
class OutputLine:
    """One recorded sink call."""

    kind: OutputKind
    text: str = ""

    def render(self) -> str:
        return _styled(self.kind, self.text)


class ConsoleOutput:
    """Writes each line straight to a text stream, optionally with ANSI colour."""

    def __init__(self, stream: TextIO | None = None, *, color: bool = False) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._color = color

    def plain_line(self, text: str) -> None:
        self._write(text)

    def warning_line(self, text: str) -> None:
        self._write(self._decorate("warning", text))

    def error_line(self, text: str) -> None:
        self._write(self._decorate("error", text))

    def success_line(self, text: str) -> None:
        self._write(self._decorate("success", text))

    def blank_line(self) -> None:
        self._write("")

    def _decorate(self, kind: OutputKind, text: str) -> str:
        styled = _styled(kind, text)
        if not self._color:
            return styled
        return f"{_COLORS[kind]}{styled}{ANSI_RESET}"

    def _write(self, line: str) -> None:
        self._stream.write(f"{line}\n")
        self._stream.flush()


class BufferedOutput:
    """Records sink calls in order so a report can be inspected or replayed."""

    def __init__(self) -> None:
        self.lines: list[OutputLine] = []

    def plain_line(self, text: str) -> None:
        self.lines.append(OutputLine("plain", text))

    def warning_line(self, text: str) -> None:
        self.lines.append(OutputLine("warning", text))

    def error_line(self, text: str) -> None:
        self.lines.append(OutputLine("error", text))

    def success_line(self, text: str) -> None:
        self.lines.append(OutputLine("success", text))

    def blank_line(self) -> None:
        self.lines.append(OutputLine("blank"))

    def texts(self) -> list[str]:
        """Return the raw text of every recorded line, blanks as empty strings."""
        return [line.text for line in self.lines]

    def render(self) -> str:
        """Render recorded lines as uncoloured console text."""
        return "\n".join(line.render() for line in self.lines)

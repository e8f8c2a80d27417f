"""Line-oriented terminal I/O with strict, re-prompting numeric reads."""

from __future__ import annotations

import re
import sys
from typing import Optional, TextIO

from eee_engine.parsing import NumberFormatError, parse_float, parse_int

_LINE_END = re.compile(r"[\r\n]")


class EndOfInput(EOFError):
    """The input stream closed before a line could be read."""


def _replace_bad_bytes(stream: TextIO) -> TextIO:
    """Undecodable input becomes U+FFFD (a line the parser rejects); unencodable output becomes '?'."""
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="replace")
    return stream


class Console:
    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self._in = _replace_bad_bytes(stdin if stdin is not None else sys.stdin)
        self._out = _replace_bad_bytes(stdout if stdout is not None else sys.stdout)

    def write(self, text: str = "") -> None:
        self._out.write(text + "\n")

    def read_line(self, prompt: Optional[str] = None) -> str:
        """Read one line, without its terminator. Raises EndOfInput at EOF."""
        if prompt:
            self._out.write(prompt)
            self._out.flush()

        line = self._in.readline()
        if line == "":
            raise EndOfInput()

        # Everything from the first CR or LF on is the line terminator
        return _LINE_END.split(line, maxsplit=1)[0]

    def read_int(self, prompt: Optional[str] = None) -> int:
        """Re-prompt until a valid base-10 integer is entered."""
        while True:
            try:
                return parse_int(self.read_line(prompt))
            except NumberFormatError:
                self.write("Invalid integer. Try again.")

    def read_float(self, prompt: Optional[str] = None) -> float:
        """Re-prompt until a valid decimal number is entered."""
        while True:
            try:
                return parse_float(self.read_line(prompt))
            except NumberFormatError:
                self.write("Invalid number. Try again.")

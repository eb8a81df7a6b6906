# solid_principles/core/transcript.py
"""
Transcript - the output stream every illustration driver writes to.

Drivers only ever produce lines of text. Collecting them here keeps the
examples free of print() calls while still letting the CLI echo them live.
"""

from __future__ import annotations

from typing import List, Optional, TextIO


class Transcript:
    """
    Ordered collection of output lines, optionally echoed to a stream.

    Examples:
        >>> out = Transcript()
        >>> out.write("Saving user Alice")
        >>> out.lines
        ['Saving user Alice']
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream
        self._lines: List[str] = []

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    def write(self, line: str) -> None:
        self._lines.append(line)
        if self._stream is not None:
            self._stream.write(line + "\n")

    def section(self, title: str) -> None:
        """Write a section marker, used when several drivers share one transcript."""
        self.write(f"--- {title} ---")

    def text(self) -> str:
        return "\n".join(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self):
        return iter(self._lines)

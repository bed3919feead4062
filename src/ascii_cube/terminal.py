"""Small helpers for writing frames to the terminal or any text stream."""

from __future__ import annotations

import os
import shutil
import sys
from typing import Optional, TextIO, Tuple


class TerminalController:
    """Context manager that prepares the terminal for smooth animations."""

    def __init__(self, *, clear: bool = True, stream: Optional[TextIO] = None) -> None:
        self._clear = clear
        self._stream = stream if stream is not None else sys.stdout
        self._cursor_hidden = False

    def __enter__(self) -> "TerminalController":
        if self._clear:
            self._stream.write("\033[2J")
        self._stream.write("\033[H")
        self._stream.write("\033[?25l")
        self._stream.flush()
        self._cursor_hidden = True
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore()

    def restore(self) -> None:
        if self._cursor_hidden:
            self._stream.write("\033[?25h")
            self._stream.flush()
            self._cursor_hidden = False

    def draw(self, frame: str) -> None:
        self._stream.write("\033[H")
        self._stream.write(frame)
        self._stream.write("\n")
        self._stream.flush()

    def get_size(self) -> os.terminal_size:
        return shutil.get_terminal_size(fallback=(80, 24))

    def size_tuple(self) -> Tuple[int, int]:
        size = self.get_size()
        return size.columns, size.lines


class StreamSink:
    """Plain sink for pipes and files: frames are appended, separated by a blank line."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream if stream is not None else sys.stdout

    def __enter__(self) -> "StreamSink":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._stream.flush()

    def restore(self) -> None:
        self._stream.flush()

    def draw(self, frame: str) -> None:
        self._stream.write(frame)
        self._stream.write("\n\n")
        self._stream.flush()

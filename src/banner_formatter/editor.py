from typing import List, Optional, Protocol

from .errors import BufferEditError
from .models import Position, Selection


class TextBufferEditor(Protocol):
    """Host editor operations the banner commands rely on"""

    @property
    def language_id(self) -> str: ...

    @property
    def selection(self) -> Selection: ...

    def line_text(self, line: int) -> str: ...

    def text_in_range(self, start: Position, end: Position) -> str: ...

    def replace(self, start: Position, end: Position, text: str) -> None: ...

    def insert(self, position: Position, text: str) -> None: ...

    def set_selection(self, selection: Selection) -> None: ...

    def reveal(self, position: Position) -> None: ...


def detect_newline(text: str) -> str:
    """Line ending of the first line break in text, LF when there is none."""
    index = text.find("\n")
    if index > 0 and text[index - 1] == "\r":
        return "\r\n"
    return "\n"


class InMemoryEditor:
    """A TextBufferEditor over a plain string, used by the CLI and tests.

    Lines are held without terminators; the document's line ending (LF or
    CRLF, whichever the text starts with) is restored by ``text``.
    """

    def __init__(
        self,
        text: str,
        language_id: str,
        selection: Optional[Selection] = None,
        read_only: bool = False,
    ):
        self.newline = detect_newline(text)
        self._lines: List[str] = text.replace("\r\n", "\n").split("\n")
        self._language_id = language_id
        self._selection = selection or Selection.caret(0, 0)
        self.read_only = read_only
        self.revealed: Optional[Position] = None

    @property
    def language_id(self) -> str:
        return self._language_id

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def text(self) -> str:
        return self.newline.join(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line_text(self, line: int) -> str:
        self._check_line(line)
        return self._lines[line]

    def text_in_range(self, start: Position, end: Position) -> str:
        return self._joined()[self._offset(start) : self._offset(end)]

    def replace(self, start: Position, end: Position, text: str) -> None:
        if self.read_only:
            raise BufferEditError("Buffer is read-only")
        begin = self._offset(start)
        finish = self._offset(end)
        if finish < begin:
            raise BufferEditError(f"Edit range ends before it starts: {start} > {end}")
        current = self._joined()
        self._lines = (current[:begin] + text + current[finish:]).split("\n")

    def insert(self, position: Position, text: str) -> None:
        self.replace(position, position, text)

    def set_selection(self, selection: Selection) -> None:
        self._check_position(selection.anchor)
        self._check_position(selection.active)
        self._selection = selection

    def reveal(self, position: Position) -> None:
        self._check_position(position)
        self.revealed = position

    def _joined(self) -> str:
        return "\n".join(self._lines)

    def _check_line(self, line: int) -> None:
        if not 0 <= line < len(self._lines):
            raise BufferEditError(f"Line {line} is outside the document (0-{len(self._lines) - 1})")

    def _check_position(self, pos: Position) -> None:
        self._check_line(pos.line)
        if not 0 <= pos.character <= len(self._lines[pos.line]):
            raise BufferEditError(f"Column {pos.character} is outside line {pos.line}")

    def _offset(self, pos: Position) -> int:
        self._check_position(pos)
        return sum(len(line) + 1 for line in self._lines[: pos.line]) + pos.character

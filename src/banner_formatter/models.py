from dataclasses import dataclass
from typing import Optional


@dataclass
class FormatterConfig:
    width: int = 80
    filler: str = "-"
    lead: str = "---"


@dataclass(frozen=True)
class CommentTokens:
    """Raw comment syntax of a language, as reported by a token source"""

    line_token: Optional[str] = None
    block_start: Optional[str] = None
    block_end: Optional[str] = None

    @property
    def is_line(self) -> bool:
        return bool(self.line_token)

    @property
    def is_block(self) -> bool:
        return bool(self.block_start) and self.block_end is not None


@dataclass(frozen=True)
class CommentDescriptor:
    """Normalized comment tokens used to lay out banners"""

    single_line_start: str
    single_line_end: str
    multi_line_start: str
    multi_line_middle: str
    multi_line_end: str


@dataclass(frozen=True)
class Position:
    line: int
    character: int


@dataclass(frozen=True)
class Selection:
    anchor: Position
    active: Position

    @classmethod
    def caret(cls, line: int, character: int) -> "Selection":
        pos = Position(line, character)
        return cls(anchor=pos, active=pos)

    @property
    def is_empty(self) -> bool:
        return self.anchor == self.active

    @property
    def is_single_line(self) -> bool:
        return self.anchor.line == self.active.line

    @property
    def start(self) -> Position:
        return min(self.anchor, self.active, key=lambda p: (p.line, p.character))

    @property
    def end(self) -> Position:
        return max(self.anchor, self.active, key=lambda p: (p.line, p.character))


@dataclass
class CommandResult:
    inserted: bool
    text: str = ""
    cursor: Optional[Position] = None
    error: Optional[str] = None

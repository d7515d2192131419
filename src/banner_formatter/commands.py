import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Protocol, Tuple

from .editor import TextBufferEditor
from .engine import BannerFormatter
from .errors import BannerError, UnknownLanguageError
from .models import CommandResult, CommentDescriptor, Position, Selection
from .resolver import resolve_language
from .sources import CommentTokenSource

logger = logging.getLogger(__name__)

ErrorReporter = Callable[[str], None]


@dataclass
class InsertionContext:
    """Where a banner goes on the current line and what text it carries"""

    line: int
    column: int
    end: int
    text: str


def insertion_context(editor: TextBufferEditor, text: Optional[str] = None) -> InsertionContext:
    """Work out the effective column, replaced region and embedded text.

    On a line with content the banner aligns with its first non-whitespace
    character and replaces the rest of the line; on a blank line it goes in
    at the cursor and replaces the whitespace after it. An explicit text
    overrides the selection and the line content.
    """
    selection = editor.selection
    line = selection.active.line
    line_text = editor.line_text(line)
    content = line_text.lstrip()

    if content.strip():
        column = len(line_text) - len(content)
        end = len(line_text)
    else:
        column = selection.active.character
        end = max(len(line_text), column)

    if text is None:
        if not selection.is_empty and selection.is_single_line:
            text = editor.text_in_range(selection.start, selection.end)
        else:
            text = line_text
    return InsertionContext(line=line, column=column, end=end, text=text.strip())


class BannerCommand(Protocol):
    name: str

    def run(self, editor: Optional[TextBufferEditor], text: Optional[str] = None) -> CommandResult: ...


class _BannerCommandBase(ABC):
    name = ""

    def __init__(
        self,
        source: CommentTokenSource,
        formatter: BannerFormatter,
        reporter: Optional[ErrorReporter] = None,
    ):
        self.source = source
        self.formatter = formatter
        self.reporter = reporter

    @abstractmethod
    def build(
        self, descriptor: CommentDescriptor, ctx: InsertionContext
    ) -> Tuple[str, Position]:
        """Return the banner text and the cursor position after insertion."""
        pass

    def run(self, editor: Optional[TextBufferEditor], text: Optional[str] = None) -> CommandResult:
        if editor is None:
            return CommandResult(inserted=False)

        try:
            descriptor = resolve_language(self.source, editor.language_id)
            if descriptor is None:
                raise UnknownLanguageError(editor.language_id)

            ctx = insertion_context(editor, text)
            banner, cursor = self.build(descriptor, ctx)

            editor.replace(Position(ctx.line, ctx.column), Position(ctx.line, ctx.end), banner)
            editor.set_selection(Selection.caret(cursor.line, cursor.character))
            editor.reveal(cursor)
        except BannerError as e:
            message = f"{self.name} failed for language '{editor.language_id}': {e}"
            logger.error(message)
            if self.reporter is not None:
                self.reporter(message)
            return CommandResult(inserted=False, error=message)

        logger.debug("%s inserted %d characters at line %d", self.name, len(banner), ctx.line)
        return CommandResult(inserted=True, text=banner, cursor=cursor)


class SingleLineBannerCommand(_BannerCommandBase):
    name = "banner.singleLine"

    def build(self, descriptor, ctx):
        banner = self.formatter.format_line(descriptor, ctx.column, ctx.text)
        return banner, Position(ctx.line, ctx.column + len(banner))


class MultiLineBannerCommand(_BannerCommandBase):
    name = "banner.multiLine"

    def build(self, descriptor, ctx):
        banner = self.formatter.format_multi(descriptor, ctx.column, ctx.text)
        # Just past the middle token and its space, ready for typing
        cursor = Position(ctx.line + 1, ctx.column + len(descriptor.multi_line_middle) + 1)
        return banner, cursor


class CommandRegistry:
    """Registry of the banner commands exposed to a host"""

    def __init__(
        self,
        source: CommentTokenSource,
        formatter: Optional[BannerFormatter] = None,
        reporter: Optional[ErrorReporter] = None,
    ):
        self.source = source
        self.formatter = formatter or BannerFormatter()
        self.reporter = reporter
        self._commands: Dict[str, BannerCommand] = {}
        self._load_builtin_commands()

    def register(self, command: BannerCommand):
        self._commands[command.name] = command

    def get(self, name: str) -> BannerCommand:
        try:
            return self._commands[name]
        except KeyError:
            raise KeyError(f"Unknown command: {name}") from None

    def names(self) -> List[str]:
        return list(self._commands)

    def execute(
        self, name: str, editor: Optional[TextBufferEditor], text: Optional[str] = None
    ) -> CommandResult:
        return self.get(name).run(editor, text)

    def _load_builtin_commands(self):
        for command_cls in (SingleLineBannerCommand, MultiLineBannerCommand):
            self.register(command_cls(self.source, self.formatter, self.reporter))

import logging
from typing import Optional

from .models import CommentDescriptor, FormatterConfig

logger = logging.getLogger(__name__)


class BannerFormatter:
    """Lays out banner comments for a resolved comment descriptor."""

    def __init__(self, config: Optional[FormatterConfig] = None):
        self.config = config or FormatterConfig()

    def format_line(
        self, descriptor: Optional[CommentDescriptor], column: int, text: str = ""
    ) -> Optional[str]:
        """Build a single-line banner whose right edge lands on the configured width.

        The open part is over-provisioned with filler and sliced to the budget
        left after the insertion column and the closing token. Embedded text is
        truncated when it does not fit. When the column leaves no room for even
        the leading token, the minimal banner is returned and overflows.
        """
        if descriptor is None:
            return None
        if column < 0:
            raise ValueError(f"column must be non-negative, got {column}")

        cfg = self.config
        text = text.strip()
        margin = " " if text else ""

        prefix = f"{descriptor.single_line_start} {cfg.lead}"
        open_part = f"{prefix}{margin}{text}{margin}{cfg.filler * cfg.width}"
        close_part = f" {descriptor.single_line_end}" if descriptor.single_line_end else ""

        budget = cfg.width - column - len(close_part)
        if budget < len(prefix):
            logger.debug(
                "Column %d leaves no room for a %d-wide banner; line will overflow",
                column,
                cfg.width,
            )
            budget = len(prefix)

        return open_part[:budget] + close_part

    def format_block(
        self, descriptor: Optional[CommentDescriptor], indent: str, text: str = ""
    ) -> Optional[str]:
        """Build the three-line block header: open, middle with text, close."""
        if descriptor is None:
            return None

        start = descriptor.multi_line_start
        middle = descriptor.multi_line_middle
        end = descriptor.multi_line_end
        return f"{start}\n{indent}{middle} {text.strip()}\n{indent}{end}\n"

    def format_multi(
        self, descriptor: Optional[CommentDescriptor], column: int, text: str = ""
    ) -> Optional[str]:
        """Block header followed by the trailing separator line, aligned to column."""
        if descriptor is None:
            return None
        indent = " " * column
        block = self.format_block(descriptor, indent, text)
        line = self.format_line(descriptor, column)
        return f"{block}\n{indent}{line}"

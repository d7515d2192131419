"""
Banner Formatter - decorative separator and header comments in any language

This package provides:
- Comment syntax resolution (line token or block pair -> descriptor)
- Fixed-width single-line and block banner layout
- Comment token sources (built-in table, language-configuration.json files)
- Editor-agnostic insertion commands
"""

__version__ = "0.1.0"

from .commands import CommandRegistry, MultiLineBannerCommand, SingleLineBannerCommand
from .editor import InMemoryEditor, TextBufferEditor
from .engine import BannerFormatter
from .errors import BannerError, BufferEditError, LanguageConfigError, UnknownLanguageError
from .models import CommandResult, CommentDescriptor, CommentTokens, FormatterConfig, Position, Selection
from .resolver import resolve, resolve_language
from .sources import (
    BuiltinTokenSource,
    ChainedTokenSource,
    CommentTokenSource,
    LanguageConfigSource,
    MappingTokenSource,
)

__all__ = [
    "BannerFormatter",
    "FormatterConfig",
    "CommentTokens",
    "CommentDescriptor",
    "Position",
    "Selection",
    "CommandResult",
    "resolve",
    "resolve_language",
    "CommentTokenSource",
    "BuiltinTokenSource",
    "MappingTokenSource",
    "LanguageConfigSource",
    "ChainedTokenSource",
    "TextBufferEditor",
    "InMemoryEditor",
    "CommandRegistry",
    "SingleLineBannerCommand",
    "MultiLineBannerCommand",
    "BannerError",
    "UnknownLanguageError",
    "BufferEditError",
    "LanguageConfigError",
]

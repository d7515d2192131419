import logging
from typing import Optional

from .models import CommentDescriptor, CommentTokens

logger = logging.getLogger(__name__)


def _double(token: str) -> str:
    """Repeat single-character tokens so the banner edge has some weight ('#' -> '##')."""
    if token and len(token) < 2:
        return token + token
    return token


def resolve(tokens: Optional[CommentTokens]) -> Optional[CommentDescriptor]:
    """Turn raw comment tokens into a descriptor, or None for an unknown language."""
    if tokens is None:
        return None

    if tokens.is_line:
        start = middle = tokens.line_token
        end = ""
    elif tokens.is_block:
        start = tokens.block_start
        end = tokens.block_end
        middle = start[-1]
    else:
        return None

    return CommentDescriptor(
        single_line_start=_double(start),
        single_line_end=_double(end),
        multi_line_start=_double(start),
        multi_line_middle=middle,
        multi_line_end=_double(end),
    )


def resolve_language(source, language_id: str) -> Optional[CommentDescriptor]:
    """Look up a language in a token source and resolve it in one step."""
    tokens = source.lookup(language_id)
    if tokens is None:
        logger.debug("No comment tokens for language %r", language_id)
        return None
    return resolve(tokens)

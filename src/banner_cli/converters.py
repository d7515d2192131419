from banner_formatter.models import CommentDescriptor, CommentTokens

from .models import DescriptorModel, LanguageEntry


def descriptor_to_model(language_id: str, descriptor: CommentDescriptor) -> DescriptorModel:
    """Convert an internal descriptor dataclass to its Pydantic output model"""
    return DescriptorModel(
        language_id=language_id,
        single_line_start=descriptor.single_line_start,
        single_line_end=descriptor.single_line_end,
        multi_line_start=descriptor.multi_line_start,
        multi_line_middle=descriptor.multi_line_middle,
        multi_line_end=descriptor.multi_line_end,
    )


def tokens_to_entry(language_id: str, tokens: CommentTokens) -> LanguageEntry:
    return LanguageEntry(
        language_id=language_id,
        line_token=tokens.line_token,
        block_start=tokens.block_start,
        block_end=tokens.block_end,
    )

from typing import Optional

from pydantic import BaseModel


class DescriptorModel(BaseModel):
    language_id: str
    single_line_start: str
    single_line_end: str
    multi_line_start: str
    multi_line_middle: str
    multi_line_end: str


class BannerOutput(BaseModel):
    language_id: str
    mode: str  # 'line' or 'block'
    column: int
    text: str
    banner: str


class LanguageEntry(BaseModel):
    language_id: str
    line_token: Optional[str] = None
    block_start: Optional[str] = None
    block_end: Optional[str] = None

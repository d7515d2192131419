class BannerError(Exception):
    """Base class for banner generation failures"""


class UnknownLanguageError(BannerError):
    def __init__(self, language_id: str):
        self.language_id = language_id
        super().__init__(f"No comment syntax known for language '{language_id}'")


class BufferEditError(BannerError):
    """The text buffer rejected an edit"""


class LanguageConfigError(BannerError):
    """A language configuration file could not be read or validated"""

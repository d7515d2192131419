import logging
import tomllib
from pathlib import Path
from typing import Any

from banner_formatter.languages import CommentSpec
from banner_formatter.models import FormatterConfig
from banner_formatter.sources import (
    BuiltinTokenSource,
    ChainedTokenSource,
    LanguageConfigSource,
    MappingTokenSource,
)

logger = logging.getLogger(__name__)


class BannerConfig:
    """Handles loading of .banner.toml (or [tool.banner] in pyproject.toml)"""

    def __init__(self, config_path: Path | None = None):
        self.width: int = 80
        self.filler: str = "-"
        self.language_configs: list[Path] = []
        self.languages: dict[str, CommentSpec] = {}

        if config_path and config_path.exists():
            self._load_from_file(config_path)

    def _load_from_file(self, path: Path):
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("Ignoring unreadable config %s: %s", path, e)
            return

        banner_data = data.get("tool", {}).get("banner", {})
        width = banner_data.get("width", self.width)
        if isinstance(width, int) and not isinstance(width, bool) and width > 0:
            self.width = width
        else:
            logger.warning("Ignoring invalid banner width %r; using %d", width, self.width)

        filler = banner_data.get("filler", self.filler)
        if isinstance(filler, str) and filler:
            self.filler = filler
        else:
            logger.warning("Ignoring invalid banner filler %r; using %r", filler, self.filler)

        # Relative paths are taken from the config file's directory
        base = path.parent
        self.language_configs = [base / p for p in banner_data.get("language_configs", [])]

        for language_id, entry in banner_data.get("languages", {}).items():
            spec = self._parse_language(language_id, entry)
            if spec is not None:
                self.languages[language_id] = spec

    @staticmethod
    def _parse_language(language_id: str, entry: Any) -> CommentSpec | None:
        if isinstance(entry, dict):
            if isinstance(entry.get("line"), str) and entry["line"]:
                return entry["line"]
            block = entry.get("block")
            if isinstance(block, list) and len(block) == 2 and all(isinstance(t, str) for t in block):
                return (block[0], block[1])
        logger.warning("Ignoring invalid comment syntax for language '%s': %r", language_id, entry)
        return None

    def formatter_config(self) -> FormatterConfig:
        return FormatterConfig(width=self.width, filler=self.filler)

    def build_source(self) -> ChainedTokenSource:
        """Config languages first, then language configuration files, then built-ins"""
        return ChainedTokenSource(
            MappingTokenSource(self.languages),
            LanguageConfigSource(directories=self.language_configs),
            BuiltinTokenSource(),
        )

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Protocol, Tuple, Union

import json5
from pydantic import BaseModel, Field

from .errors import LanguageConfigError
from .languages import BUILTIN_COMMENTS, CommentSpec
from .models import CommentTokens

logger = logging.getLogger(__name__)

CONFIG_SUFFIXES = (".language-configuration.json", ".json", ".json5")
MANIFEST_NAME = "package.json"


class CommentTokenSource(Protocol):
    """Anything that can report the comment syntax of a language id"""

    def lookup(self, language_id: str) -> Optional[CommentTokens]: ...

    def languages(self) -> List[str]: ...


def tokens_from_spec(spec: CommentSpec) -> CommentTokens:
    if isinstance(spec, str):
        return CommentTokens(line_token=spec)
    start, end = spec
    return CommentTokens(block_start=start, block_end=end)


class MappingTokenSource:
    """Token source backed by a language id -> line token / block pair mapping"""

    def __init__(self, mapping: Mapping[str, CommentSpec]):
        self._mapping: Dict[str, CommentSpec] = {k.lower(): v for k, v in mapping.items()}

    def lookup(self, language_id: str) -> Optional[CommentTokens]:
        spec = self._mapping.get(language_id.lower())
        if spec is None:
            return None
        return tokens_from_spec(spec)

    def languages(self) -> List[str]:
        return sorted(self._mapping)


class BuiltinTokenSource(MappingTokenSource):
    def __init__(self):
        super().__init__(BUILTIN_COMMENTS)


class LineCommentSetting(BaseModel):
    comment: str
    no_indent: bool = Field(False, alias="noIndent")


class CommentsSection(BaseModel):
    line_comment: Optional[Union[str, LineCommentSetting]] = Field(None, alias="lineComment")
    block_comment: Optional[Tuple[str, str]] = Field(None, alias="blockComment")

    def to_tokens(self) -> Optional[CommentTokens]:
        line = self.line_comment
        if isinstance(line, LineCommentSetting):
            line = line.comment
        if line:
            return CommentTokens(line_token=line)
        if self.block_comment and self.block_comment[0]:
            return CommentTokens(block_start=self.block_comment[0], block_end=self.block_comment[1])
        return None


class LanguageConfiguration(BaseModel):
    """The parts of a language-configuration.json this tool cares about"""

    comments: Optional[CommentsSection] = None


class LanguageContribution(BaseModel):
    id: str
    configuration: Optional[str] = None


class ContributesSection(BaseModel):
    languages: List[LanguageContribution] = []


class ExtensionManifest(BaseModel):
    """The language contributions of a VS Code extension package.json"""

    contributes: Optional[ContributesSection] = None


def load_extension_manifest(path: Path) -> ExtensionManifest:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json5.load(f)
        return ExtensionManifest.model_validate(data)
    except (OSError, ValueError) as e:
        raise LanguageConfigError(f"Cannot load extension manifest {path}: {e}") from e


def load_language_configuration(path: Path) -> LanguageConfiguration:
    """Parse a JSON5/JSONC language configuration file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json5.load(f)
        return LanguageConfiguration.model_validate(data)
    except (OSError, ValueError) as e:
        raise LanguageConfigError(f"Cannot load language configuration {path}: {e}") from e


def _language_id_for(path: Path) -> str:
    name = path.name
    for suffix in CONFIG_SUFFIXES:
        if name.endswith(suffix):
            return name[: -len(suffix)].lower()
    return path.stem.lower()


class LanguageConfigSource:
    """Reads comment tokens from language-configuration.json files.

    Files are given either explicitly as a language id -> path mapping or as
    directories. A directory holding a ``package.json`` is read as a VS Code
    extension: each ``contributes.languages[]`` entry maps its ``id`` to its
    ``configuration`` file, and the first extension to claim an id wins.
    Subdirectories that are extensions are read the same way, so a whole
    extensions folder can be scanned. Any other file is named after its
    language id (``python.json``, ``python.language-configuration.json``).
    Configuration files are read on every lookup.
    """

    def __init__(
        self,
        paths: Optional[Mapping[str, Union[str, Path]]] = None,
        directories: Iterable[Union[str, Path]] = (),
    ):
        self._paths: Dict[str, Path] = {}
        for directory in directories:
            self._scan(Path(directory))
        for language_id, path in (paths or {}).items():
            self._paths[language_id.lower()] = Path(path)

    def _scan(self, directory: Path) -> None:
        if directory.is_file():
            if directory.name == MANIFEST_NAME:
                self._scan_extension(directory)
            else:
                self._paths[_language_id_for(directory)] = directory
            return
        if not directory.is_dir():
            logger.warning("Language configuration path not found: %s", directory)
            return

        manifest = directory / MANIFEST_NAME
        if manifest.is_file():
            self._scan_extension(manifest)
            return

        for path in sorted(directory.iterdir()):
            if path.is_dir() and (path / MANIFEST_NAME).is_file():
                self._scan_extension(path / MANIFEST_NAME)
            elif path.is_file() and path.name.endswith(CONFIG_SUFFIXES):
                self._paths[_language_id_for(path)] = path

    def _scan_extension(self, manifest_path: Path) -> None:
        try:
            manifest = load_extension_manifest(manifest_path)
        except LanguageConfigError as e:
            logger.warning("%s", e)
            return
        if manifest.contributes is None:
            return

        for language in manifest.contributes.languages:
            if not language.configuration:
                continue
            config_path = manifest_path.parent / language.configuration
            self._paths.setdefault(language.id.lower(), config_path)

    def lookup(self, language_id: str) -> Optional[CommentTokens]:
        path = self._paths.get(language_id.lower())
        if path is None:
            return None
        try:
            config = load_language_configuration(path)
        except LanguageConfigError as e:
            logger.warning("%s", e)
            return None
        if config.comments is None:
            return None
        return config.comments.to_tokens()

    def languages(self) -> List[str]:
        return sorted(self._paths)


class ChainedTokenSource:
    """Consults several sources in order; the first hit wins"""

    def __init__(self, *sources: CommentTokenSource):
        self.sources = list(sources)

    def lookup(self, language_id: str) -> Optional[CommentTokens]:
        for source in self.sources:
            tokens = source.lookup(language_id)
            if tokens is not None:
                return tokens
        return None

    def languages(self) -> List[str]:
        seen = set()
        for source in self.sources:
            seen.update(source.languages())
        return sorted(seen)

"""
Built-in comment syntax for common languages.

Keys are VS Code language identifiers. A value is either a line comment
token (str) or a (block_start, block_end) pair.
"""

from pathlib import Path
from typing import Dict, Optional, Tuple, Union

CommentSpec = Union[str, Tuple[str, str]]

BUILTIN_COMMENTS: Dict[str, CommentSpec] = {
    # Hash comments
    "python": "#",
    "shellscript": "#",
    "powershell": "#",
    "ruby": "#",
    "perl": "#",
    "r": "#",
    "yaml": "#",
    "toml": "#",
    "makefile": "#",
    "dockerfile": "#",
    "coffeescript": "#",
    "julia": "#",
    "elixir": "#",
    "properties": "#",
    # C-style line comments
    "c": "//",
    "cpp": "//",
    "csharp": "//",
    "java": "//",
    "javascript": "//",
    "javascriptreact": "//",
    "typescript": "//",
    "typescriptreact": "//",
    "go": "//",
    "rust": "//",
    "swift": "//",
    "kotlin": "//",
    "scala": "//",
    "dart": "//",
    "php": "//",
    "groovy": "//",
    "jsonc": "//",
    "fsharp": "//",
    "scss": "//",
    "less": "//",
    # Dash comments
    "lua": "--",
    "sql": "--",
    "haskell": "--",
    "ada": "--",
    # Others
    "bat": "@REM",
    "clojure": ";",
    "lisp": ";",
    "ini": ";",
    "asm": ";",
    "latex": "%",
    "tex": "%",
    "matlab": "%",
    "erlang": "%",
    "vb": "'",
    "vim": '"',
    # Block-only languages
    "css": ("/*", "*/"),
    "html": ("<!--", "-->"),
    "xml": ("<!--", "-->"),
    "markdown": ("<!--", "-->"),
    "vue": ("<!--", "-->"),
    "ocaml": ("(*", "*)"),
    "pascal": ("(*", "*)"),
    "handlebars": ("{{!--", "--}}"),
}

EXTENSION_LANGUAGES: Dict[str, str] = {
    "py": "python",
    "pyi": "python",
    "sh": "shellscript",
    "bash": "shellscript",
    "zsh": "shellscript",
    "ps1": "powershell",
    "rb": "ruby",
    "pl": "perl",
    "r": "r",
    "yml": "yaml",
    "yaml": "yaml",
    "toml": "toml",
    "mk": "makefile",
    "coffee": "coffeescript",
    "jl": "julia",
    "ex": "elixir",
    "exs": "elixir",
    "properties": "properties",
    "c": "c",
    "h": "c",
    "cpp": "cpp",
    "cc": "cpp",
    "cxx": "cpp",
    "hpp": "cpp",
    "cs": "csharp",
    "java": "java",
    "js": "javascript",
    "mjs": "javascript",
    "cjs": "javascript",
    "jsx": "javascriptreact",
    "ts": "typescript",
    "tsx": "typescriptreact",
    "go": "go",
    "rs": "rust",
    "swift": "swift",
    "kt": "kotlin",
    "kts": "kotlin",
    "scala": "scala",
    "dart": "dart",
    "php": "php",
    "groovy": "groovy",
    "gradle": "groovy",
    "jsonc": "jsonc",
    "fs": "fsharp",
    "scss": "scss",
    "less": "less",
    "lua": "lua",
    "sql": "sql",
    "hs": "haskell",
    "adb": "ada",
    "ads": "ada",
    "bat": "bat",
    "cmd": "bat",
    "clj": "clojure",
    "lisp": "lisp",
    "el": "lisp",
    "ini": "ini",
    "cfg": "ini",
    "asm": "asm",
    "s": "asm",
    "tex": "latex",
    "m": "matlab",
    "erl": "erlang",
    "vb": "vb",
    "vim": "vim",
    "css": "css",
    "html": "html",
    "htm": "html",
    "xml": "xml",
    "svg": "xml",
    "md": "markdown",
    "vue": "vue",
    "ml": "ocaml",
    "mli": "ocaml",
    "pas": "pascal",
    "hbs": "handlebars",
}

SPECIAL_FILENAMES: Dict[str, str] = {
    "makefile": "makefile",
    "gnumakefile": "makefile",
    "dockerfile": "dockerfile",
}


def language_for_path(path: Union[str, Path]) -> Optional[str]:
    """Guess the language id of a file from its name or extension."""
    path = Path(path)
    name = path.name.lower()
    if name in SPECIAL_FILENAMES:
        return SPECIAL_FILENAMES[name]
    ext = path.suffix.lower().lstrip(".")
    return EXTENSION_LANGUAGES.get(ext)

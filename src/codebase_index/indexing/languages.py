"""
Language detection by file extension.

A flat lookup table, no content sniffing. Unknown extensions map to "text".
"""

# Extension (without the dot, lowercased) -> language tag
LANGUAGE_MAP = {
    "ts": "typescript",
    "tsx": "typescript",
    "js": "javascript",
    "jsx": "javascript",
    "py": "python",
    "rs": "rust",
    "go": "go",
    "java": "java",
    "cs": "csharp",
    "rb": "ruby",
    "css": "css",
    "scss": "css",
    "sass": "css",
    "html": "html",
    "vue": "vue",
    "svelte": "svelte",
    "json": "json",
    "yaml": "yaml",
    "yml": "yaml",
    "md": "markdown",
    "mdx": "markdown",
    "sh": "shell",
    "bash": "shell",
    "sql": "sql",
    "prisma": "prisma",
    "env": "env",
}

DEFAULT_LANGUAGE = "text"


def get_file_extension(file_path: str) -> str:
    """Text after the last dot of the file name, lowercased ("" if none)."""
    name = file_path.replace("\\", "/").rsplit("/", 1)[-1]
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[-1].lower()


def detect_language(file_path: str) -> str:
    """Map a file path to its language tag."""
    return LANGUAGE_MAP.get(get_file_extension(file_path), DEFAULT_LANGUAGE)

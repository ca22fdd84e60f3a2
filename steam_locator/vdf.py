"""Targeted key/value extraction from Valve KV1 text (VDF and ACF files)."""

import re
from pathlib import Path

# Keys this package ever reads
PATH_KEY = "path"
INSTALLDIR_KEY = "installdir"
PLATFORM_OVERRIDE_SOURCE_KEY = "platform_override_source"


def _key_pattern(key: str) -> re.Pattern[str]:
    # "key"<whitespace>"value", value is greedy up to the last quote on the line
    return re.compile(rf'"{re.escape(key)}"\s+"(.+)"')


_PATTERNS = {
    key: _key_pattern(key)
    for key in (PATH_KEY, INSTALLDIR_KEY, PLATFORM_OVERRIDE_SOURCE_KEY)
}


def _pattern(key: str) -> re.Pattern[str]:
    pattern = _PATTERNS.get(key)
    if pattern is None:
        pattern = _key_pattern(key)
    return pattern


def extract_field(text: str, key: str) -> str:
    """
    Return the first value quoted after ``"key"`` in the text.

    Returns an empty string when the key is absent or its value is empty.
    """
    match = _pattern(key).search(text)
    if match:
        return match.group(1)
    return ""


def extract_all(text: str, key: str) -> list[str]:
    """Return every value of ``"key"`` in text order."""
    return [m.group(1) for m in _pattern(key).finditer(text)]


def unescape_path(value: str) -> str:
    """Collapse VDF-escaped backslashes (Steam writes C:\\\\Games)."""
    return value.replace("\\\\", "\\")


def read_text(path: Path) -> str:
    """Read a VDF/ACF file, replacing undecodable bytes."""
    return path.read_text(encoding="utf-8", errors="replace")


def read_manifest_field(path: Path, key: str) -> str:
    """Read a manifest file and extract a single field from it."""
    return extract_field(read_text(path), key)

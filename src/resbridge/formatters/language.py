"""Mapping between Android resource directories and language codes."""

import logging
import os
import re
from pathlib import Path, PurePath
from typing import Optional, Union

logger = logging.getLogger(__name__)

BASE_DIRECTORY = "values"

# Android qualifier -> canonical language code
LANG_CODES = {
    "zh": "zh-Hans",
    "zh-rCN": "zh-Hans",
    "zh-rHK": "zh-Hant",
    "en-rGB": "en-UK",
    "in": "id",
    "nb": "no",
}

# If a language has no translation, try this one before giving up
DEFAULT_LANG_CODES = {
    "zh-TW": "zh-Hant",
}

VALUES_DIRECTORY_PATTERN = re.compile(r"^values(?:-(.+))?$")
REGION_PATTERN = re.compile(r"^([a-z]{2,3})-([A-Z]{2})$")


def determine_language_given_path(
    path: Union[str, PurePath],
    base_language: Optional[str] = None
) -> Optional[str]:
    """Determine the language of a resource file from its path.

    Examples:
      - "res/values/strings.xml"        -> base_language
      - "res/values-de/strings.xml"     -> "de"
      - "res/values-zh-rCN/strings.xml" -> "zh-Hans"
      - "res/values-pt-rBR/strings.xml" -> "pt-BR"

    Args:
        path: Path of a resource file or directory.
        base_language: Language of the unsuffixed "values" directory.

    Returns:
        The language code, or None if no segment names a values directory.
    """
    for segment in PurePath(path).parts:
        if segment == BASE_DIRECTORY:
            return base_language

        match = VALUES_DIRECTORY_PATTERN.match(segment)
        if match:
            lang = match.group(1)
            lang = LANG_CODES.get(lang, lang)
            lang = lang.replace("-r", "-", 1)
            logger.debug("Detected language '%s' from %s", lang, segment)
            return lang

    return None


def resource_directory_for_language(lang: str, base_language: Optional[str] = None) -> str:
    """Get the name of the values directory holding a language.

    Args:
        lang: Language code.
        base_language: Language stored in the unsuffixed directory.

    Returns:
        Directory name such as "values", "values-de" or "values-zh-rHK".
    """
    if lang == base_language:
        return BASE_DIRECTORY

    for qualifier, code in LANG_CODES.items():
        if code == lang:
            return f"{BASE_DIRECTORY}-{qualifier}"

    match = REGION_PATTERN.match(lang)
    if match:
        return f"{BASE_DIRECTORY}-{match.group(1)}-r{match.group(2)}"
    return f"{BASE_DIRECTORY}-{lang}"


def can_handle_directory(path: Union[str, Path]) -> bool:
    """Check whether a directory looks like an Android "res" directory."""
    return any(VALUES_DIRECTORY_PATTERN.match(item) for item in os.listdir(path))

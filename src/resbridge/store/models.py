"""Data models for the canonical translation store."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

UNCATEGORIZED_SECTION = "Uncategorized"


@dataclass
class Entry:
    """A single decoded string read from a resource file.

    Attributes:
        key: Identifier of the string within one language.
        text: Canonical text, without any platform escaping.
    """
    key: str
    text: str


@dataclass
class Row:
    """A translatable string and its translations.

    Attributes:
        key: The string key.
        comment: Optional comment for translators.
        translations: Mapping of language code to canonical text.
        tags: Tags used to select rows when writing.
    """
    key: str
    comment: Optional[str] = None
    translations: dict[str, str] = field(default_factory=dict)
    tags: set[str] = field(default_factory=set)

    def matches_tags(self, tags: Optional[Iterable[str]], include_untagged: bool = False) -> bool:
        """Check whether the row should be written for a tag filter.

        Args:
            tags: Requested tags. None or empty matches every row.
            include_untagged: Also match rows that have no tags.

        Returns:
            True if the row is selected.
        """
        requested = set(tags or ())
        if not requested:
            return True
        if include_untagged and not self.tags:
            return True
        return bool(requested & self.tags)

    def translated_string_for_lang(
        self,
        lang: str,
        default_lang: Optional[str] = None
    ) -> Optional[str]:
        """Get the translation for a language, trying a default language next."""
        value = self.translations.get(lang)
        if value is None and default_lang:
            value = self.translations.get(default_lang)
        return value


@dataclass
class Section:
    """A named, ordered group of rows."""
    name: str
    rows: list[Row] = field(default_factory=list)


class TranslationStore(ABC):
    """Capabilities the formatters need from a translation store."""

    @property
    @abstractmethod
    def sections(self) -> list[Section]:
        """Sections in output order."""
        pass

    @property
    @abstractmethod
    def language_codes(self) -> list[str]:
        """Known language codes, base language first."""
        pass

    @abstractmethod
    def get_translation(self, key: str, lang: str) -> Optional[str]:
        """Get the canonical text for a key and language."""
        pass

    @abstractmethod
    def set_translation(self, key: str, lang: str, text: str) -> bool:
        """Store the canonical text for a key and language.

        Returns:
            True if the translation was stored.
        """
        pass


class StringsStore(TranslationStore):
    """In-memory translation store organized into sections."""

    def __init__(
        self,
        language_codes: Optional[list[str]] = None,
        consume_all: bool = False,
        tags: Optional[Iterable[str]] = None
    ):
        """Initialize the store.

        Args:
            language_codes: Initial language codes, base language first.
            consume_all: Add unknown keys to an "Uncategorized" section
                instead of skipping them.
            tags: Tags given to rows created for unknown keys.
        """
        self._sections: list[Section] = []
        self._rows: dict[str, Row] = {}
        self._language_codes = list(language_codes or [])
        self.consume_all = consume_all
        self.tags = set(tags or ())

    @property
    def sections(self) -> list[Section]:
        return self._sections

    @property
    def language_codes(self) -> list[str]:
        return self._language_codes

    def add_language_code(self, lang: str) -> None:
        if lang not in self._language_codes:
            self._language_codes.append(lang)

    def add_section(self, name: str) -> Section:
        """Append a new empty section."""
        section = Section(name)
        self._sections.append(section)
        return section

    def add_row(self, section: Section, row: Row) -> Row:
        """Append a row to a section and index it by key."""
        if row.key in self._rows:
            raise ValueError(f"Duplicate key: {row.key}")
        section.rows.append(row)
        self._rows[row.key] = row
        return row

    def get_row(self, key: str) -> Optional[Row]:
        return self._rows.get(key)

    def get_translation(self, key: str, lang: str) -> Optional[str]:
        row = self._rows.get(key)
        if row is None:
            return None
        return row.translations.get(lang)

    def set_translation(self, key: str, lang: str, text: str) -> bool:
        """Store a translation.

        Unknown keys are added to the "Uncategorized" section when
        ``consume_all`` is set and skipped with a warning otherwise.
        """
        row = self._rows.get(key)
        if row is None:
            if not self.consume_all:
                logger.warning("'%s' not found in strings data, skipping", key)
                return False
            logger.info("Adding new string '%s' to strings data", key)
            row = Row(key, tags=set(self.tags))
            self.add_row(self._uncategorized_section(), row)
        row.translations[lang] = text
        self.add_language_code(lang)
        return True

    def _uncategorized_section(self) -> Section:
        for section in self._sections:
            if section.name == UNCATEGORIZED_SECTION:
                return section
        section = Section(UNCATEGORIZED_SECTION)
        self._sections.insert(0, section)
        return section

"""Reader and writer for Android strings.xml files."""

import logging
from pathlib import Path
from typing import Optional, Union
from xml.sax.saxutils import quoteattr

from lxml import etree

from ..config import FormatterConfig
from ..errors import ResourceParseError
from ..store import Entry, Row, TranslationStore
from .escaping import decode, encode
from .language import DEFAULT_LANG_CODES, can_handle_directory, determine_language_given_path

logger = logging.getLogger(__name__)

DEFAULT_FILE_NAME = "strings.xml"

HEADER = (
    '<?xml version="1.0" encoding="utf-8"?>\n'
    "<!-- Android Strings File -->\n"
    "<!-- Generated by resbridge -->\n"
    "<!-- Language: {lang} -->"
)


def _create_parser() -> etree.XMLParser:
    """Return an XML parser that never loads external resources."""
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        load_dtd=False,
        recover=False,
    )


def _comment(text: str) -> str:
    # "--" is not allowed inside XML comments
    return text.replace("--", "—")


class AndroidFormatter:
    """Converts between Android string resources and a translation store."""

    def __init__(self, store: TranslationStore, config: Optional[FormatterConfig] = None):
        """Initialize the formatter.

        Args:
            store: Store receiving read translations and providing rows to write.
            config: Formatter configuration.
        """
        self.store = store
        self.config = config or FormatterConfig()

    @property
    def base_language(self) -> Optional[str]:
        if self.store.language_codes:
            return self.store.language_codes[0]
        return self.config.base_language

    def default_file_name(self) -> str:
        return DEFAULT_FILE_NAME

    def can_handle_directory(self, path: Union[str, Path]) -> bool:
        return can_handle_directory(path)

    def determine_language_given_path(self, path: Union[str, Path]) -> Optional[str]:
        return determine_language_given_path(path, self.base_language)

    def parse(self, content: Union[str, bytes]) -> list[Entry]:
        """Parse a strings.xml document into canonical entries.

        Args:
            content: The document.

        Returns:
            Entries in document order.

        Raises:
            ResourceParseError: If the document is not well-formed XML.
        """
        if isinstance(content, str):
            content = content.encode("utf-8")
        try:
            root = etree.fromstring(content, parser=_create_parser())
        except etree.XMLSyntaxError as e:
            raise ResourceParseError(f"XML parse error: {e}") from e
        return self._entries(root)

    def parse_file(self, path: Union[str, Path]) -> list[Entry]:
        """Parse a strings.xml file into canonical entries.

        Raises:
            ResourceParseError: If the file is not well-formed XML.
        """
        with open(path, "rb") as f:
            try:
                tree = etree.parse(f, parser=_create_parser())
            except etree.XMLSyntaxError as e:
                logger.error("XML parse error in %s: %s", path, e)
                raise ResourceParseError(f"XML parse error in {path}: {e}", path=path) from e
        return self._entries(tree.getroot())

    def _entries(self, root) -> list[Entry]:
        entries = []
        if root.tag != "resources":
            return entries
        for element in root.iterchildren("string"):
            key = element.get("name")
            if not key:
                logger.debug("Skipping <string> element without a name")
                continue
            entries.append(Entry(key=key, text=decode(element.text or "")))
        return entries

    def read(self, content: Union[str, bytes], lang: str) -> int:
        """Read a strings.xml document into the store.

        Returns:
            Number of entries the store accepted.
        """
        return self._store_entries(self.parse(content), lang)

    def read_file(self, path: Union[str, Path], lang: str) -> int:
        """Read a strings.xml file into the store.

        Nothing is stored if the file cannot be parsed.

        Args:
            path: Path to the file.
            lang: Language of the file.

        Returns:
            Number of entries the store accepted.
        """
        count = self._store_entries(self.parse_file(path), lang)
        logger.debug("Read %d strings for '%s' from %s", count, lang, path)
        return count

    def _store_entries(self, entries: list[Entry], lang: str) -> int:
        stored = 0
        for entry in entries:
            if self.store.set_translation(entry.key, lang, entry.text):
                stored += 1
        return stored

    def _text_for_row(self, row: Row, lang: str, default_lang: Optional[str]) -> Optional[str]:
        value = row.translated_string_for_lang(lang, default_lang)
        if value is None and self.config.include_untranslated and self.base_language:
            value = row.translated_string_for_lang(self.base_language)
        return value

    def format(self, lang: str) -> str:
        """Format the store's translations for a language as strings.xml.

        Rows without a translation are left out so that Android falls back
        to the default resources at runtime.

        Args:
            lang: Language to write.

        Returns:
            The document.
        """
        default_lang = DEFAULT_LANG_CODES.get(lang)
        lines = [HEADER.format(lang=lang), "<resources>"]

        for section in self.store.sections:
            printed_section = False
            for row in section.rows:
                if not row.matches_tags(self.config.tags, self.config.include_untagged):
                    continue

                value = self._text_for_row(row, lang, default_lang)
                if value is None:
                    continue

                if not printed_section:
                    lines.append("")
                    if section.name:
                        lines.append(f"\t<!-- {_comment(section.name)} -->")
                    printed_section = True

                if row.comment:
                    lines.append(f"\t<!-- {_comment(row.comment)} -->")
                lines.append(f"\t<string name={quoteattr(row.key)}>{encode(value)}</string>")

        lines.append("</resources>")
        return "\n".join(lines) + "\n"

    def write_file(self, path: Union[str, Path], lang: str) -> None:
        """Write the store's translations for a language to a file.

        Args:
            path: Path to the output file.
            lang: Language to write.
        """
        content = self.format(lang)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        logger.debug("Wrote '%s' strings to %s", lang, path)

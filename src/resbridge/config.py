"""Configuration for the resource formatter."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class FormatterConfig:
    """Configuration for reading and writing resource files.

    Attributes:
        languages: Language codes of the translation set. The first entry
            is the base (reference) language.
        tags: Only rows carrying one of these tags are written. Empty
            means every row.
        include_untagged: Also write rows without any tag when filtering.
        include_untranslated: Fall back to the base language text for rows
            missing a translation.
        consume_all: Add keys found in resource files that the store does
            not know yet instead of skipping them.
        strict: Fail when a file's language cannot be determined instead of
            skipping the file.
    """
    languages: list[str] = field(default_factory=lambda: ["en"])
    tags: list[str] = field(default_factory=list)
    include_untagged: bool = False
    include_untranslated: bool = False
    consume_all: bool = False
    strict: bool = False

    @property
    def base_language(self) -> Optional[str]:
        """The reference language, or None if no languages are configured."""
        return self.languages[0] if self.languages else None

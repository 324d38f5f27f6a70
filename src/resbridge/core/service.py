"""Orchestration of resource imports and exports."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from ..config import FormatterConfig
from ..errors import UndeterminedLanguageError
from ..formatters import AndroidFormatter, resource_directory_for_language
from ..store import StringsStore, TranslationStore

logger = logging.getLogger(__name__)


@dataclass
class ImportReport:
    """Report of an import run.

    Attributes:
        files_read: Files that were read into the store.
        files_skipped: Files skipped because their language is unknown.
        languages: Languages read, in order of first appearance.
        strings_read: Number of strings stored.
    """
    files_read: list[Path] = field(default_factory=list)
    files_skipped: list[Path] = field(default_factory=list)
    languages: list[str] = field(default_factory=list)
    strings_read: int = 0


class ConversionService:
    """Moves translations between Android resource files and a store."""

    def __init__(
        self,
        config: Optional[FormatterConfig] = None,
        store: Optional[TranslationStore] = None
    ):
        """Initialize the service.

        Args:
            config: Formatter configuration.
            store: Translation store. Defaults to an empty in-memory store
                set up from the configuration.
        """
        self.config = config or FormatterConfig()
        self.store = store or StringsStore(
            language_codes=self.config.languages,
            consume_all=self.config.consume_all,
            tags=self.config.tags
        )
        self.formatter = AndroidFormatter(self.store, self.config)

    def _language_for(self, path: Path) -> Optional[str]:
        lang = self.formatter.determine_language_given_path(path)
        if lang is None:
            if self.config.strict:
                raise UndeterminedLanguageError(path)
            logger.warning("Unable to determine language for %s, skipping", path)
        return lang

    def import_files(self, paths: Iterable[Path], lang: Optional[str] = None) -> ImportReport:
        """Read resource files into the store.

        Args:
            paths: Files to read.
            lang: Language of all files. Determined from each path if omitted.

        Returns:
            ImportReport describing what was read.

        Raises:
            UndeterminedLanguageError: In strict mode, if a file's language
                cannot be determined.
            ResourceParseError: If a file is malformed.
        """
        report = ImportReport()
        for path in paths:
            path = Path(path)
            file_lang = lang or self._language_for(path)
            if file_lang is None:
                report.files_skipped.append(path)
                continue

            report.strings_read += self.formatter.read_file(path, file_lang)
            report.files_read.append(path)
            if file_lang not in report.languages:
                report.languages.append(file_lang)

        logger.info(
            "Read %d strings from %d files", report.strings_read, len(report.files_read)
        )
        return report

    def export_file(self, path: Path, lang: Optional[str] = None) -> Optional[Path]:
        """Write one language to a resource file.

        Args:
            path: Output file.
            lang: Language to write. Determined from the path if omitted.

        Returns:
            The written path, or None if the language is unknown and the
            file was skipped.
        """
        path = Path(path)
        lang = lang or self._language_for(path)
        if lang is None:
            return None

        path.parent.mkdir(parents=True, exist_ok=True)
        self.formatter.write_file(path, lang)
        return path

    def export_all(self, directory: Path, create: bool = False) -> list[Path]:
        """Write every configured language into an Android "res" directory.

        Args:
            directory: The "res" directory.
            create: Write even if the directory has no values directories yet.

        Returns:
            Paths of the written files.

        Raises:
            ValueError: If the directory is not a resource directory.
        """
        directory = Path(directory)
        if not create and not (directory.is_dir() and self.formatter.can_handle_directory(directory)):
            raise ValueError(f"Not an Android resource directory: {directory}")

        written = []
        for lang in self.store.language_codes:
            values_dir = resource_directory_for_language(lang, self.formatter.base_language)
            path = directory / values_dir / self.formatter.default_file_name()
            written.append(self.export_file(path, lang))
        return written

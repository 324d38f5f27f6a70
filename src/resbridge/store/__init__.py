"""Translation store models."""

from .models import Entry, Row, Section, StringsStore, TranslationStore

__all__ = ["Entry", "Row", "Section", "StringsStore", "TranslationStore"]

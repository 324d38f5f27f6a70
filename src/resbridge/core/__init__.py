"""Conversion workflow."""

from .service import ConversionService, ImportReport

__all__ = ["ConversionService", "ImportReport"]

"""Exceptions raised by resbridge."""


class ResbridgeError(Exception):
    """Base class for all resbridge errors."""


class ResourceParseError(ResbridgeError):
    """A resource document could not be parsed.

    Attributes:
        path: Path of the offending file, if the document came from disk.
    """

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path


class UndeterminedLanguageError(ResbridgeError):
    """No language could be derived from a resource path."""

    def __init__(self, path):
        super().__init__(f"Unable to determine language for {path}")
        self.path = path

"""Custom exceptions for dictionary loaders."""


class DictionaryError(Exception):
    """Raised when a term dictionary cannot be loaded."""
    pass


class DictionaryFormatError(DictionaryError, ValueError):
    """Raised when dictionary input is malformed beyond a skippable row."""
    pass


class UnsupportedDictionarySourceError(DictionaryError):
    """Raised when no loader accepts the given dictionary source."""
    pass

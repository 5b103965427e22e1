"""Custom exception hierarchy for puzzle generation and play."""


class WordSearchError(Exception):
    """Base exception for the package."""


class WordSourceError(WordSearchError):
    """Raised when a word list cannot be read or fetched."""


class ValidationError(WordSearchError):
    """Raised when a generated puzzle breaks a structural invariant."""

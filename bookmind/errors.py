# bookmind/errors.py — error types shared by the stores and the AI pipeline

from typing import Optional


class BookMindError(Exception):
    """Base error for BookMind failures."""


class ConfigurationError(BookMindError):
    """AI features are disabled or the API key is missing."""


class StoreError(BookMindError):
    """The bookmark store could not be read."""


class CompletionError(BookMindError):
    """A completion call failed. Never retried."""


class TransportError(CompletionError):
    pass


class ApiError(CompletionError):
    def __init__(self, message: str, error_type: Optional[str] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.type = error_type
        self.code = code


class EmptyResponseError(CompletionError):
    pass


class ParseError(CompletionError):
    pass

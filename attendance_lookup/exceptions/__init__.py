"""
Custom exceptions for the attendance lookup application.
These provide consistent error handling across the application.
"""


class AttendanceLookupException(Exception):
    """Base exception for all attendance lookup exceptions."""

    pass


class UpstreamException(AttendanceLookupException):
    """Base exception for errors talking to the spreadsheet script."""

    pass


class UpstreamUnavailableException(UpstreamException):
    """Raised when the spreadsheet script cannot be reached or answers with a bad status."""

    pass


class UpstreamDataException(UpstreamException):
    """Raised when the spreadsheet script answers with an error or an unusable payload."""

    pass


class TranslationException(AttendanceLookupException):
    """Base exception for translation errors."""

    pass


class TranslationUnavailableException(TranslationException):
    """Raised when every configured translation provider failed."""

    pass

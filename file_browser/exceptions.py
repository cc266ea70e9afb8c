"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class FileBrowserError(BaseAppError):
    """Exception raised for file browsing errors."""

    pass


class AccessDeniedError(FileBrowserError):
    """Exception raised when a path resolves outside of the root directory."""

    pass


class NotFoundError(FileBrowserError):
    """Exception raised when a target file or directory does not exist."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass

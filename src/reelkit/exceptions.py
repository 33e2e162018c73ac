"""Exceptions for reelkit.

The naming engine never raises for unparseable names; these exceptions
cover the surrounding layers (configuration and input loading) where a
bad file is a real error the caller must see.
"""


class ReelkitError(Exception):
    """Base exception for reelkit errors.

    All reelkit exceptions inherit from this class, allowing callers to
    catch every reelkit error with a single except clause.
    """


class ConfigError(ReelkitError):
    """Configuration file is unreadable or invalid."""


class TimelineLoadError(ReelkitError):
    """Timeline description is missing or invalid.

    Attributes:
        path: Path of the description that failed to load, if any.
    """

    def __init__(self, message: str, path: object | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Description of the failure.
            path: Path of the description that failed to load.
        """
        self.path = path
        super().__init__(message)

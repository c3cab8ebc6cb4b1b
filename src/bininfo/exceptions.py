"""Custom exceptions for bininfo."""


class BinInfoError(Exception):
    """Base exception for bininfo errors."""
    pass


class BinaryNotFoundError(BinInfoError, FileNotFoundError):
    """Binary path does not resolve to a file."""
    pass


class FileOpenError(BinInfoError):
    """Failed to open or read file."""
    pass


class TruncatedFileError(BinInfoError):
    """File ends before a fixed-offset header field."""
    pass


class NotAPEImageError(BinInfoError):
    """File does not have valid PE header."""
    pass


class VersionInfoUnavailableError(BinInfoError):
    """Binary carries no readable version resource."""
    pass


class ContentHashError(BinInfoError, OSError):
    """Failed to read file while computing its digest."""
    pass

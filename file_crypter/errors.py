"""Exception types raised by file_crypter."""


class FileCrypterError(Exception):
    """Base class for file_crypter errors."""


class InvalidSBoxError(FileCrypterError, ValueError):
    """Table is not exactly 256 bytes forming a permutation of 0..255."""

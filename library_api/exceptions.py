class LibraryError(Exception):
    """Base class for errors raised by the library API."""


class DataAccessFailure(LibraryError):
    """Reading from the author store failed."""

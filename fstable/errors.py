from typing import Optional


class FSTableError(Exception):
    """Base class for fstable errors.

    Attributes
    ----------
    message : str
        Human-readable description.
    cause : Optional[BaseException]
        Underlying exception, if any.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class AccessError(FSTableError):
    """Directory cannot be opened or enumerated."""

    def __init__(self, path: str, cause: OSError):
        reason = cause.strerror or str(cause)
        super().__init__(f"cannot list '{path}': {reason}", cause)
        self.path = path


class MetadataError(FSTableError):
    """Metadata of a single listed child cannot be retrieved."""

    def __init__(self, path: str, cause: OSError):
        reason = cause.strerror or str(cause)
        super().__init__(f"cannot stat '{path}': {reason}", cause)
        self.path = path

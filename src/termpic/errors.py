class TermpicError(Exception):
    """Base class for all failures that end a render."""


class UsageError(TermpicError):
    pass


class PathError(TermpicError):
    pass


class FileReadError(TermpicError, OSError):
    pass


class DecodeError(TermpicError):
    pass


class TerminalError(TermpicError):
    pass


class GeometryError(TermpicError, ValueError):
    pass
